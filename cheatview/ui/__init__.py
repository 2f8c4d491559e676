"""UI package for the cheatview terminal viewer.

- state: the view state machine (pure transitions, no widgets)
- filtering and tag_menu: the derived list and the tag strip window
- rendering: state to Rich Text
- app: the Textual app that runs it all

The app is built on the Textual framework; content is Rich Text.
"""
