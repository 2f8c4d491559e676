"""
Render styles.

RenderStyles is an immutable value handed to every render function. Swap
styles by building another instance (see PLAIN_STYLES), never by editing a
shared table.
"""

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class RenderStyles:
    """Rich styles for each piece of rendered content."""

    header: Style = Style(bold=True, color="#FFFDF5", bgcolor="#2D9CDB")
    detail_header: Style = Style(bold=True, color="#FFFDF5", bgcolor="#25A065")
    heading: Style = Style(bold=True, color="#FAFAFA")
    syntax: Style = Style(color="#5AF78E")
    option_flag: Style = Style(color="#F3A922")
    option_desc: Style = Style(color="#DDDDDD")
    note: Style = Style(color="#A8A8A8", italic=True)
    selected: Style = Style(bold=True, color="#FFFFFF", bgcolor="#3C3836")
    normal: Style = Style()
    number: Style = Style(color="#777777")
    tag: Style = Style(color="#89DDFF", italic=True)
    complexity: Style = Style(color="#B5E8B5")
    code_block: Style = Style(color="#B8BB26", bgcolor="#282828")
    marker: Style = Style(color="#777777")
    search_prompt: Style = Style(bold=True, color="#5AF78E")
    search_cursor: Style = Style(color="#FFFFFF", bgcolor="#5AF78E")
    search_indicator: Style = Style(color="#5AF78E")
    help: Style = Style(color="#626262")
    error: Style = Style(bold=True, color="#BA3C5B")


DEFAULT_STYLES = RenderStyles()

# Every style blank; used for logs and for comparing rendered text in tests
PLAIN_STYLES = RenderStyles(**{name: Style() for name in RenderStyles.__dataclass_fields__})
