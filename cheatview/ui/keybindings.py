"""
Key map for the viewer.

Keys are Textual key names and are matched exactly. Printable characters
that are not bound here are still delivered to the state machine, since
search editing consumes them as text.
"""

from enum import Enum
from typing import Dict, Optional


class Action(Enum):
    """What a key press asks for, before the current mode interprets it."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    BACK = "back"
    QUIT = "quit"
    SEARCH = "search"
    OPEN_SELECTOR = "open_selector"
    ERASE = "erase"


KEYMAP: Dict[str, Action] = {
    "up": Action.UP,
    "k": Action.UP,
    "down": Action.DOWN,
    "j": Action.DOWN,
    "left": Action.LEFT,
    "h": Action.LEFT,
    "right": Action.RIGHT,
    "l": Action.RIGHT,
    "enter": Action.ENTER,
    "escape": Action.BACK,
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "slash": Action.SEARCH,
    "/": Action.SEARCH,
    "o": Action.OPEN_SELECTOR,
    "backspace": Action.ERASE,
}

# Keys that keep their meaning while the search query is being typed
SEARCH_EDITING_KEYS: Dict[str, Action] = {
    "up": Action.UP,
    "down": Action.DOWN,
    "enter": Action.ENTER,
    "escape": Action.BACK,
    "ctrl+c": Action.QUIT,
    "backspace": Action.ERASE,
}


def action_for(key: str, editing: bool = False) -> Optional[Action]:
    """Look up the action bound to ``key``.

    Args:
        key: Textual key name, e.g. "j", "escape", "ctrl+c"
        editing: True while a search query is being typed

    Returns:
        The bound action, or None
    """
    keymap = SEARCH_EDITING_KEYS if editing else KEYMAP
    return keymap.get(key)


def help_text(mode_name: str) -> str:
    """Key help shown in the footer line for a mode."""
    return HELP_TEXT.get(mode_name, HELP_TEXT["list"])


HELP_TEXT: Dict[str, str] = {
    "selector": "↑/↓: Navigate • Enter: Select • Esc: Back • q: Quit",
    "list": (
        "↑/↓: Navigate • ←/→: Tag Filter • /: Search • Enter: View details • "
        "o: Open cheatsheet • q: Quit"
    ),
    "detail": "↑/↓: Scroll • Esc: Back • o: Open cheatsheet • q: Quit",
    "search_editing": "Type to search • Enter: Apply • Esc: Cancel • Ctrl+C: Quit",
    "search_applied": (
        "↑/↓: Navigate • Enter: View details • Esc: Clear search • "
        "o: Open cheatsheet • q: Quit"
    ),
    "error": "q: Quit",
}
