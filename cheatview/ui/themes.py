"""
Textual themes for the cheatview app.

Themes only color the widget chrome (borders, backgrounds). Text content is
styled by RenderStyles.
"""

from typing import Any

from textual.theme import Theme

# =============================================================================
# Cheatview Dark Theme (Default)
# =============================================================================

CHEATVIEW_DARK = Theme(
    name="cheatview-dark",
    primary="#2D9CDB",      # Header blue
    secondary="#25A065",    # Detail header green
    accent="#F3A922",       # Option flags
    foreground="#E0E0E0",
    background="#121212",
    surface="#1E1E1E",
    panel="#252526",
    boost="#2D2D2D",
    success="#5AF78E",      # Search prompt
    warning="#F3A922",
    error="#BA3C5B",
    dark=True,
)

# =============================================================================
# Cheatview Light Theme
# =============================================================================

CHEATVIEW_LIGHT = Theme(
    name="cheatview-light",
    primary="#0969DA",
    secondary="#1A7F37",
    accent="#9A6700",
    foreground="#1F2328",
    background="#FFFFFF",
    surface="#F6F8FA",
    panel="#F0F2F5",
    boost="#DFE3E8",
    success="#1A7F37",
    warning="#9A6700",
    error="#CF222E",
    dark=False,
)

CHEATVIEW_THEMES: dict[str, Theme] = {
    theme.name: theme for theme in (CHEATVIEW_DARK, CHEATVIEW_LIGHT)
}

DEFAULT_THEME = CHEATVIEW_DARK.name


def register_all_themes(app: Any) -> None:
    """
    Register all cheatview themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in CHEATVIEW_THEMES.values():
        app.register_theme(theme)


def get_theme_names() -> list[str]:
    """Get list of all available cheatview theme names."""
    return list(CHEATVIEW_THEMES.keys())
