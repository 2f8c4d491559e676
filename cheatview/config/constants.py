"""
Centralized constants for cheatview.

Defaults, environment variable names and layout measurements live here so
the CLI, the settings layer and the UI agree on them.
"""

# =============================================================================
# ENVIRONMENT
# =============================================================================

CHEATSHEET_DIR_ENV = "CHEATSHEET_DIR"
LOG_LEVEL_ENV = "CHEATVIEW_LOG_LEVEL"
LOG_DIR_ENV = "CHEATVIEW_LOG_DIR"

DEFAULT_CHEATSHEET_DIR = "cheatsheets"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_DIR = "logs"

LOG_LEVEL_NAMES = [
    "trace",
    "debug",
    "info",
    "warn",
    "warning",
    "error",
    "fatal",
    "critical",
    "panic",
]

ENV_VAR_DEFINITIONS: dict[str, dict] = {
    CHEATSHEET_DIR_ENV: {
        "description": "Directory scanned for cheat sheet YAML files",
        "default": DEFAULT_CHEATSHEET_DIR,
        "valid_values": None,
    },
    LOG_LEVEL_ENV: {
        "description": "Log level for the rotating log file",
        "default": DEFAULT_LOG_LEVEL,
        "valid_values": LOG_LEVEL_NAMES,
    },
    LOG_DIR_ENV: {
        "description": "Directory that receives the daily log files",
        "default": DEFAULT_LOG_DIR,
        "valid_values": None,
    },
}

# =============================================================================
# SHEET FILES
# =============================================================================

SHEET_SUFFIXES = (".yaml", ".yml")

# =============================================================================
# LOGGING
# =============================================================================

LOG_FILE_NAME = "application.log"
LOG_BACKUP_DAYS = 7
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# LAYOUT
# =============================================================================

ALL_TAG = "all"

# Columns the tag strip loses to its border and inner padding
TAG_MENU_OUTER_PADDING = 8
# One column of padding each side of a tag label plus one column of margin
TAG_CELL_PADDING = 3

LEFT_MARKER = "« "
RIGHT_MARKER = " »"

DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_TERMINAL_HEIGHT = 24
