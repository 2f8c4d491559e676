"""Configuration for cheatview."""

from .settings import (
    get_cheatsheet_dir,
    get_log_dir,
    get_log_level_name,
    parse_log_level,
)

__all__ = [
    "get_cheatsheet_dir",
    "get_log_dir",
    "get_log_level_name",
    "parse_log_level",
]
