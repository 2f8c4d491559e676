"""Services for cheatview."""

from .sheet_loader import discover_sheets, load_sheet

__all__ = ["discover_sheets", "load_sheet"]
