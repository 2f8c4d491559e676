"""Utility modules for cheatview."""
