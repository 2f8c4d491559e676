"""
cheatview - Terminal Cheat Sheet Viewer
"""

__version__ = "0.3.0"
