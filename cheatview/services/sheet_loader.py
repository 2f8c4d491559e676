"""
Sheet loading and discovery.

Both functions block on file I/O. The app calls them through
asyncio.to_thread from a worker, never from the message loop directly.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

import yaml

from ..config.constants import SHEET_SUFFIXES
from ..exceptions import DiscoveryError, SheetParseError, SheetReadError
from ..models.sheets import Catalog

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_sheet(path: PathLike) -> Catalog:
    """Load and parse one cheat sheet file.

    Args:
        path: Path to a YAML sheet

    Returns:
        The parsed Catalog

    Raises:
        SheetReadError: The file is missing or unreadable
        SheetParseError: The file is not YAML or not shaped like a sheet
    """
    path = Path(path)
    logger.debug(f"Loading cheat sheet from {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SheetReadError(f"Cannot read cheat sheet: {e}", path=str(path)) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SheetParseError(f"Invalid YAML: {e}", path=str(path)) from e

    # An empty file is an empty sheet
    if data is None:
        data = {}

    try:
        catalog = Catalog.from_dict(data)
    except ValueError as e:
        raise SheetParseError(f"Malformed cheat sheet: {e}", path=str(path)) from e

    logger.info(f"Loaded '{catalog.title}' with {len(catalog.entries)} commands from {path}")
    return catalog


def _is_sheet(name: str) -> bool:
    return name.lower().endswith(SHEET_SUFFIXES)


def discover_sheets(directory: PathLike) -> List[str]:
    """Recursively list the sheet files under a directory.

    Args:
        directory: Root directory to scan

    Returns:
        Sheet paths relative to ``directory`` (forward slashes), sorted

    Raises:
        DiscoveryError: The directory is missing or part of it is unreadable
    """
    root = Path(directory)
    if not root.is_dir():
        raise DiscoveryError(f"Not a directory: {root}", path=str(root))

    def _raise(err: OSError) -> None:
        raise DiscoveryError(f"Cannot scan directory: {err}", path=str(root)) from err

    sheets = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for filename in filenames:
            if _is_sheet(filename):
                relative = (Path(dirpath) / filename).relative_to(root)
                sheets.append(relative.as_posix())

    sheets.sort()
    logger.debug(f"Discovered {len(sheets)} cheat sheets under {root}")
    return sheets
