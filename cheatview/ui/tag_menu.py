"""
Tag menu windowing.

The tag strip is one row with a fixed width. window_tags picks the run of
tags that fits, always including the selected one, and reports whether tags
were cut off on either side so the strip can show scroll markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from rich.cells import cell_len

from ..config.constants import TAG_CELL_PADDING, TAG_MENU_OUTER_PADDING


def tag_cell_width(label: str) -> int:
    """Rendered width of one tag cell, padding and margin included."""
    return cell_len(label) + TAG_CELL_PADDING


def tag_budget(terminal_width: int) -> int:
    """Columns available to tag cells on a terminal ``terminal_width`` wide."""
    return max(terminal_width - TAG_MENU_OUTER_PADDING, 0)


@dataclass(frozen=True)
class TagCell:
    """One visible tag."""

    label: str
    index: int
    selected: bool = False


@dataclass(frozen=True)
class TagWindow:
    """The visible slice of the tag menu."""

    cells: tuple[TagCell, ...]
    left_marker: bool = False
    right_marker: bool = False

    def labels(self) -> list[str]:
        return [cell.label for cell in self.cells]


def window_tags(
    tags: Sequence[str],
    selected: int,
    budget: int,
    measure: Callable[[str], int] = tag_cell_width,
) -> TagWindow:
    """Choose the tags to show in a strip ``budget`` columns wide.

    The selected tag is committed first. The window then grows left from the
    selection until a tag does not fit, then right the same way. Markers are
    added afterwards and are not counted against the budget.

    Args:
        tags: Tag menu, "all" first; must not be empty
        selected: Selected index, clamped into range
        budget: Columns available for tag cells
        measure: Width of a tag cell

    Returns:
        The visible cells in menu order. If the selected tag alone is wider
        than the budget it is returned alone, without markers.
    """
    if not tags:
        raise ValueError("tag menu is empty")

    last = len(tags) - 1
    selected = min(max(selected, 0), last)

    used = measure(tags[selected])
    if used > budget:
        return TagWindow(cells=(TagCell(tags[selected], selected, selected=True),))

    first_shown = selected
    for i in range(selected - 1, -1, -1):
        width = measure(tags[i])
        if used + width > budget:
            break
        used += width
        first_shown = i

    last_shown = selected
    for i in range(selected + 1, last + 1):
        width = measure(tags[i])
        if used + width > budget:
            break
        used += width
        last_shown = i

    cells = tuple(
        TagCell(tags[i], i, selected=(i == selected)) for i in range(first_shown, last_shown + 1)
    )
    return TagWindow(
        cells=cells,
        left_marker=first_shown > 0,
        right_marker=last_shown < last,
    )
