"""
View state machine for the cheat sheet viewer.

The whole UI state is one frozen ViewState. transition() takes a state and
one event and returns the next state plus the effects the app must run
(start a load, scroll the detail pane, quit). Nothing here does I/O or
touches widgets, so every rule can be exercised without a terminal.

Modes:
    SELECTOR        choosing a sheet from the discovered list
    LIST            browsing entries, filtered by the selected tag
    DETAIL          one entry in full
    SEARCH_EDITING  typing a search query, list filtered live
    SEARCH_APPLIED  query confirmed, list stays filtered by it

While a search is active the tag filter is suspended, and left/right are
ignored so the search is never replaced by a tag change. A load failure sets
last_error and freezes everything except quit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional, Union, assert_never

from ..config.constants import (
    ALL_TAG,
    DEFAULT_CHEATSHEET_DIR,
    DEFAULT_TERMINAL_HEIGHT,
    DEFAULT_TERMINAL_WIDTH,
)
from ..exceptions import LoadError
from ..models.sheets import Catalog, Entry
from .filtering import derive_visible_entries, unique_tags
from .keybindings import Action, action_for

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Mutually exclusive UI modes."""

    SELECTOR = "selector"
    LIST = "list"
    DETAIL = "detail"
    SEARCH_EDITING = "search_editing"
    SEARCH_APPLIED = "search_applied"


SEARCH_MODES = (Mode.SEARCH_EDITING, Mode.SEARCH_APPLIED)


@dataclass(frozen=True)
class ErrorInfo:
    """A load failure as shown to the user."""

    kind: str
    message: str
    path: Optional[str] = None

    @classmethod
    def from_exception(cls, error: LoadError) -> ErrorInfo:
        return cls(kind=error.kind, message=str(error), path=error.path)


# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``key`` is the Textual key name."""

    key: str
    character: Optional[str] = None


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class SheetsDiscovered:
    sheets: tuple[str, ...]
    seq: int


@dataclass(frozen=True)
class CatalogLoaded:
    catalog: Catalog
    seq: int


@dataclass(frozen=True)
class LoadFailed:
    error: ErrorInfo
    seq: int


Event = Union[KeyEvent, ResizeEvent, SheetsDiscovered, CatalogLoaded, LoadFailed]


# =============================================================================
# Effects
# =============================================================================


@dataclass(frozen=True)
class LoadSheet:
    """Load the sheet at ``path`` and report back with ``seq``."""

    path: str
    seq: int


@dataclass(frozen=True)
class DiscoverSheets:
    """List the sheets under ``directory`` and report back with ``seq``."""

    directory: str
    seq: int


@dataclass(frozen=True)
class ScrollDetail:
    """Scroll the detail pane by ``delta`` lines."""

    delta: int


@dataclass(frozen=True)
class ResetScroll:
    """Scroll the content pane back to the top."""


@dataclass(frozen=True)
class Quit:
    """Leave the application."""


Effect = Union[LoadSheet, DiscoverSheets, ScrollDetail, ResetScroll, Quit]


# =============================================================================
# State
# =============================================================================


@dataclass(frozen=True)
class ViewState:
    """Everything the renderer needs. ``visible_entries`` is derived."""

    mode: Mode = Mode.LIST
    catalog: Optional[Catalog] = None
    tag_menu: tuple[str, ...] = (ALL_TAG,)
    selected_tag_index: int = 0
    selected_entry_index: int = 0
    search_query: str = ""
    visible_entries: tuple[Entry, ...] = ()
    detail_entry: Optional[Entry] = None
    detail_return_mode: Mode = Mode.LIST
    sheets: tuple[str, ...] = ()
    selected_sheet_index: int = 0
    sheet_dir: str = DEFAULT_CHEATSHEET_DIR
    terminal_width: int = DEFAULT_TERMINAL_WIDTH
    terminal_height: int = DEFAULT_TERMINAL_HEIGHT
    last_error: Optional[ErrorInfo] = None
    load_seq: int = 0
    loading: bool = False

    @property
    def search_active(self) -> bool:
        """True while the search, not the tag, drives the list."""
        if self.mode in SEARCH_MODES:
            return True
        return self.mode is Mode.DETAIL and self.detail_return_mode is Mode.SEARCH_APPLIED

    @property
    def selected_tag(self) -> str:
        return self.tag_menu[self.selected_tag_index]

    @property
    def selected_entry(self) -> Optional[Entry]:
        if 0 <= self.selected_entry_index < len(self.visible_entries):
            return self.visible_entries[self.selected_entry_index]
        return None


class Transition(NamedTuple):
    state: ViewState
    effects: tuple[Effect, ...] = ()


def _clamp(value: int, upper: int) -> int:
    """Clamp into [0, upper - 1]; 0 for an empty range."""
    return min(max(value, 0), max(upper - 1, 0))


def _settle(state: ViewState) -> ViewState:
    """Recompute derived state and pull every index back into range."""
    tag_index = _clamp(state.selected_tag_index, len(state.tag_menu))
    query = state.search_query if state.search_active else None
    visible = derive_visible_entries(state.catalog, state.tag_menu, tag_index, query)
    return replace(
        state,
        selected_tag_index=tag_index,
        visible_entries=visible,
        selected_entry_index=_clamp(state.selected_entry_index, len(visible)),
        selected_sheet_index=_clamp(state.selected_sheet_index, len(state.sheets)),
    )


def initial_state(
    sheet_dir: str,
    sheet_path: Optional[str] = None,
    width: int = DEFAULT_TERMINAL_WIDTH,
    height: int = DEFAULT_TERMINAL_HEIGHT,
) -> Transition:
    """Starting state and the first load.

    With ``sheet_path`` the sheet is loaded directly and the selector is
    skipped. Without it the selector opens and the directory is scanned.
    """
    state = ViewState(
        sheet_dir=sheet_dir,
        terminal_width=width,
        terminal_height=height,
        load_seq=1,
        loading=True,
    )
    if sheet_path:
        return Transition(_settle(state), (LoadSheet(sheet_path, 1),))
    state = replace(state, mode=Mode.SELECTOR)
    return Transition(_settle(state), (DiscoverSheets(sheet_dir, 1),))


# =============================================================================
# Transition
# =============================================================================


def transition(state: ViewState, event: Event) -> Transition:
    """Apply one event. The input state is never modified."""
    if isinstance(event, KeyEvent):
        result = _on_key(state, event)
    elif isinstance(event, ResizeEvent):
        result = _on_resize(state, event)
    elif isinstance(event, SheetsDiscovered):
        result = _on_sheets_discovered(state, event)
    elif isinstance(event, CatalogLoaded):
        result = _on_catalog_loaded(state, event)
    elif isinstance(event, LoadFailed):
        result = _on_load_failed(state, event)
    else:
        assert_never(event)

    if result.state is state:
        return result
    return Transition(_settle(result.state), result.effects)


def _is_stale(state: ViewState, seq: int) -> bool:
    if seq != state.load_seq:
        logger.debug(f"Discarding stale load result {seq} (current {state.load_seq})")
        return True
    return False


def _on_resize(state: ViewState, event: ResizeEvent) -> Transition:
    if state.last_error is not None:
        return Transition(state)
    return Transition(replace(state, terminal_width=event.width, terminal_height=event.height))


def _on_sheets_discovered(state: ViewState, event: SheetsDiscovered) -> Transition:
    if state.last_error is not None or _is_stale(state, event.seq):
        return Transition(state)
    return Transition(
        replace(state, sheets=tuple(event.sheets), selected_sheet_index=0, loading=False)
    )


def _on_catalog_loaded(state: ViewState, event: CatalogLoaded) -> Transition:
    if state.last_error is not None or _is_stale(state, event.seq):
        return Transition(state)
    catalog = event.catalog
    logger.info(f"Showing '{catalog.title}' ({len(catalog.entries)} commands)")
    new_state = replace(
        state,
        mode=Mode.LIST,
        catalog=catalog,
        tag_menu=unique_tags(catalog.entries),
        selected_tag_index=0,
        selected_entry_index=0,
        search_query="",
        detail_entry=None,
        detail_return_mode=Mode.LIST,
        loading=False,
    )
    return Transition(new_state, (ResetScroll(),))


def _on_load_failed(state: ViewState, event: LoadFailed) -> Transition:
    if state.last_error is not None or _is_stale(state, event.seq):
        return Transition(state)
    logger.error(f"Load failed: {event.error.message}")
    return Transition(replace(state, last_error=event.error, loading=False))


def _on_key(state: ViewState, event: KeyEvent) -> Transition:
    action = action_for(event.key, editing=state.mode is Mode.SEARCH_EDITING)
    if action is Action.QUIT:
        return Transition(state, (Quit(),))
    if state.last_error is not None:
        return Transition(state)

    handler = _KEY_HANDLERS[state.mode]
    return handler(state, action, event)


def _open_selector(state: ViewState) -> Transition:
    seq = state.load_seq + 1
    new_state = replace(
        state,
        mode=Mode.SELECTOR,
        selected_sheet_index=0,
        search_query="",
        detail_entry=None,
        detail_return_mode=Mode.LIST,
        load_seq=seq,
        loading=True,
    )
    return Transition(new_state, (DiscoverSheets(state.sheet_dir, seq),))


def _move_entry(state: ViewState, delta: int) -> Transition:
    index = _clamp(state.selected_entry_index + delta, len(state.visible_entries))
    if index == state.selected_entry_index:
        return Transition(state)
    return Transition(replace(state, selected_entry_index=index))


def _open_detail(state: ViewState, return_mode: Mode) -> Transition:
    entry = state.selected_entry
    if entry is None:
        return Transition(state)
    new_state = replace(
        state, mode=Mode.DETAIL, detail_entry=entry, detail_return_mode=return_mode
    )
    return Transition(new_state, (ResetScroll(),))


def _leave_search(state: ViewState) -> Transition:
    return Transition(
        replace(state, mode=Mode.LIST, search_query="", selected_entry_index=0)
    )


def _selector_key(state: ViewState, action: Optional[Action], event: KeyEvent) -> Transition:
    if action is Action.UP or action is Action.DOWN:
        delta = -1 if action is Action.UP else 1
        index = _clamp(state.selected_sheet_index + delta, len(state.sheets))
        return Transition(replace(state, selected_sheet_index=index))
    if action is Action.ENTER:
        if not state.sheets:
            return Transition(state)
        sheet = state.sheets[state.selected_sheet_index]
        seq = state.load_seq + 1
        path = str(Path(state.sheet_dir) / sheet)
        logger.info(f"Opening cheat sheet {path}")
        return Transition(replace(state, load_seq=seq, loading=True), (LoadSheet(path, seq),))
    if action is Action.BACK and state.catalog is not None:
        # Bumping the sequence drops any load still in flight
        return Transition(
            replace(state, mode=Mode.LIST, load_seq=state.load_seq + 1, loading=False)
        )
    return Transition(state)


def _list_key(state: ViewState, action: Optional[Action], event: KeyEvent) -> Transition:
    if action is Action.UP:
        return _move_entry(state, -1)
    if action is Action.DOWN:
        return _move_entry(state, 1)
    if action is Action.LEFT or action is Action.RIGHT:
        delta = -1 if action is Action.LEFT else 1
        index = _clamp(state.selected_tag_index + delta, len(state.tag_menu))
        if index == state.selected_tag_index:
            return Transition(state)
        logger.debug(f"Tag filter: {state.tag_menu[index]}")
        return Transition(replace(state, selected_tag_index=index, selected_entry_index=0))
    if action is Action.ENTER:
        return _open_detail(state, Mode.LIST)
    if action is Action.SEARCH and state.catalog is not None:
        return Transition(
            replace(state, mode=Mode.SEARCH_EDITING, search_query="", selected_entry_index=0)
        )
    if action is Action.OPEN_SELECTOR:
        return _open_selector(state)
    return Transition(state)


def _detail_key(state: ViewState, action: Optional[Action], event: KeyEvent) -> Transition:
    if action is Action.UP:
        return Transition(state, (ScrollDetail(-1),))
    if action is Action.DOWN:
        return Transition(state, (ScrollDetail(1),))
    if action is Action.BACK:
        return Transition(
            replace(state, mode=state.detail_return_mode, detail_entry=None)
        )
    if action is Action.OPEN_SELECTOR:
        return _open_selector(state)
    return Transition(state)


def _search_editing_key(
    state: ViewState, action: Optional[Action], event: KeyEvent
) -> Transition:
    if action is None:
        char = event.character
        if char is None or len(char) != 1 or not char.isprintable():
            return Transition(state)
        return Transition(
            replace(state, search_query=state.search_query + char, selected_entry_index=0)
        )
    if action is Action.ERASE:
        if not state.search_query:
            return Transition(state)
        return Transition(
            replace(state, search_query=state.search_query[:-1], selected_entry_index=0)
        )
    if action is Action.UP:
        return _move_entry(state, -1)
    if action is Action.DOWN:
        return _move_entry(state, 1)
    if action is Action.ENTER:
        logger.debug(f"Search applied: {state.search_query!r}")
        return Transition(replace(state, mode=Mode.SEARCH_APPLIED))
    if action is Action.BACK:
        return _leave_search(state)
    return Transition(state)


def _search_applied_key(
    state: ViewState, action: Optional[Action], event: KeyEvent
) -> Transition:
    if action is Action.UP:
        return _move_entry(state, -1)
    if action is Action.DOWN:
        return _move_entry(state, 1)
    if action is Action.ENTER:
        return _open_detail(state, Mode.SEARCH_APPLIED)
    if action is Action.BACK:
        return _leave_search(state)
    if action is Action.OPEN_SELECTOR:
        return _open_selector(state)
    return Transition(state)


_KEY_HANDLERS = {
    Mode.SELECTOR: _selector_key,
    Mode.LIST: _list_key,
    Mode.DETAIL: _detail_key,
    Mode.SEARCH_EDITING: _search_editing_key,
    Mode.SEARCH_APPLIED: _search_applied_key,
}
