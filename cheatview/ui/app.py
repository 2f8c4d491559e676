"""
Cheat sheet viewer app.

The app owns the single ViewState. Every key press, resize and load result
becomes one state-machine event; the app applies transition(), re-renders the
four text blocks and runs the returned effects. Loads run in workers (blocking
I/O goes through asyncio.to_thread) and come back as messages on the app's
own queue, so the state is only ever touched from the message loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Optional, assert_never

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Static

from ..exceptions import LoadError
from ..models.sheets import Catalog
from ..services.sheet_loader import discover_sheets, load_sheet
from .rendering import APP_TITLE, entry_line_offset, render_screen
from .state import (
    CatalogLoaded,
    DiscoverSheets,
    Effect,
    ErrorInfo,
    Event,
    KeyEvent,
    LoadFailed,
    LoadSheet,
    Mode,
    Quit,
    ResetScroll,
    ResizeEvent,
    ScrollDetail,
    SheetsDiscovered,
    ViewState,
    initial_state,
    transition,
)
from .styles import DEFAULT_STYLES, RenderStyles
from .themes import DEFAULT_THEME, register_all_themes

logger = logging.getLogger(__name__)

LIST_MODES = (Mode.LIST, Mode.SEARCH_EDITING, Mode.SEARCH_APPLIED)


class SheetLoadFinished(Message):
    """A sheet load finished, with either a catalog or an error."""

    def __init__(
        self,
        seq: int,
        catalog: Optional[Catalog] = None,
        error: Optional[ErrorInfo] = None,
    ) -> None:
        self.seq = seq
        self.catalog = catalog
        self.error = error
        super().__init__()


class SheetsDiscoveryFinished(Message):
    """A directory scan finished, with either sheet names or an error."""

    def __init__(
        self,
        seq: int,
        sheets: tuple[str, ...] = (),
        error: Optional[ErrorInfo] = None,
    ) -> None:
        self.seq = seq
        self.sheets = sheets
        self.error = error
        super().__init__()


class ContentView(VerticalScroll, can_focus=False):
    """Scrollable body. Not focusable, so every key reaches the app."""


class CheatsheetApp(App[None]):
    """Browse cheat sheets with tag filtering and search."""

    TITLE = APP_TITLE

    CSS = """
    #header {
        height: 1;
        padding: 0 0;
    }

    #tag-strip {
        height: 3;
        border: round $primary;
        padding: 0 1;
    }

    #content-view {
        height: 1fr;
        padding: 0 1;
    }

    #help {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit_viewer", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        sheet_dir: str,
        sheet_path: Optional[str] = None,
        theme_name: Optional[str] = None,
        render_styles: RenderStyles = DEFAULT_STYLES,
    ) -> None:
        super().__init__()
        self.render_styles = render_styles
        self._theme_name = theme_name or DEFAULT_THEME
        start = initial_state(sheet_dir, sheet_path)
        self.view_state: ViewState = start.state
        self._startup_effects = start.effects
        self._view_ready = False

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        yield Static(id="tag-strip")
        with ContentView(id="content-view"):
            yield Static(id="content")
        yield Static(id="help")

    def on_mount(self) -> None:
        register_all_themes(self)
        self.theme = self._theme_name
        self._view_ready = True
        self.apply_event(ResizeEvent(self.size.width, self.size.height))
        self._run_effects(self._startup_effects)

    # ------------------------------------------------------------------
    # Event intake
    # ------------------------------------------------------------------

    def apply_event(self, event: Event) -> None:
        """Run one event through the state machine and show the result."""
        result = transition(self.view_state, event)
        self.view_state = result.state
        if self._view_ready:
            self._refresh_view()
        self._run_effects(result.effects)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.apply_event(KeyEvent(event.key, event.character))

    def action_quit_viewer(self) -> None:
        self.apply_event(KeyEvent("ctrl+c"))

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(ResizeEvent(event.size.width, event.size.height))

    def on_sheet_load_finished(self, message: SheetLoadFinished) -> None:
        if message.catalog is not None:
            self.apply_event(CatalogLoaded(message.catalog, message.seq))
        elif message.error is not None:
            self.apply_event(LoadFailed(message.error, message.seq))

    def on_sheets_discovery_finished(self, message: SheetsDiscoveryFinished) -> None:
        if message.error is not None:
            self.apply_event(LoadFailed(message.error, message.seq))
        else:
            self.apply_event(SheetsDiscovered(message.sheets, message.seq))

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def _run_effects(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, LoadSheet):
                self.run_worker(self._load_sheet(effect.path, effect.seq), group="loader")
            elif isinstance(effect, DiscoverSheets):
                self.run_worker(
                    self._discover_sheets(effect.directory, effect.seq), group="loader"
                )
            elif isinstance(effect, ScrollDetail):
                self._content_view().scroll_relative(y=effect.delta, animate=False)
            elif isinstance(effect, ResetScroll):
                self._content_view().scroll_home(animate=False)
            elif isinstance(effect, Quit):
                logger.info("Quit requested")
                self.exit()
            else:
                assert_never(effect)

    async def _load_sheet(self, path: str, seq: int) -> None:
        try:
            catalog = await asyncio.to_thread(load_sheet, path)
        except LoadError as e:
            logger.error(f"Failed to load {path}: {e}")
            self.post_message(SheetLoadFinished(seq, error=ErrorInfo.from_exception(e)))
            return
        self.post_message(SheetLoadFinished(seq, catalog=catalog))

    async def _discover_sheets(self, directory: str, seq: int) -> None:
        try:
            sheets = await asyncio.to_thread(discover_sheets, directory)
        except LoadError as e:
            logger.error(f"Failed to scan {directory}: {e}")
            self.post_message(SheetsDiscoveryFinished(seq, error=ErrorInfo.from_exception(e)))
            return
        self.post_message(SheetsDiscoveryFinished(seq, sheets=tuple(sheets)))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _content_view(self) -> ContentView:
        return self.query_one("#content-view", ContentView)

    def _refresh_view(self) -> None:
        screen = render_screen(self.view_state, self.render_styles)

        self.query_one("#header", Static).update(screen.header)

        strip = self.query_one("#tag-strip", Static)
        strip.display = screen.strip is not None
        if screen.strip is not None:
            strip.update(screen.strip)

        self.query_one("#content", Static).update(screen.body)
        self.query_one("#help", Static).update(screen.help)

        self._keep_selection_visible()

    def _keep_selection_visible(self) -> None:
        state = self.view_state
        if state.mode not in LIST_MODES or state.catalog is None or state.last_error:
            return

        view = self._content_view()
        line = entry_line_offset(state.catalog.description, state.selected_entry_index)
        height = view.scrollable_content_region.height
        if line < view.scroll_y:
            view.scroll_to(y=line, animate=False)
        elif height and line + 1 >= view.scroll_y + height:
            view.scroll_to(y=line - height + 2, animate=False)
