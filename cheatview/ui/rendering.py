"""
Content renderer.

Pure functions from a slice of view state to Rich Text. No widget access and
no hidden state: rendering the same input twice gives identical output. The
Textual app decides where each block goes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from rich.text import Text

from ..config.constants import LEFT_MARKER, RIGHT_MARKER
from ..models.sheets import Entry
from .keybindings import help_text
from .state import ErrorInfo, Mode, ViewState
from .styles import DEFAULT_STYLES, RenderStyles
from .tag_menu import TagWindow, tag_budget, window_tags

APP_TITLE = "cheatview"
SELECTOR_TITLE = "Cheatsheet Selector"


@dataclass(frozen=True)
class Screen:
    """The four blocks of the main view, top to bottom."""

    header: Text
    strip: Optional[Text]
    body: Text
    help: Text


def render_tag_strip(window: TagWindow, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    """Tag cells joined horizontally, with scroll markers where cut off."""
    text = Text(no_wrap=True, overflow="ellipsis")
    if window.left_marker:
        text.append(LEFT_MARKER, style=styles.marker)
    for cell in window.cells:
        text.append(f" {cell.label} ", style=styles.selected if cell.selected else styles.normal)
        text.append(" ")
    if window.right_marker:
        text.append(RIGHT_MARKER, style=styles.marker)
    return text


def render_entry_list(
    description: str,
    entries: Sequence[Entry],
    selected: int,
    styles: RenderStyles = DEFAULT_STYLES,
) -> Text:
    """Numbered command list under the sheet description."""
    text = Text()
    text.append(description)
    text.append("\n\n")

    if not entries:
        text.append("No commands match.\n")
        return text

    for i, entry in enumerate(entries):
        line = Text(style=styles.selected if i == selected else styles.normal)
        line.append(" ")
        line.append(f"{i + 1}.", style=styles.number)
        line.append(f" {entry.name} - {entry.short_desc} ")
        text.append_text(line)

        if entry.tags:
            text.append(f" [{', '.join(entry.tags)}]", style=styles.tag)

        text.append("\n\n")

    return text


def entry_line_offset(description: str, index: int) -> int:
    """Line on which entry ``index`` starts in render_entry_list output."""
    return max(len(description.splitlines()), 1) + 1 + 2 * index


def render_entry_detail(entry: Entry, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    """Every section of one command; empty sections are left out."""
    text = Text()

    text.append(entry.short_desc)
    text.append("\n\n")

    text.append("Syntax: \n")
    text.append(f"  {entry.syntax}  ", style=styles.code_block)
    text.append("\n\n")

    if entry.complexity:
        text.append(f"Complexity: {entry.complexity}", style=styles.complexity)
        text.append("\n\n")

    if entry.tags:
        text.append(f"Tags: {', '.join(entry.tags)}", style=styles.tag)
        text.append("\n\n")

    if entry.options:
        text.append("Options:", style=styles.heading)
        text.append("\n\n")
        for option in entry.options:
            text.append("  ")
            text.append(option.flag, style=styles.option_flag)
            text.append("\n    ")
            text.append(option.description, style=styles.option_desc)
            text.append("\n")
        text.append("\n")

    if entry.examples:
        text.append("Examples:", style=styles.heading)
        text.append("\n\n")
        for i, example in enumerate(entry.examples, start=1):
            text.append(f"  Example {i}:\n  ")
            text.append(f"  $ {example.code}  ", style=styles.code_block)
            text.append(f"\n    {example.description}\n\n")

    if entry.notes:
        text.append("Notes:", style=styles.heading)
        text.append("\n\n")
        for note in entry.notes:
            text.append("  • ")
            text.append(note, style=styles.note)
            text.append("\n")

    if entry.related:
        text.append("\n")
        text.append("Related Commands:", style=styles.heading)
        text.append("\n\n  ")
        for i, name in enumerate(entry.related):
            if i:
                text.append(", ")
            text.append(name, style=styles.syntax)
        text.append("\n")

    return text


def render_sheet_list(
    sheets: Sequence[str], selected: int, styles: RenderStyles = DEFAULT_STYLES
) -> Text:
    """Discovered sheet names, one per line."""
    if not sheets:
        return Text("No cheat sheets found.")

    text = Text()
    for i, sheet in enumerate(sheets):
        if i:
            text.append("\n")
        if i == selected:
            text.append(f"> {sheet}", style=styles.selected)
        else:
            text.append(f"  {sheet}", style=styles.normal)
    return text


def render_search_bar(query: str, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    text = Text()
    text.append("Search: ", style=styles.search_prompt)
    text.append(query)
    text.append(" ", style=styles.search_cursor)
    return text


def render_search_indicator(
    query: str, count: int, styles: RenderStyles = DEFAULT_STYLES
) -> Text:
    return Text(f"🔍 Search: {query} ({count} results)", style=styles.search_indicator)


def render_error(error: ErrorInfo, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    text = Text()
    text.append(f"Error: {error.message}", style=styles.error)
    text.append("\n\nPress q to quit.")
    return text


def render_header(state: ViewState, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    """Title bar: selector title, the open entry's name, or the sheet title."""
    if state.mode is Mode.SELECTOR:
        return Text(f" {SELECTOR_TITLE} ", style=styles.header)
    if state.mode is Mode.DETAIL and state.detail_entry is not None:
        return Text(f" {state.detail_entry.name} ", style=styles.detail_header)
    title = state.catalog.title if state.catalog and state.catalog.title else APP_TITLE
    return Text(f" {title} ", style=styles.header)


def render_help(mode: Mode, styles: RenderStyles = DEFAULT_STYLES) -> Text:
    return Text(help_text(mode.value), style=styles.help)


def _render_strip(state: ViewState, styles: RenderStyles) -> Text:
    if state.mode is Mode.SEARCH_EDITING:
        return render_search_bar(state.search_query, styles)
    if state.search_active:
        return render_search_indicator(state.search_query, len(state.visible_entries), styles)
    window = window_tags(
        state.tag_menu, state.selected_tag_index, tag_budget(state.terminal_width)
    )
    return render_tag_strip(window, styles)


def _render_body(state: ViewState, styles: RenderStyles) -> Text:
    if state.mode is Mode.DETAIL and state.detail_entry is not None:
        return render_entry_detail(state.detail_entry, styles)
    catalog = state.catalog
    if catalog is None:
        return Text("Loading cheat sheet...")
    if not catalog.entries:
        return Text("No commands found in the cheat sheet.")
    return render_entry_list(
        catalog.description, state.visible_entries, state.selected_entry_index, styles
    )


def render_screen(state: ViewState, styles: RenderStyles = DEFAULT_STYLES) -> Screen:
    """Render the whole view for ``state``."""
    if state.last_error is not None:
        return Screen(
            header=Text(""),
            strip=None,
            body=render_error(state.last_error, styles),
            help=Text(help_text("error"), style=styles.help),
        )

    if state.mode is Mode.SELECTOR:
        if state.loading and not state.sheets:
            body = Text("Loading cheatsheets...")
        else:
            body = render_sheet_list(state.sheets, state.selected_sheet_index, styles)
        return Screen(
            header=render_header(state, styles),
            strip=None,
            body=body,
            help=render_help(state.mode, styles),
        )

    strip = _render_strip(state, styles) if state.catalog is not None else None
    return Screen(
        header=render_header(state, styles),
        strip=strip,
        body=_render_body(state, styles),
        help=render_help(state.mode, styles),
    )
