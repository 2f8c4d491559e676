"""Tests for the content renderer."""

import pytest

from cheatview.models.sheets import Catalog, Entry
from cheatview.ui.rendering import (
    entry_line_offset,
    render_entry_detail,
    render_entry_list,
    render_error,
    render_screen,
    render_search_indicator,
    render_sheet_list,
    render_tag_strip,
)
from cheatview.ui.state import (
    CatalogLoaded,
    ErrorInfo,
    KeyEvent,
    LoadFailed,
    ResizeEvent,
    SheetsDiscovered,
    initial_state,
    transition,
)
from cheatview.ui.styles import DEFAULT_STYLES, PLAIN_STYLES
from cheatview.ui.tag_menu import window_tags

FULL_DETAIL = (
    "Reapply commits on top of another base tip\n\n"
    "Syntax: \n"
    "  git rebase [-i] <upstream>  \n\n"
    "Complexity: advanced\n\n"
    "Tags: branching, history\n\n"
    "Options:\n\n"
    "  -i, --interactive\n"
    "    Edit the commit list first\n"
    "  --onto <newbase>\n"
    "    Rebase onto another branch\n\n"
    "Examples:\n\n"
    "  Example 1:\n"
    "    $ git rebase -i HEAD~3  \n"
    "    Squash the last commits\n\n"
    "  Example 2:\n"
    "    $ git rebase main  \n"
    "    Catch up with main\n\n"
    "Notes:\n\n"
    "  • Never rebase shared history\n"
    "  • Use --abort to give up\n\n"
    "Related Commands:\n\n"
    "  git merge, git cherry-pick\n"
)


def loaded_state(catalog, *keys, width=80):
    state = initial_state("sheets", sheet_path="x.yaml", width=width).state
    state = transition(state, CatalogLoaded(catalog, seq=1)).state
    for key in keys:
        state = transition(state, KeyEvent(key, key if len(key) == 1 else None)).state
    return state


class TestEntryList:
    def test_numbered_lines_with_tags(self, entries):
        text = render_entry_list("Desc", entries[:2], 0, PLAIN_STYLES).plain
        assert text == (
            "Desc\n\n"
            " 1. git status - Show working tree status  [git, basics]\n\n"
            " 2. git commit - Record changes to repository  [git]\n\n"
        )

    def test_untagged_entry_has_no_brackets(self):
        text = render_entry_list("", [Entry(name="ls", short_desc="list")], 0, PLAIN_STYLES)
        assert text.plain == "\n\n 1. ls - list \n\n"

    def test_numbering_is_positional(self, entries):
        text = render_entry_list("", entries[3:], 0, PLAIN_STYLES).plain
        assert " 1. kubectl get pods" in text
        assert " 2. kubectl apply" in text

    def test_empty_list(self):
        text = render_entry_list("Desc", [], 0, PLAIN_STYLES).plain
        assert text == "Desc\n\nNo commands match.\n"

    def test_selected_line_is_highlighted(self, entries):
        text = render_entry_list("Desc", entries, 1, DEFAULT_STYLES)
        highlighted = [
            text.plain[span.start : span.end]
            for span in text.spans
            if span.style == DEFAULT_STYLES.selected
        ]
        assert highlighted == [" 2. git commit - Record changes to repository "]

    def test_line_offset_matches_output(self, entries):
        description = "First line\nSecond line"
        lines = render_entry_list(description, entries, 0, PLAIN_STYLES).plain.split("\n")
        for index, entry in enumerate(entries):
            assert entry.name in lines[entry_line_offset(description, index)]

    def test_line_offset_with_empty_description(self):
        assert entry_line_offset("", 0) == 2


class TestEntryDetail:
    def test_full_entry(self, full_entry):
        assert render_entry_detail(full_entry, PLAIN_STYLES).plain == FULL_DETAIL

    def test_minimal_entry_omits_empty_sections(self):
        text = render_entry_detail(Entry(name="ls", short_desc="list", syntax="ls"), PLAIN_STYLES)
        assert text.plain == "list\n\nSyntax: \n  ls  \n\n"

    @pytest.mark.parametrize(
        "section",
        ["Complexity:", "Tags:", "Options:", "Examples:", "Notes:", "Related Commands:"],
    )
    def test_sections_absent_without_data(self, section):
        text = render_entry_detail(Entry(name="x"), PLAIN_STYLES).plain
        assert section not in text

    def test_rendering_is_repeatable(self, full_entry):
        first = render_entry_detail(full_entry, DEFAULT_STYLES)
        second = render_entry_detail(full_entry, DEFAULT_STYLES)
        assert first.plain == second.plain
        assert first.spans == second.spans

    def test_styles_do_not_change_text(self, full_entry):
        plain = render_entry_detail(full_entry, PLAIN_STYLES)
        styled = render_entry_detail(full_entry, DEFAULT_STYLES)
        assert plain.plain == styled.plain


class TestSmallPieces:
    def test_tag_strip_with_markers(self):
        window = window_tags(["all", "a", "b", "c", "d"], 2, budget=12)
        text = render_tag_strip(window, PLAIN_STYLES).plain
        assert text == "«  a   b   c   »"

    def test_tag_strip_without_markers(self):
        window = window_tags(["all", "git"], 0, budget=100)
        assert render_tag_strip(window, PLAIN_STYLES).plain == " all   git  "

    def test_search_indicator(self):
        assert render_search_indicator("git", 3).plain == "🔍 Search: git (3 results)"

    def test_error(self):
        text = render_error(ErrorInfo(kind="read", message="boom"), PLAIN_STYLES)
        assert text.plain == "Error: boom\n\nPress q to quit."

    def test_sheet_list(self):
        text = render_sheet_list(["a.yaml", "b.yaml"], 1, PLAIN_STYLES)
        assert text.plain == "  a.yaml\n> b.yaml"

    def test_empty_sheet_list(self):
        assert render_sheet_list([], 0).plain == "No cheat sheets found."


class TestRenderScreen:
    def test_list_screen(self, catalog):
        screen = render_screen(loaded_state(catalog), PLAIN_STYLES)
        assert screen.header.plain == " Mixed Commands "
        assert "«" not in screen.strip.plain and "»" not in screen.strip.plain
        assert screen.body.plain.startswith("Git and kubectl in one sheet.\n\n 1. git status")
        assert "/: Search" in screen.help.plain

    def test_narrow_terminal_shows_markers(self, catalog):
        state = loaded_state(catalog, "right", "right", width=20)
        strip = render_screen(state, PLAIN_STYLES).strip.plain
        assert strip.startswith("« ")
        assert strip.endswith(" »")
        assert " deploy " in strip

    def test_resize_changes_strip(self, catalog):
        state = loaded_state(catalog)
        wide = render_screen(state, PLAIN_STYLES).strip.plain
        narrow_state = transition(state, ResizeEvent(20, 24)).state
        narrow = render_screen(narrow_state, PLAIN_STYLES).strip.plain
        assert wide != narrow
        assert narrow.endswith(" »")

    def test_detail_screen(self, catalog):
        screen = render_screen(loaded_state(catalog, "down", "enter"), PLAIN_STYLES)
        assert screen.header.plain == " git commit "
        assert screen.body.plain.startswith("Record changes to repository")
        assert "Scroll" in screen.help.plain

    def test_search_editing_screen(self, catalog):
        state = loaded_state(catalog, "/", "p", "o", "d")
        screen = render_screen(state, PLAIN_STYLES)
        assert screen.strip.plain == "Search: pod "
        assert "kubectl get pods" in screen.body.plain
        assert "git status" not in screen.body.plain

    def test_search_applied_screen(self, catalog):
        state = loaded_state(catalog, "/", "g", "i", "t", "enter")
        screen = render_screen(state, PLAIN_STYLES)
        assert screen.strip.plain == "🔍 Search: git (3 results)"

    def test_search_without_results(self, catalog):
        state = loaded_state(catalog, "/", "z", "z", "z")
        assert "No commands match." in render_screen(state, PLAIN_STYLES).body.plain

    def test_empty_catalog(self):
        screen = render_screen(loaded_state(Catalog(title="Empty")), PLAIN_STYLES)
        assert screen.body.plain == "No commands found in the cheat sheet."

    def test_untitled_catalog_uses_app_title(self, entries):
        screen = render_screen(loaded_state(Catalog(entries=entries)), PLAIN_STYLES)
        assert screen.header.plain == " cheatview "

    def test_loading_screen(self):
        state = initial_state("sheets", sheet_path="x.yaml").state
        screen = render_screen(state, PLAIN_STYLES)
        assert screen.body.plain == "Loading cheat sheet..."
        assert screen.strip is None

    def test_selector_screen(self):
        state = initial_state("sheets").state
        assert render_screen(state, PLAIN_STYLES).body.plain == "Loading cheatsheets..."

        state = transition(state, SheetsDiscovered(("git.yaml", "k8s.yaml"), seq=1)).state
        screen = render_screen(state, PLAIN_STYLES)
        assert screen.header.plain == " Cheatsheet Selector "
        assert screen.strip is None
        assert screen.body.plain == "> git.yaml\n  k8s.yaml"

    def test_error_screen(self):
        state = initial_state("sheets", sheet_path="x.yaml").state
        error = ErrorInfo(kind="read", message="Cannot read cheat sheet")
        state = transition(state, LoadFailed(error, seq=1)).state
        screen = render_screen(state, PLAIN_STYLES)
        assert screen.body.plain == "Error: Cannot read cheat sheet\n\nPress q to quit."
        assert screen.strip is None
        assert screen.help.plain == "q: Quit"

    def test_screen_is_repeatable(self, catalog):
        state = loaded_state(catalog, "right", "down")
        first = render_screen(state)
        second = render_screen(state)
        for block in ("header", "strip", "body", "help"):
            assert getattr(first, block).plain == getattr(second, block).plain
            assert getattr(first, block).spans == getattr(second, block).spans
