"""Shared pytest fixtures for cheatview tests."""

from pathlib import Path

import pytest

from cheatview.models.sheets import Catalog, Entry, EntryExample, EntryOption

BUNDLED_SHEETS = Path(__file__).resolve().parent.parent / "cheatsheets"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ("CHEATSHEET_DIR", "CHEATVIEW_LOG_LEVEL", "CHEATVIEW_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def entries():
    """A small mixed list of commands."""
    return (
        Entry(name="git status", short_desc="Show working tree status", tags=("git", "basics")),
        Entry(name="git commit", short_desc="Record changes to repository", tags=("git",)),
        Entry(name="git push", short_desc="Update remote refs", tags=("git", "remote")),
        Entry(name="kubectl get pods", short_desc="List pods", tags=("k8s",)),
        Entry(name="kubectl apply", short_desc="Apply configuration", tags=("k8s", "deploy")),
    )


@pytest.fixture
def catalog(entries):
    return Catalog(
        title="Mixed Commands",
        description="Git and kubectl in one sheet.",
        entries=entries,
    )


@pytest.fixture
def full_entry():
    """An entry with every section filled in."""
    return Entry(
        name="git rebase",
        short_desc="Reapply commits on top of another base tip",
        syntax="git rebase [-i] <upstream>",
        tags=("branching", "history"),
        complexity="advanced",
        options=(
            EntryOption(flag="-i, --interactive", description="Edit the commit list first"),
            EntryOption(flag="--onto <newbase>", description="Rebase onto another branch"),
        ),
        examples=(
            EntryExample(code="git rebase -i HEAD~3", description="Squash the last commits"),
            EntryExample(code="git rebase main", description="Catch up with main"),
        ),
        notes=("Never rebase shared history", "Use --abort to give up"),
        related=("git merge", "git cherry-pick"),
    )


SHEET_YAML = """\
title: Test Sheet
description: Commands for tests.
category: testing
commands:
  - name: alpha
    shortDesc: First command
    syntax: alpha [opts]
    tags: [one, two]
    complexity: beginner
    options:
      - flag: -a
        description: All of it
    examples:
      - code: alpha -a
        description: Run everything
    notes:
      - A note
    related: [beta]
  - name: beta
    shortDesc: Second command
    tags: [two]
"""


@pytest.fixture
def sheet_dir(tmp_path):
    """A directory tree with sheets, a nested sheet and a non-sheet file."""
    (tmp_path / "test.yaml").write_text(SHEET_YAML)
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "other.YML").write_text("title: Other\ncommands: []\n")
    (tmp_path / "README.md").write_text("not a sheet")
    return tmp_path


@pytest.fixture
def bundled_sheets():
    """The cheatsheets directory shipped with the project."""
    return BUNDLED_SHEETS
