"""
Cheat sheet data model.

A Catalog is one loaded sheet. Everything here is frozen: a sheet is parsed
once and then only read by the filter engine and the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _text_list(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' must be a list, got {type(value).__name__}")
    return tuple(_text(item) for item in value)


def _mapping_list(value: Any, field_name: str) -> list[dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{field_name}' must be a list, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, dict):
            raise ValueError(f"every item of '{field_name}' must be a mapping")
    return value


@dataclass(frozen=True)
class EntryOption:
    """A flag accepted by a command."""

    flag: str
    description: str = ""


@dataclass(frozen=True)
class EntryExample:
    """A worked example for a command."""

    code: str
    description: str = ""


@dataclass(frozen=True)
class Entry:
    """One reference item ("command") in a sheet."""

    name: str
    short_desc: str = ""
    syntax: str = ""
    tags: tuple[str, ...] = ()
    complexity: str = ""
    options: tuple[EntryOption, ...] = ()
    examples: tuple[EntryExample, ...] = ()
    notes: tuple[str, ...] = ()
    related: tuple[str, ...] = ()

    def has_tag(self, tag: str) -> bool:
        """Case-sensitive exact tag membership."""
        return tag in self.tags

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """Build an entry from one item of a sheet's ``commands`` list.

        Missing keys default to empty values. Tags keep file order with
        duplicates dropped.
        """
        tags = tuple(dict.fromkeys(_text_list(data.get("tags"), "tags")))
        return cls(
            name=_text(data.get("name")),
            short_desc=_text(data.get("shortDesc")),
            syntax=_text(data.get("syntax")),
            tags=tags,
            complexity=_text(data.get("complexity")),
            options=tuple(
                EntryOption(flag=_text(o.get("flag")), description=_text(o.get("description")))
                for o in _mapping_list(data.get("options"), "options")
            ),
            examples=tuple(
                EntryExample(code=_text(e.get("code")), description=_text(e.get("description")))
                for e in _mapping_list(data.get("examples"), "examples")
            ),
            notes=_text_list(data.get("notes"), "notes"),
            related=_text_list(data.get("related"), "related"),
        )


@dataclass(frozen=True)
class Catalog:
    """A loaded sheet: title, description and its entries in file order."""

    title: str = ""
    description: str = ""
    category: str = ""
    entries: tuple[Entry, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Catalog:
        """Build a catalog from a parsed YAML document.

        Raises:
            ValueError: If the document does not have the sheet structure
        """
        if not isinstance(data, dict):
            raise ValueError(f"sheet must be a mapping, got {type(data).__name__}")
        return cls(
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            category=_text(data.get("category")),
            entries=tuple(
                Entry.from_dict(item) for item in _mapping_list(data.get("commands"), "commands")
            ),
        )
