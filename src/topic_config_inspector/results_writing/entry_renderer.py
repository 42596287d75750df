"""Aligned text rendering of topic configuration entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from topic_config_inspector.config_description.config_entries import ConfigEntry

MIN_NAME_WIDTH = 1


def sort_config_entries(entries: Iterable[ConfigEntry]) -> list[ConfigEntry]:
    """Return a new list ordered by entry name (codepoint order)."""
    return sorted(entries, key=lambda entry: entry.name)


def name_column_width(entries: Sequence[ConfigEntry]) -> int:
    """Width of the name column: the longest name, never below 1."""
    return max([MIN_NAME_WIDTH, *(len(entry.name) for entry in entries)])


def render_config_entries(entries: Iterable[ConfigEntry]) -> list[str]:
    """Render `NAME = VALUE` lines with names padded to a common width."""
    ordered = sort_config_entries(entries)
    width = name_column_width(ordered)
    return [f"{entry.name:<{width}} = {entry.value}" for entry in ordered]
