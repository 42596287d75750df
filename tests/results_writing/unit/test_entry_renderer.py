"""Entry renderer tests."""

from __future__ import annotations

import random

from topic_config_inspector.config_description import ConfigEntry
from topic_config_inspector.results_writing import (
    name_column_width,
    render_config_entries,
    sort_config_entries,
)


def _entries(values: dict[str, str]) -> list[ConfigEntry]:
    return [ConfigEntry(name=name, value=value) for name, value in values.items()]


def test_render_aligns_names_to_longest_name() -> None:
    lines = render_config_entries(
        _entries({"retention.ms": "604800000", "cleanup.policy": "delete"})
    )

    assert lines == [
        "cleanup.policy = delete",
        "retention.ms   = 604800000",
    ]


def test_render_is_independent_of_input_order() -> None:
    entries = _entries(
        {
            "segment.bytes": "1073741824",
            "cleanup.policy": "compact",
            "min.insync.replicas": "2",
            "retention.ms": "-1",
            "compression.type": "producer",
        }
    )
    shuffled = list(entries)
    random.Random(7).shuffle(shuffled)

    assert render_config_entries(entries) == render_config_entries(shuffled)
    assert render_config_entries(reversed(entries)) == render_config_entries(entries)


def test_sort_uses_codepoint_order() -> None:
    entries = _entries({"b": "1", "B": "2", "a": "3", "_x": "4", "é": "5"})

    ordered = [entry.name for entry in sort_config_entries(entries)]

    assert ordered == ["B", "_x", "a", "b", "é"]


def test_sort_returns_new_list_without_touching_input() -> None:
    entries = _entries({"z": "1", "a": "2"})

    ordered = sort_config_entries(entries)

    assert [entry.name for entry in entries] == ["z", "a"]
    assert [entry.name for entry in ordered] == ["a", "z"]


def test_every_rendered_name_is_padded_to_column_width() -> None:
    entries = _entries({"a": "1", "bbb": "2", "cccccc": "3"})
    width = name_column_width(entries)

    lines = render_config_entries(entries)

    assert width == 6
    for line in lines:
        assert line.index(" = ") == width


def test_column_width_never_drops_below_one() -> None:
    assert name_column_width([]) == 1
    assert name_column_width(_entries({"": "x"})) == 1


def test_render_of_empty_result_is_empty() -> None:
    assert render_config_entries([]) == []


def test_values_are_rendered_verbatim() -> None:
    lines = render_config_entries(
        _entries({"message.format": "a = b  \tc", "sasl.jaas.config": ""})
    )

    assert lines == [
        "message.format   = a = b  \tc",
        "sasl.jaas.config = ",
    ]
