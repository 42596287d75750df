"""Config description domain entities."""

from __future__ import annotations

from dataclasses import dataclass

TOPIC_RESOURCE_KIND = "topic"


@dataclass(frozen=True)
class TopicResource:
    """One broker resource whose configuration is described."""

    name: str
    kind: str = TOPIC_RESOURCE_KIND


@dataclass(frozen=True)
class ConfigEntry:
    """Effective configuration setting reported by the broker."""

    name: str
    value: str
