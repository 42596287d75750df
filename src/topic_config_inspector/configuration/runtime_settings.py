"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ClusterProfile:
    """Named connection template for a known cluster."""

    name: str
    bootstrap_servers: str
    security_protocol: str
    ca_file: str = "cafile"
    cert_file: str = "certfile"
    key_file: str = "keyfile"


@dataclass
class ConfigOverrides:
    """Raw `KEY=VALUE` strings collected from repeated `-X` options."""

    values: list[str] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Iterable[str]) -> ConfigOverrides:
        overrides = cls()
        for value in values:
            overrides.append(value)
        return overrides

    def append(self, raw: str) -> None:
        self.values.append(raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return "|".join(self.values)


@dataclass(frozen=True)
class ClientSettings:
    """Startup settings assembled once from command line and environment."""

    topic: str
    overrides: ConfigOverrides
    cluster_profile: str | None = None
    auth_dir: Path | None = None
