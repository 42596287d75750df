"""Broker client configuration assembly."""

from __future__ import annotations

from collections.abc import Iterable

from .cluster_profiles import ConfigurationError, expand_cluster_profile, resolve_cluster_profile
from .runtime_settings import ClientSettings


class ConfigFormatError(ConfigurationError):
    """Raised when a `-X` entry is not of the form KEY=VALUE."""


def parse_config_override(raw: str) -> tuple[str, str]:
    """Split one `KEY=VALUE` entry on its first `=`."""
    key, separator, value = raw.partition("=")
    if not separator:
        raise ConfigFormatError(f"Format expected for kafka configs: -X KEY=VALUE (got '{raw}')")
    return key, value


def parse_config_overrides(overrides: Iterable[str]) -> dict[str, str]:
    """Parse entries in order; a repeated key keeps its last value."""
    parsed: dict[str, str] = {}
    for raw in overrides:
        key, value = parse_config_override(raw)
        parsed[key] = value
    return parsed


def build_client_config(settings: ClientSettings) -> dict[str, str]:
    """Return the configuration mapping handed to the Kafka admin client."""
    client_config: dict[str, str] = {}
    if settings.cluster_profile is not None:
        profile = resolve_cluster_profile(settings.cluster_profile)
        client_config.update(expand_cluster_profile(profile, settings.auth_dir))
    client_config.update(parse_config_overrides(settings.overrides))
    return client_config
