"""Configuration domain exports."""

from .cluster_profiles import (
    CLUSTER_PROFILES,
    ConfigurationError,
    UnsupportedProfileError,
    expand_cluster_profile,
    resolve_cluster_profile,
)
from .loader import (
    ConfigFormatError,
    build_client_config,
    parse_config_override,
    parse_config_overrides,
)
from .runtime_settings import ClientSettings, ClusterProfile, ConfigOverrides

__all__ = [
    "CLUSTER_PROFILES",
    "ClientSettings",
    "ClusterProfile",
    "ConfigOverrides",
    "ConfigurationError",
    "ConfigFormatError",
    "UnsupportedProfileError",
    "build_client_config",
    "expand_cluster_profile",
    "parse_config_override",
    "parse_config_overrides",
    "resolve_cluster_profile",
]
