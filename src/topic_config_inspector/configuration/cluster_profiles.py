"""Closed table of supported cluster profiles."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .runtime_settings import ClusterProfile


class ConfigurationError(Exception):
    """Raised when the broker client configuration cannot be assembled."""


class UnsupportedProfileError(ConfigurationError):
    """Raised when a cluster profile name is not in the supported table."""


CLUSTER_PROFILES: Mapping[str, ClusterProfile] = MappingProxyType(
    {
        "aiven": ClusterProfile(
            name="aiven",
            bootstrap_servers="kafka-aiven.aivencloud.com:24949",
            security_protocol="SSL",
        ),
    }
)


def resolve_cluster_profile(name: str) -> ClusterProfile:
    """Return the profile registered under `name`."""
    try:
        return CLUSTER_PROFILES[name]
    except KeyError:
        supported = ", ".join(sorted(CLUSTER_PROFILES))
        raise UnsupportedProfileError(
            f"Unsupported cluster profile '{name}'. Supported profiles: {supported}."
        ) from None


def expand_cluster_profile(profile: ClusterProfile, auth_dir: Path | str | None) -> dict[str, str]:
    """Expand a profile into librdkafka configuration keys.

    Credential paths are joined from `auth_dir` and the profile's fixed file
    base names, so `/tmp/creds` yields `/tmp/creds/cafile` and so on.
    """
    if auth_dir is None or not str(auth_dir).strip():
        raise ConfigurationError(
            f"Cluster profile '{profile.name}' requires an auth directory "
            "(-authdir or KAFKA_AUTH_DIR)."
        )
    base = Path(auth_dir)
    return {
        "bootstrap.servers": profile.bootstrap_servers,
        "security.protocol": profile.security_protocol,
        "ssl.ca.location": str(base / profile.ca_file),
        "ssl.certificate.location": str(base / profile.cert_file),
        "ssl.key.location": str(base / profile.key_file),
    }
