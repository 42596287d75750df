"""Kafka admin client wrapper service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, cast

from confluent_kafka import KafkaException
from confluent_kafka.admin import AdminClient, ConfigResource, ResourceType

from .config_entries import ConfigEntry, TopicResource

_KAFKA_CLIENT_LOGGER = logging.getLogger("topic_config_inspector.kafka.client")
_KAFKA_CLIENT_LOGGER.addHandler(logging.NullHandler())
_KAFKA_CLIENT_LOGGER.propagate = False
_KAFKA_CLIENT_LOGGER.setLevel(logging.CRITICAL + 1)


class TopicConfigDescribeError(Exception):
    """Raised when the topic configuration cannot be described."""


class ClientConstructionError(TopicConfigDescribeError):
    """Raised when the admin client rejects the assembled configuration."""


class RequestError(TopicConfigDescribeError):
    """Raised when the describe-configuration call fails."""


class InvariantViolationError(TopicConfigDescribeError):
    """Raised when the broker response does not match the request."""


class KafkaAdminProtocol(Protocol):
    """Protocol implemented by both real and fake admin clients."""

    def describe_configs(
        self, resources: list[ConfigResource], **kwargs: Any
    ) -> Mapping[ConfigResource, _ConfigFuture]: ...


class _ConfigFuture(Protocol):
    """Subset of the future API required by the service."""

    def result(self, timeout: float | None = None) -> Mapping[str, Any]: ...


class TopicConfigReader:
    """Service that describes the effective configuration of one topic."""

    def __init__(
        self,
        client_config: Mapping[str, str],
        admin_client: KafkaAdminProtocol | None = None,
    ) -> None:
        self._client_config = dict(client_config)
        self._admin = admin_client or self._create_admin_client()

    def describe(self, resource: TopicResource) -> list[ConfigEntry]:
        """Return the unordered config entries of `resource`."""
        request = ConfigResource(ResourceType[resource.kind.upper()], resource.name)
        try:
            futures = self._admin.describe_configs([request])
        except (KafkaException, ValueError, TypeError) as exc:
            raise RequestError(
                f"Describe configs failed for topic '{resource.name}': {exc}"
            ) from exc

        if len(futures) != 1:
            raise InvariantViolationError(f"expected 1 result, got {len(futures)}")
        ((returned, future),) = futures.items()
        if (returned.restype, returned.name) != (request.restype, request.name):
            raise InvariantViolationError(
                f"expected result for topic '{resource.name}', got '{returned.name}'"
            )

        try:
            described = future.result()
        except KafkaException as exc:
            raise RequestError(
                f"Describe configs failed for topic '{resource.name}': {exc}"
            ) from exc

        return [
            ConfigEntry(name=name, value=_entry_value(entry.value))
            for name, entry in described.items()
        ]

    def _create_admin_client(self) -> KafkaAdminProtocol:
        try:
            return cast(
                KafkaAdminProtocol,
                AdminClient(self._client_config, logger=_KAFKA_CLIENT_LOGGER),
            )
        except (KafkaException, ValueError, TypeError) as exc:
            raise ClientConstructionError(f"Kafka admin client creation failed: {exc}") from exc


def describe_topic_config(client_config: Mapping[str, str], topic: str) -> list[ConfigEntry]:
    """Describe the effective configuration of `topic` with a new admin client."""
    return TopicConfigReader(client_config).describe(TopicResource(name=topic))


def _entry_value(value: str | None) -> str:
    # Sensitive settings come back without a value.
    return "" if value is None else value
