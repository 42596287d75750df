"""Config description domain exports."""

from .config_entries import TOPIC_RESOURCE_KIND, ConfigEntry, TopicResource
from .topic_config_reader import (
    ClientConstructionError,
    InvariantViolationError,
    RequestError,
    TopicConfigDescribeError,
    TopicConfigReader,
    describe_topic_config,
)

__all__ = [
    "TOPIC_RESOURCE_KIND",
    "ConfigEntry",
    "TopicResource",
    "TopicConfigReader",
    "TopicConfigDescribeError",
    "ClientConstructionError",
    "RequestError",
    "InvariantViolationError",
    "describe_topic_config",
]
