"""Print the effective configuration of a Kafka topic."""
