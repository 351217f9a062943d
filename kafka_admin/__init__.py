"""Create, inspect and delete Kafka topics across configured clusters."""

__version__ = "1.0.0"
