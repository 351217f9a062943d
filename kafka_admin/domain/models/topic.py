"""Topic-level DTOs exchanged between the command handlers and admin clients."""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ConfigEntry(BaseModel):
    """One broker- or topic-scoped configuration value."""

    model_config = ConfigDict(frozen=True)

    config_name: str
    config_value: str | None = None


class Partition(BaseModel):
    """Placement of a single partition."""

    model_config = ConfigDict(frozen=True)

    partition: int = Field(..., ge=0)
    leader: int | None = None
    replicas: List[int] = Field(default_factory=list)
    isr: List[int] = Field(default_factory=list)


class Topic(BaseModel):
    """Immutable view of a Kafka topic as reported by the cluster."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, examples=["checkout-orders"], description="Kafka topic name")
    partition_count: int = Field(..., ge=0)
    replication_factor: int = Field(..., ge=0)
    partitions: List[Partition] = Field(default_factory=list)


class TopicItem(BaseModel):
    """A topic bound to the cluster it was selected from."""

    model_config = ConfigDict(frozen=True)

    cluster_id: str
    topic: Topic


class CreateTopicRequest(BaseModel):
    """Validated parameters of a single-topic creation."""

    topic: str = Field(..., min_length=1)
    partitions: int = Field(..., ge=1)
    replication_factor: int = Field(..., ge=1)


class CreateTopicResult(BaseModel):
    """Per-topic outcome of a creation call; only failures are reported."""

    topic: str
    error: str | None = None


class DeleteTopicRequest(BaseModel):
    """Topics to delete. The command handlers only ever send one id."""

    topics: List[str] = Field(..., min_length=1)
