"""Interfaces the topic command handlers need from their collaborators.

Implementations live under ``kafka_admin.infra``; tests provide fakes.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Sequence

from kafka_admin.domain.models.cluster import Broker
from kafka_admin.domain.models.topic import (
    ConfigEntry,
    CreateTopicRequest,
    CreateTopicResult,
    DeleteTopicRequest,
    Topic,
)

Validator = Callable[[str], Optional[str]]


class AdminClient(Protocol):
    """Administrative operations against one cluster."""

    async def get_topics(self) -> List[Topic]: ...

    async def create_topic(self, request: CreateTopicRequest) -> List[CreateTopicResult]:
        """Return one entry per failed topic; empty means full success."""
        ...

    async def delete_topic(self, request: DeleteTopicRequest) -> None: ...

    async def get_brokers(self) -> List[Broker]: ...

    async def get_broker_configs(self, broker_id: int) -> List[ConfigEntry]: ...

    async def get_topic_configs(self, topic_id: str) -> List[ConfigEntry]: ...


class ClientAccessor(Protocol):
    """Hands out admin clients by cluster id."""

    def get(self, cluster_id: str) -> AdminClient: ...

    def get_selected_cluster_client(self) -> AdminClient | None: ...


class Presenter(Protocol):
    """Prompts, dialogs and notifications shown to the user."""

    async def prompt(self, placeholder: str, validate: Validator | None = None) -> str | None:
        """Return the entered text, or None/"" when cancelled."""
        ...

    async def confirm_warning(self, message: str, *choices: str) -> str | None:
        """Return the chosen label, or None when dismissed."""
        ...

    async def pick(self, placeholder: str, items: Sequence[str]) -> str | None: ...

    def show_info(self, text: str) -> None: ...

    def show_error(self, text: str) -> None: ...


class OutputChannel(Protocol):
    def clear(self) -> None: ...

    def append(self, text: str) -> None: ...

    def show(self) -> None: ...


class OutputChannelProvider(Protocol):
    def get_channel(self, name: str) -> OutputChannel: ...


class Explorer(Protocol):
    """Cluster/topic tree view."""

    def refresh(self) -> None: ...
