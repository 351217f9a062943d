from __future__ import annotations

from typing import Dict, List, Sequence

import pytest

from kafka_admin.domain.models.cluster import Broker
from kafka_admin.domain.models.topic import (
    ConfigEntry,
    CreateTopicRequest,
    CreateTopicResult,
    DeleteTopicRequest,
    Topic,
)


class FakeAdminClient:
    def __init__(self) -> None:
        self.topics: List[Topic] = []
        self.brokers: List[Broker] = []
        self.broker_configs: Dict[int, List[ConfigEntry]] = {}
        self.topic_configs: Dict[str, List[ConfigEntry]] = {}
        self.create_result: List[CreateTopicResult] = []
        self.error: Exception | None = None
        self.scan_error: Exception | None = None
        self.created: List[CreateTopicRequest] = []
        self.deleted: List[DeleteTopicRequest] = []
        self.broker_config_calls: List[int] = []
        self.closed = False

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error

    async def get_topics(self) -> List[Topic]:
        return list(self.topics)

    async def create_topic(self, request: CreateTopicRequest) -> List[CreateTopicResult]:
        self._maybe_fail()
        self.created.append(request)
        return list(self.create_result)

    async def delete_topic(self, request: DeleteTopicRequest) -> None:
        self._maybe_fail()
        self.deleted.append(request)

    async def get_brokers(self) -> List[Broker]:
        if self.scan_error is not None:
            raise self.scan_error
        return list(self.brokers)

    async def get_broker_configs(self, broker_id: int) -> List[ConfigEntry]:
        self.broker_config_calls.append(broker_id)
        if self.scan_error is not None:
            raise self.scan_error
        return list(self.broker_configs.get(broker_id, []))

    async def get_topic_configs(self, topic_id: str) -> List[ConfigEntry]:
        self._maybe_fail()
        return list(self.topic_configs.get(topic_id, []))

    def close(self) -> None:
        self.closed = True


class FakeAccessor:
    def __init__(self, clients: Dict[str, FakeAdminClient], selected: str | None = None) -> None:
        self.clients = clients
        self.selected = selected
        self.requested: List[str] = []

    def get(self, cluster_id: str) -> FakeAdminClient:
        self.requested.append(cluster_id)
        return self.clients[cluster_id]

    def get_selected_cluster_client(self) -> FakeAdminClient | None:
        if self.selected is None:
            return None
        return self.clients.get(self.selected)


class FakePresenter:
    def __init__(self) -> None:
        self.answers: List[str | None] = []
        self.confirmation: str | None = None
        self.pick_answer: str | None = None
        self.prompts: List[str] = []
        self.warnings: List[tuple] = []
        self.picks: List[Sequence[str]] = []
        self.infos: List[str] = []
        self.errors: List[str] = []

    async def prompt(self, placeholder, validate=None):
        self.prompts.append(placeholder)
        return self.answers.pop(0) if self.answers else None

    async def confirm_warning(self, message, *choices):
        self.warnings.append((message, choices))
        return self.confirmation

    async def pick(self, placeholder, items):
        self.picks.append(list(items))
        return self.pick_answer

    def show_info(self, text):
        self.infos.append(text)

    def show_error(self, text):
        self.errors.append(text)


class FakeChannel:
    def __init__(self) -> None:
        self.events: List[tuple] = []
        self.text = ""

    def clear(self) -> None:
        self.events.append(("clear",))
        self.text = ""

    def append(self, text: str) -> None:
        self.events.append(("append", text))
        self.text += text

    def show(self) -> None:
        self.events.append(("show",))


class FakeChannels:
    def __init__(self) -> None:
        self.channels: Dict[str, FakeChannel] = {}

    def get_channel(self, name: str) -> FakeChannel:
        return self.channels.setdefault(name, FakeChannel())


class FakeExplorer:
    def __init__(self) -> None:
        self.refreshes = 0

    def refresh(self) -> None:
        self.refreshes += 1


@pytest.fixture
def client() -> FakeAdminClient:
    return FakeAdminClient()


@pytest.fixture
def accessor(client) -> FakeAccessor:
    return FakeAccessor({"c1": client}, selected="c1")


@pytest.fixture
def presenter() -> FakePresenter:
    return FakePresenter()


@pytest.fixture
def explorer() -> FakeExplorer:
    return FakeExplorer()


@pytest.fixture
def channels() -> FakeChannels:
    return FakeChannels()


@pytest.fixture
def orders_topic() -> Topic:
    return Topic(id="orders", partition_count=3, replication_factor=2)


@pytest.fixture
def unselected_accessor(client) -> FakeAccessor:
    return FakeAccessor({"c1": client})
