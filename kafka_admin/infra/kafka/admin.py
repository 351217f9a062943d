"""Kafka Admin façade built on kafka-python."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, Iterable, List, TypeVar

from kafka.admin import ConfigResource, ConfigResourceType, KafkaAdminClient, NewTopic  # kafka-python
from kafka.errors import (
    BrokerResponseError,
    KafkaError,
    KafkaTimeoutError,
    NoBrokersAvailable,
    NodeNotReadyError,
    for_code,
)

from kafka_admin.core.config import Settings, get_settings
from kafka_admin.core.errors import ClientError
from kafka_admin.domain.models.cluster import Broker
from kafka_admin.domain.models.topic import (
    ConfigEntry,
    CreateTopicRequest,
    CreateTopicResult,
    DeleteTopicRequest,
    Partition,
    Topic,
)

log = logging.getLogger(__name__)

_RETRYABLE = (KafkaTimeoutError, NoBrokersAvailable, NodeNotReadyError)

T = TypeVar("T")


def _describe_code(error_code: int, error_message: str | None = None) -> str:
    if error_message:
        return error_message
    err = for_code(error_code)
    return getattr(err, "description", None) or err.__name__


class KafkaAdminFacade:
    """
    Lazy adapter around kafka-python's KafkaAdminClient for one cluster.
    Avoids network work at construction time; every call runs in a worker
    thread and any kafka-python failure surfaces as ClientError.
    """

    def __init__(self, bootstrap_servers: str, settings: Settings | None = None) -> None:
        self.bootstrap_servers = bootstrap_servers
        self._settings = settings or get_settings()
        self._client: KafkaAdminClient | None = None

    # ---------- connection -------------------------------------------------

    def _common_kwargs(self) -> dict:
        s = self._settings
        kw = dict(
            bootstrap_servers=self.bootstrap_servers,
            client_id=s.client_id,
            request_timeout_ms=s.request_timeout_ms,
            api_version_auto_timeout_ms=s.api_version_auto_timeout_ms,
            security_protocol=s.security_protocol,
        )
        if s.kafka_api_version:
            kw["api_version"] = tuple(int(p) for p in s.kafka_api_version.split("."))
        if s.security_protocol.startswith("SASL"):
            kw.update(
                sasl_mechanism=s.sasl_mechanism,
                sasl_plain_username=s.sasl_plain_username,
                sasl_plain_password=s.sasl_plain_password,
            )
        if s.security_protocol.endswith("SSL"):
            kw.update(ssl_cafile=s.ssl_cafile)
        return kw

    def _ensure_client(self) -> KafkaAdminClient:
        if self._client is not None:
            return self._client

        last_exc: Exception | None = None
        for attempt in range(1, self._settings.admin_connect_max_tries + 1):
            try:
                self._client = KafkaAdminClient(**self._common_kwargs())
                return self._client
            except _RETRYABLE as exc:
                last_exc = exc
                log.debug("Connecting to %s failed (attempt %d): %s", self.bootstrap_servers, attempt, exc)
                if attempt < self._settings.admin_connect_max_tries:
                    time.sleep(self._settings.admin_connect_backoff_sec * attempt)
        raise last_exc or RuntimeError("Failed to create KafkaAdminClient")

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(fn, *args)
        except (KafkaError, OSError) as exc:
            raise ClientError(str(exc) or exc.__class__.__name__) from exc

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    # ---------- Topics -----------------------------------------------------

    async def get_topics(self) -> List[Topic]:
        """Return all topics with partition placement, sorted by name."""
        return await self._run(self._get_topics)

    def _get_topics(self) -> List[Topic]:
        client = self._ensure_client()
        names = list(client.list_topics())
        if not names:
            return []
        topics = []
        for t in client.describe_topics(names):
            partitions = sorted(
                (
                    Partition(
                        partition=p["partition"],
                        leader=p.get("leader"),
                        replicas=list(p.get("replicas", [])),
                        isr=list(p.get("isr", [])),
                    )
                    for p in t.get("partitions", [])
                ),
                key=lambda p: p.partition,
            )
            rf = len(partitions[0].replicas) if partitions else 0
            topics.append(
                Topic(id=t["topic"], partition_count=len(partitions), replication_factor=rf, partitions=partitions)
            )
        return sorted(topics, key=lambda t: t.id)

    async def create_topic(self, request: CreateTopicRequest) -> List[CreateTopicResult]:
        """Create the requested topic; topic-level refusals come back as results."""
        return await self._run(self._create_topic, request)

    def _create_topic(self, request: CreateTopicRequest) -> List[CreateTopicResult]:
        new_topic = NewTopic(
            name=request.topic,
            num_partitions=request.partitions,
            replication_factor=request.replication_factor,
        )
        try:
            response = self._ensure_client().create_topics([new_topic])
        except BrokerResponseError as exc:
            # e.g. TopicAlreadyExistsError, InvalidReplicationFactorError
            return [CreateTopicResult(topic=request.topic, error=getattr(exc, "description", None) or str(exc))]

        results = []
        for topic_error in getattr(response, "topic_errors", None) or []:
            topic, error_code = topic_error[0], topic_error[1]
            if error_code:
                error_message = topic_error[2] if len(topic_error) > 2 else None
                results.append(CreateTopicResult(topic=topic, error=_describe_code(error_code, error_message)))
        return results

    async def delete_topic(self, request: DeleteTopicRequest) -> None:
        await self._run(self._delete_topic, request)

    def _delete_topic(self, request: DeleteTopicRequest) -> None:
        response = self._ensure_client().delete_topics(list(request.topics))
        for topic_error in getattr(response, "topic_error_codes", None) or []:
            topic, error_code = topic_error[0], topic_error[1]
            if error_code:
                raise ClientError(f"Failed to delete topic '{topic}': {_describe_code(error_code)}")

    async def get_topic_configs(self, topic_id: str) -> List[ConfigEntry]:
        return await self._run(self._describe_configs, ConfigResource(ConfigResourceType.TOPIC, topic_id))

    # ---------- Brokers ----------------------------------------------------

    async def get_brokers(self) -> List[Broker]:
        """Return cluster members ordered by broker id."""
        return await self._run(self._get_brokers)

    def _get_brokers(self) -> List[Broker]:
        meta = self._ensure_client().describe_cluster()
        brokers = [
            Broker(id=b["node_id"], host=b.get("host"), port=b.get("port"), rack=b.get("rack"))
            for b in meta.get("brokers", [])
        ]
        return sorted(brokers, key=lambda b: b.id)

    async def get_broker_configs(self, broker_id: int) -> List[ConfigEntry]:
        return await self._run(
            self._describe_configs, ConfigResource(ConfigResourceType.BROKER, str(broker_id))
        )

    # ---------- Helpers ----------------------------------------------------

    def _describe_configs(self, resource: ConfigResource) -> List[ConfigEntry]:
        responses = self._ensure_client().describe_configs([resource])
        return list(_config_entries(responses))


def _config_entries(responses: Iterable[Any]) -> Iterable[ConfigEntry]:
    """Flatten DescribeConfigs responses into entries, raising on resource errors."""
    for response in responses:
        for resource in response.resources:
            error_code, error_message, _type, resource_name, config_entries = resource[:5]
            if error_code:
                raise ClientError(
                    f"Failed to describe configs of '{resource_name}': {_describe_code(error_code, error_message)}"
                )
            for entry in config_entries:
                yield ConfigEntry(config_name=entry[0], config_value=entry[1])
