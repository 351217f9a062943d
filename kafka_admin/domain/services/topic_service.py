"""Use-case coordination for topic create / dump / delete."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import yaml

from kafka_admin.core.errors import error_message
from kafka_admin.domain.models.topic import (
    ConfigEntry,
    CreateTopicRequest,
    DeleteTopicRequest,
    Topic,
    TopicItem,
)
from kafka_admin.domain.ports import ClientAccessor, Explorer, OutputChannelProvider, Presenter
from kafka_admin.domain.services.cluster_service import AUTO_CREATE_TOPIC_KEY, auto_create_topics_enabled
from kafka_admin.domain.services.input_collector import PromptSpec, collect_inputs, validate_positive_number
from kafka_admin.domain.services.resolution import NO_CLUSTER_SELECTED, NoCluster, Resolved, resolve_topic

log = logging.getLogger(__name__)

TOPIC_METADATA_CHANNEL = "Topic Metadata"
DELETE_CHOICE = "Delete"
CANCEL_CHOICE = "Cancel"

CREATE_TOPIC_PROMPTS = (
    PromptSpec("Topic name"),
    PromptSpec("Number of partitions", validate_positive_number),
    PromptSpec("Replication Factor", validate_positive_number),
)


def render_topic_metadata(topic: Topic, configs: List[ConfigEntry]) -> str:
    """Return *topic* and its *configs* as YAML, keys in declaration order."""
    data: Dict[str, Any] = {
        **topic.model_dump(),
        "configs": [c.model_dump() for c in configs],
    }
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)


def delete_confirmation_message(topic_id: str, auto_create_enabled: bool) -> str:
    warning = f"Are you sure you want to delete topic '{topic_id}'?"
    if auto_create_enabled:
        warning += (
            f" The cluster is configured with '{AUTO_CREATE_TOPIC_KEY}=true',"
            " so the topic might be recreated automatically."
        )
    return warning


class CreateTopicCommandHandler:
    """Ask for name, partitions and replication factor, then create the topic."""

    def __init__(self, accessor: ClientAccessor, presenter: Presenter, explorer: Explorer) -> None:
        self._accessor = accessor
        self._presenter = presenter
        self._explorer = explorer

    async def execute(self, cluster_id: str | None = None) -> None:
        if not cluster_id:
            return

        log.debug("Creating topic on cluster %s", cluster_id)
        answers = await collect_inputs(self._presenter, CREATE_TOPIC_PROMPTS)
        if answers is None:
            log.debug("Topic creation cancelled")
            return
        topic, partitions, replication_factor = answers

        try:
            client = self._accessor.get(cluster_id)
            result = await client.create_topic(
                CreateTopicRequest(
                    topic=topic,
                    partitions=int(partitions, 10),
                    replication_factor=int(replication_factor, 10),
                )
            )
            # Single-topic request: only the first reported failure is looked at.
            if result:
                failure = result[0]
                log.warning("Topic '%s' was not created: %s", topic, failure.error)
                self._presenter.show_error(failure.error or f"Failed to create topic '{failure.topic}'")
            else:
                log.info("Created topic '%s' on cluster %s", topic, cluster_id)
                self._explorer.refresh()
                self._presenter.show_info(f"Topic '{topic}' created successfully")
        except Exception as exc:
            log.warning("Creating topic '%s' failed: %r", topic, exc)
            self._presenter.show_error(error_message(exc))


class DumpTopicMetadataCommandHandler:
    """Show a topic and its configuration as YAML on the "Topic Metadata" channel."""

    def __init__(
        self, accessor: ClientAccessor, presenter: Presenter, channels: OutputChannelProvider
    ) -> None:
        self._accessor = accessor
        self._presenter = presenter
        self._channels = channels

    async def execute(self, item: TopicItem | None = None) -> None:
        try:
            resolution = await resolve_topic(self._accessor, self._presenter, item)
            if isinstance(resolution, NoCluster):
                self._presenter.show_info(NO_CLUSTER_SELECTED)
                return
            if not isinstance(resolution, Resolved):
                return

            configs = await resolution.client.get_topic_configs(resolution.topic.id)
        except Exception as exc:
            log.warning("Dumping topic metadata failed: %r", exc)
            self._presenter.show_error(error_message(exc))
            return

        channel = self._channels.get_channel(TOPIC_METADATA_CHANNEL)
        channel.clear()
        channel.append(render_topic_metadata(resolution.topic, configs))
        channel.show()


class DeleteTopicCommandHandler:
    """Delete one topic after a confirmation that warns about auto re-creation."""

    def __init__(self, accessor: ClientAccessor, presenter: Presenter, explorer: Explorer) -> None:
        self._accessor = accessor
        self._presenter = presenter
        self._explorer = explorer

    async def execute(self, item: TopicItem | None = None) -> None:
        try:
            resolution = await resolve_topic(self._accessor, self._presenter, item)
            if isinstance(resolution, NoCluster):
                self._presenter.show_info(NO_CLUSTER_SELECTED)
                return
            if not isinstance(resolution, Resolved):
                return
            topic_id = resolution.topic.id

            risky = await auto_create_topics_enabled(resolution.client)
            answer = await self._presenter.confirm_warning(
                delete_confirmation_message(topic_id, risky), CANCEL_CHOICE, DELETE_CHOICE
            )
            if answer != DELETE_CHOICE:
                log.debug("Deletion of topic '%s' cancelled", topic_id)
                return

            await resolution.client.delete_topic(DeleteTopicRequest(topics=[topic_id]))
            log.info("Deleted topic '%s'", topic_id)
            self._explorer.refresh()
            self._presenter.show_info(f"Topic '{topic_id}' deleted successfully")
        except Exception as exc:
            log.warning("Deleting topic failed: %r", exc)
            self._presenter.show_error(error_message(exc))
