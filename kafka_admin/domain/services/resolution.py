"""Resolve which client and which topic a topic command operates on."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from kafka_admin.domain.models.topic import Topic, TopicItem
from kafka_admin.domain.ports import AdminClient, ClientAccessor, Presenter

log = logging.getLogger(__name__)

NO_CLUSTER_SELECTED = "No cluster selected"


@dataclass(frozen=True)
class Resolved:
    client: AdminClient
    topic: Topic


@dataclass(frozen=True)
class NoCluster:
    """No client could be resolved; reported as information, not an error."""


@dataclass(frozen=True)
class NoTopic:
    """The user cancelled the topic pick."""


Resolution = Union[Resolved, NoCluster, NoTopic]


async def pick_topic_from_selected_cluster(
    accessor: ClientAccessor, presenter: Presenter
) -> Topic | None:
    """Let the user choose one topic of the currently selected cluster."""
    client = accessor.get_selected_cluster_client()
    if client is None:
        return None

    topics = await client.get_topics()
    if not topics:
        presenter.show_info("No topics found")
        return None

    by_id = {t.id: t for t in topics}
    choice = await presenter.pick("Select a topic", list(by_id))
    if not choice:
        return None
    return by_id.get(choice)


async def resolve_topic(
    accessor: ClientAccessor, presenter: Presenter, item: TopicItem | None
) -> Resolution:
    """Use the bound *item* when given, else the selected cluster and a pick.

    Raises whatever the accessor or client raises (e.g. ``ClientError``).
    """
    if item is not None:
        client = accessor.get(item.cluster_id)
    else:
        client = accessor.get_selected_cluster_client()

    if client is None:
        return NoCluster()

    topic = item.topic if item is not None else await pick_topic_from_selected_cluster(accessor, presenter)
    if topic is None:
        log.debug("Topic selection cancelled")
        return NoTopic()
    return Resolved(client=client, topic=topic)
