"""Business-level queries about clusters & brokers."""
from __future__ import annotations

import logging
from typing import List

from kafka_admin.core.config import Settings
from kafka_admin.domain.models.cluster import Cluster
from kafka_admin.domain.ports import AdminClient

log = logging.getLogger(__name__)

AUTO_CREATE_TOPIC_KEY = "auto.create.topics.enable"


def list_clusters(settings: Settings) -> List[Cluster]:
    """Return configured clusters in id order, flagging the selected one."""
    return [
        Cluster(id=cid, bootstrap_servers=bootstrap, selected=cid == settings.selected_cluster)
        for cid, bootstrap in sorted(settings.clusters.items())
    ]


async def auto_create_topics_enabled(client: AdminClient) -> bool:
    """Return True as soon as one broker reports ``auto.create.topics.enable=true``.

    Brokers are queried one after another in the order the client lists them,
    and the scan stops at the first match. Per-topic overrides are not looked at,
    so this is a heuristic rather than a guarantee.
    """
    brokers = await client.get_brokers()
    for broker in brokers or []:
        configs = await client.get_broker_configs(broker.id)
        entry = next((c for c in configs if c.config_name == AUTO_CREATE_TOPIC_KEY), None)
        if entry is not None and entry.config_value == "true":
            log.debug("Broker %s has %s=true", broker.id, AUTO_CREATE_TOPIC_KEY)
            return True
    return False
