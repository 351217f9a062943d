"""Per-cluster admin clients keyed by the configured cluster id."""
from __future__ import annotations

from typing import Callable, Dict

from kafka_admin.core.config import Settings
from kafka_admin.core.errors import UnknownClusterError
from kafka_admin.infra.kafka.admin import KafkaAdminFacade


class ClientAccessor:
    """Create one KafkaAdminFacade per cluster id and hand out the same one afterwards."""

    def __init__(
        self,
        settings: Settings,
        factory: Callable[[str, Settings], KafkaAdminFacade] = KafkaAdminFacade,
    ) -> None:
        self._settings = settings
        self._factory = factory
        self._clients: Dict[str, KafkaAdminFacade] = {}

    @property
    def selected_cluster_id(self) -> str | None:
        return self._settings.selected_cluster

    def get(self, cluster_id: str) -> KafkaAdminFacade:
        """Return the client for *cluster_id* or raise UnknownClusterError."""
        if cluster_id not in self._clients:
            bootstrap = self._settings.clusters.get(cluster_id)
            if not bootstrap:
                raise UnknownClusterError(cluster_id)
            self._clients[cluster_id] = self._factory(bootstrap, self._settings)
        return self._clients[cluster_id]

    def get_selected_cluster_client(self) -> KafkaAdminFacade | None:
        cid = self.selected_cluster_id
        if not cid or cid not in self._settings.clusters:
            return None
        return self.get(cid)

    def close(self) -> None:
        for client in self._clients.values():
            client.close()
        self._clients.clear()
