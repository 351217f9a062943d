from kafka_admin.core.config import Settings
from kafka_admin.domain.models.cluster import Broker
from kafka_admin.domain.models.topic import ConfigEntry
from kafka_admin.domain.services.cluster_service import auto_create_topics_enabled, list_clusters

AUTO_CREATE_ON = ConfigEntry(config_name="auto.create.topics.enable", config_value="true")


async def test_no_brokers_means_no_risk(client):
    assert await auto_create_topics_enabled(client) is False
    assert client.broker_config_calls == []


async def test_later_broker_is_scanned_when_earlier_reports_nothing(client):
    client.brokers = [Broker(id=1), Broker(id=2)]
    client.broker_configs = {1: [], 2: [AUTO_CREATE_ON]}

    assert await auto_create_topics_enabled(client) is True
    assert client.broker_config_calls == [1, 2]


async def test_scan_stops_at_first_broker_with_flag(client):
    client.brokers = [Broker(id=1), Broker(id=2)]
    client.broker_configs = {1: [AUTO_CREATE_ON], 2: [AUTO_CREATE_ON]}

    assert await auto_create_topics_enabled(client) is True
    assert client.broker_config_calls == [1]


async def test_flag_value_is_compared_case_sensitively(client):
    client.brokers = [Broker(id=1), Broker(id=2)]
    client.broker_configs = {
        1: [ConfigEntry(config_name="auto.create.topics.enable", config_value="True")],
        2: [ConfigEntry(config_name="auto.create.topics.enable", config_value="false")],
    }

    assert await auto_create_topics_enabled(client) is False
    assert client.broker_config_calls == [1, 2]


def test_list_clusters_marks_selection():
    settings = Settings(_env_file=None, clusters={"b": "b:9092", "a": "a:9092"}, selected_cluster="b")

    clusters = list_clusters(settings)

    assert [(c.id, c.selected) for c in clusters] == [("a", False), ("b", True)]
