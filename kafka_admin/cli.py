"""kafka-admin command line: create, inspect and delete topics."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

import click

from kafka_admin.core.config import Settings, get_settings
from kafka_admin.core.errors import error_message
from kafka_admin.domain.models.topic import TopicItem
from kafka_admin.domain.services.cluster_service import list_clusters
from kafka_admin.domain.services.resolution import NO_CLUSTER_SELECTED
from kafka_admin.domain.services.topic_service import (
    CreateTopicCommandHandler,
    DeleteTopicCommandHandler,
    DumpTopicMetadataCommandHandler,
)
from kafka_admin.infra.console import ConsoleOutputChannels, ConsolePresenter, TopicTreeExplorer
from kafka_admin.infra.kafka.accessor import ClientAccessor


@dataclass
class Context:
    settings: Settings
    accessor: ClientAccessor
    presenter: ConsolePresenter
    explorer: TopicTreeExplorer


def _run(ctx: Context, coro) -> None:
    async def _main() -> None:
        await coro
        await ctx.explorer.render()

    try:
        asyncio.run(_main())
    finally:
        ctx.accessor.close()


async def _bind_topic(ctx: Context, topic_name: str | None) -> TopicItem | None:
    """Look *topic_name* up on the selected cluster; None means "let the user pick"."""
    if topic_name is None:
        return None
    cid = ctx.accessor.selected_cluster_id
    client = ctx.accessor.get_selected_cluster_client()
    if client is None or cid is None:
        return None
    for topic in await client.get_topics():
        if topic.id == topic_name:
            return TopicItem(cluster_id=cid, topic=topic)
    raise click.ClickException(f"Topic '{topic_name}' not found on cluster '{cid}'")


async def _execute_for_topic(ctx: Context, handler, topic_name: str | None) -> None:
    try:
        item = await _bind_topic(ctx, topic_name)
    except click.ClickException:
        raise
    except Exception as exc:
        ctx.presenter.show_error(error_message(exc))
        return
    await handler.execute(item)


@click.group()
@click.option("--cluster", "-c", "cluster_id", help="Cluster id to use instead of the selected cluster")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, cluster_id: str | None, verbose: bool) -> None:
    """Manage Kafka topics on the configured clusters."""
    settings = get_settings()
    if cluster_id:
        settings = settings.model_copy(update={"selected_cluster": cluster_id})
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    accessor = ClientAccessor(settings)
    ctx.obj = Context(
        settings=settings,
        accessor=accessor,
        presenter=ConsolePresenter(),
        explorer=TopicTreeExplorer(accessor, [settings.selected_cluster] if settings.selected_cluster else []),
    )


@cli.command("clusters")
@click.pass_obj
def clusters_cmd(ctx: Context) -> None:
    """List configured clusters; the selected one is marked with '*'."""
    clusters = list_clusters(ctx.settings)
    if not clusters:
        click.echo("No clusters configured (set KAFKA_ADMIN_CLUSTERS)")
        return
    for c in clusters:
        click.echo(f"{'*' if c.selected else ' '} {c.id}\t{c.bootstrap_servers}")


@cli.command("create-topic")
@click.argument("cluster_id", required=False)
@click.pass_obj
def create_topic_cmd(ctx: Context, cluster_id: str | None) -> None:
    """Create a topic on CLUSTER_ID (default: the selected cluster)."""
    cluster_id = cluster_id or ctx.accessor.selected_cluster_id
    if not cluster_id:
        ctx.presenter.show_info(NO_CLUSTER_SELECTED)
        return
    # only the target cluster is re-listed after the mutation
    ctx.explorer = TopicTreeExplorer(ctx.accessor, [cluster_id])
    handler = CreateTopicCommandHandler(ctx.accessor, ctx.presenter, ctx.explorer)
    _run(ctx, handler.execute(cluster_id))


@cli.command("dump-topic")
@click.argument("topic", required=False)
@click.pass_obj
def dump_topic_cmd(ctx: Context, topic: str | None) -> None:
    """Print metadata and configuration of TOPIC (or a picked topic) as YAML."""
    handler = DumpTopicMetadataCommandHandler(ctx.accessor, ctx.presenter, ConsoleOutputChannels())
    _run(ctx, _execute_for_topic(ctx, handler, topic))


@cli.command("delete-topic")
@click.argument("topic", required=False)
@click.pass_obj
def delete_topic_cmd(ctx: Context, topic: str | None) -> None:
    """Delete TOPIC (or a picked topic) after confirmation."""
    handler = DeleteTopicCommandHandler(ctx.accessor, ctx.presenter, ctx.explorer)
    _run(ctx, _execute_for_topic(ctx, handler, topic))


def main() -> None:
    cli(prog_name="kafka-admin")


if __name__ == "__main__":
    main()
