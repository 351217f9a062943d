"""Terminal implementations of the presenter, output channels and topic explorer."""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Sequence

import click

from kafka_admin.core.errors import error_message
from kafka_admin.domain.ports import Validator
from kafka_admin.infra.kafka.accessor import ClientAccessor

log = logging.getLogger(__name__)


async def _ask(text: str, **kwargs) -> str:
    """Blocking click.prompt, run in a worker thread like the admin client calls."""
    return await asyncio.to_thread(click.prompt, text, **kwargs)


class ConsolePresenter:
    """Prompts on stdin; an empty answer or Ctrl-C/Ctrl-D cancels."""

    async def prompt(self, placeholder: str, validate: Validator | None = None) -> str | None:
        while True:
            try:
                value = await _ask(placeholder, default="", show_default=False)
            except click.Abort:
                click.echo()
                return None
            if not value:
                return None
            error = validate(value) if validate else None
            if error is None:
                return value
            click.secho(error, fg="red", err=True)

    async def confirm_warning(self, message: str, *choices: str) -> str | None:
        click.secho(message, fg="yellow")
        try:
            return await _ask("Choose", type=click.Choice(list(choices)), default=choices[0] if choices else None)
        except click.Abort:
            click.echo()
            return None

    async def pick(self, placeholder: str, items: Sequence[str]) -> str | None:
        for i, item in enumerate(items, start=1):
            click.echo(f"{i:>3}. {item}")
        while True:
            try:
                value = (await _ask(placeholder, default="", show_default=False)).strip()
            except click.Abort:
                click.echo()
                return None
            if not value:
                return None
            if value in items:
                return value
            if value.isdigit() and 1 <= int(value) <= len(items):
                return items[int(value) - 1]
            click.secho(f"'{value}' is not one of the listed items", fg="red", err=True)

    def show_info(self, text: str) -> None:
        click.echo(text)

    def show_error(self, text: str) -> None:
        click.secho(text, fg="red", err=True)


class ConsoleOutputChannel:
    """Buffers appended text until shown."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._parts: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()

    def append(self, text: str) -> None:
        self._parts.append(text)

    def show(self) -> None:
        click.secho(f"--- {self.name} ---", bold=True)
        click.echo(self.text, nl=not self.text.endswith("\n"))


class ConsoleOutputChannels:
    def __init__(self) -> None:
        self._channels: Dict[str, ConsoleOutputChannel] = {}

    def get_channel(self, name: str) -> ConsoleOutputChannel:
        if name not in self._channels:
            self._channels[name] = ConsoleOutputChannel(name)
        return self._channels[name]


class TopicTreeExplorer:
    """Topic tree of the clusters a command worked on, printed to the terminal.

    ``refresh()`` only marks the tree stale; ``render()`` reloads and prints it.
    """

    def __init__(self, accessor: ClientAccessor, cluster_ids: Sequence[str]) -> None:
        self._accessor = accessor
        self._cluster_ids = list(cluster_ids)
        self.stale = False

    def refresh(self) -> None:
        self.stale = True

    async def render(self) -> None:
        if not self.stale:
            return
        self.stale = False
        for cid in self._cluster_ids:
            marker = "*" if cid == self._accessor.selected_cluster_id else " "
            click.secho(f"{marker} {cid}", bold=True)
            try:
                topics = await self._accessor.get(cid).get_topics()
            except Exception as exc:
                log.warning("Listing topics of cluster %s failed: %r", cid, exc)
                click.secho(f"    <{error_message(exc)}>", fg="red")
                continue
            for t in topics:
                click.echo(f"    {t.id} (partitions: {t.partition_count}, replication: {t.replication_factor})")
