"""Cluster- and broker-level DTOs."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Broker(BaseModel):
    """A cluster member; its configuration is fetched separately on demand."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Numeric broker ID")
    host: str | None = None
    port: int | None = None
    rack: str | None = None


class Cluster(BaseModel):
    """A configured cluster and whether it is the currently selected one."""

    id: str
    bootstrap_servers: str
    selected: bool = False
