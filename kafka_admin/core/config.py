"""Application configuration loaded from environment variables (and .env)."""
import json
from functools import lru_cache
from typing import Annotated, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Global settings object.

    Notes
    -----
    - `clusters` maps a cluster id to its bootstrap servers. It accepts JSON:
        KAFKA_ADMIN_CLUSTERS='{"local":"localhost:9092","staging":"kafka-1:9092"}'
      or a compact string form:
        KAFKA_ADMIN_CLUSTERS='local=localhost:9092; staging=kafka-1:9092,kafka-2:9092'
    - `selected_cluster` is only ever read by the tool, never written.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="KAFKA_ADMIN_",
        extra="ignore",
    )

    # ---------- Clusters ----------
    # NoDecode: the compact form is not JSON, parsing happens in the validator below
    clusters: Annotated[Dict[str, str], NoDecode] = Field(default_factory=dict)
    selected_cluster: str | None = None

    # ---------- Kafka client/admin ----------
    client_id: str = "kafka-admin-cli"
    kafka_api_version: str | None = None

    # Client timeouts (ms)
    request_timeout_ms: int = 20_000
    api_version_auto_timeout_ms: int = 10_000

    # Admin connection retry (connection setup only, admin calls are never retried)
    admin_connect_max_tries: int = Field(default=3, ge=1)
    admin_connect_backoff_sec: float = 1.5

    # ---------- Security (set when using SASL/SSL) ----------
    security_protocol: str = "PLAINTEXT"   # e.g. "SASL_SSL", "SSL"
    sasl_mechanism: str | None = None
    sasl_plain_username: str | None = None
    sasl_plain_password: str | None = None
    ssl_cafile: str | None = None

    # ---------- Logging ----------
    log_level: str = "WARNING"

    @field_validator("clusters", mode="before")
    def _parse_clusters(cls, v):
        """
        Accept JSON mapping or a compact string format:
          'local=localhost:9092; staging=kafka-1:9092,kafka-2:9092'
        """
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(cid).strip(): str(bootstrap).strip() for cid, bootstrap in v.items()}
        if isinstance(v, str):
            # Try JSON mapping first
            try:
                obj = json.loads(v)
                if isinstance(obj, dict):
                    return {str(cid).strip(): str(bootstrap).strip() for cid, bootstrap in obj.items()}
            except ValueError:
                pass
            # Fallback compact form
            result: Dict[str, str] = {}
            for part in v.split(";"):
                part = part.strip()
                if not part or "=" not in part:
                    continue
                cid, bootstrap = part.split("=", 1)
                if cid.strip() and bootstrap.strip():
                    result[cid.strip()] = bootstrap.strip()
            return result
        return v

    @field_validator("selected_cluster", mode="before")
    def _blank_selection_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()  # pragma: no cover
