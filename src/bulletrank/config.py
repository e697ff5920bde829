"""Environment-backed settings."""

from __future__ import annotations

import os

from pydantic import BaseModel

from bulletrank.errors import ConfigurationError

DEFAULT_WEBHOOK_TIMEOUT = 30.0


class Settings(BaseModel):
    """Runtime settings, read from the environment (and ``.env`` via the CLI)."""

    webhook_url: str | None = None
    webhook_timeout: float = DEFAULT_WEBHOOK_TIMEOUT
    default_strategy: str = "sort"

    @classmethod
    def from_env(cls) -> Settings:
        raw_timeout = os.environ.get("BULLETRANK_WEBHOOK_TIMEOUT", DEFAULT_WEBHOOK_TIMEOUT)
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"BULLETRANK_WEBHOOK_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from None
        return cls(
            webhook_url=os.environ.get("N8N_WEBHOOK_URL") or None,
            webhook_timeout=timeout,
            default_strategy=os.environ.get("BULLETRANK_STRATEGY", "sort"),
        )
