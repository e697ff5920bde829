"""Async client for the resume-data webhook."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from bulletrank.config import Settings
from bulletrank.errors import ConfigurationError, WebhookError

logger = logging.getLogger(__name__)


class WebhookClient:
    """Fetches scored resume bullets for a job application number."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = Settings.from_env()
        self.url = url or settings.webhook_url
        if not self.url:
            raise ConfigurationError("N8N_WEBHOOK_URL not set. Pass it directly or set the env var.")
        self.timeout = timeout if timeout is not None else settings.webhook_timeout
        self._transport = transport

    async def fetch(self, job_number: int) -> Any:
        """GET ``<url>?number=<job_number>`` and return the decoded JSON body."""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            start = time.perf_counter()
            try:
                resp = await client.get(self.url, params={"number": job_number})
            except httpx.HTTPError as exc:
                raise WebhookError(f"Request to webhook failed: {exc}") from exc
            latency_ms = (time.perf_counter() - start) * 1000
            logger.debug("Webhook %s -> %d in %.0fms", resp.url, resp.status_code, latency_ms)

            if resp.is_error:
                raise WebhookError(
                    f"Webhook returned HTTP {resp.status_code} for job {job_number}",
                    status_code=resp.status_code,
                )
            try:
                return resp.json()
            except ValueError as exc:
                raise WebhookError(f"Webhook returned invalid JSON for job {job_number}") from exc


def fetch_resume_data(
    job_number: int,
    url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Synchronous wrapper around WebhookClient.fetch."""
    client = WebhookClient(url=url, timeout=timeout, transport=transport)
    return asyncio.run(client.fetch(job_number))
