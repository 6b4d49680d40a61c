# src/services/health_checker.py

"""Catalog API connectivity health checker."""

import asyncio
import logging
import time
from dataclasses import dataclass

from src.api.client import ProductApiClient
from src.config.settings import Settings

logger = logging.getLogger("catalog.health")


@dataclass
class HealthResult:
    """Result of probing the catalog API."""

    endpoint: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_api(client: ProductApiClient) -> HealthResult:
    """Time a single GET against the product collection."""
    endpoint = Settings.products_url()
    start = time.monotonic()
    try:
        status_code = client.ping()
    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            endpoint=endpoint,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )
    elapsed_ms = (time.monotonic() - start) * 1000

    if status_code != 200:
        return HealthResult(
            endpoint=endpoint,
            status="down",
            latency_ms=elapsed_ms,
            message=f"HTTP {status_code}",
        )

    if elapsed_ms > Settings.HEALTH_SLOW_MS:
        return HealthResult(
            endpoint=endpoint,
            status="slow",
            latency_ms=elapsed_ms,
            message="High latency",
        )

    return HealthResult(
        endpoint=endpoint,
        status="ok",
        latency_ms=elapsed_ms,
        message="",
    )


class HealthChecker:
    """Runs the API probe off the event loop."""

    def __init__(self, client: ProductApiClient | None = None) -> None:
        self.client = client or ProductApiClient()

    async def check(self) -> HealthResult:
        """Probe the catalog API once and log the result."""
        result = await asyncio.to_thread(probe_api, self.client)
        logger.info(
            "Health check %s: %s (%.0fms) %s",
            result.endpoint,
            result.status,
            result.latency_ms,
            result.message,
        )
        return result
