"""Bounded-concurrency enrichment of exhibitors from their detail pages."""

from __future__ import annotations

import asyncio
from typing import Sequence

import httpx
import structlog

from ..config import HarvestConfig
from .extractor import apply_fields, extract_fields
from .record import Exhibitor


class ProgressCounter:
    """Completed-unit counter shared by enrichment tasks.

    ``increment`` never suspends, so on a single event loop it cannot race.
    Readers poll ``value``.
    """

    def __init__(self, total: int = 0) -> None:
        self.total = total
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def increment(self, amount: int = 1) -> int:
        self._value += amount
        return self._value


class EnrichmentOrchestrator:
    """Fetch every detail page with at most ``concurrency`` requests in flight."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: HarvestConfig,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self.concurrency = config.concurrency
        self.logger = logger or structlog.get_logger("exhibitor_harvester.enrichment")

    async def enrich_one(self, record: Exhibitor) -> Exhibitor:
        response = await self.client.get(record.detail_url, headers=self.config.detail_headers())
        response.raise_for_status()
        return apply_fields(record, extract_fields(response.text))

    async def _run(
        self, gate: asyncio.Semaphore, record: Exhibitor, counter: ProgressCounter
    ) -> tuple[Exhibitor, bool]:
        ok = True
        async with gate:
            try:
                await self.enrich_one(record)
            except Exception as exc:  # noqa: BLE001
                ok = False
                self.logger.debug(
                    "detail_fetch_failed",
                    exhid=record.exhid,
                    url=record.detail_url,
                    error=str(exc) or type(exc).__name__,
                )
        counter.increment()
        return record, ok

    async def enrich_all(
        self, records: Sequence[Exhibitor], counter: ProgressCounter | None = None
    ) -> list[Exhibitor]:
        """Enrich ``records`` and return all of them in completion order."""

        counter = counter or ProgressCounter(total=len(records))
        gate = asyncio.Semaphore(self.concurrency)
        tasks = [asyncio.create_task(self._run(gate, record, counter)) for record in records]
        enriched: list[Exhibitor] = []
        failed = 0
        for future in asyncio.as_completed(tasks):
            record, ok = await future
            enriched.append(record)
            if not ok:
                failed += 1
        self.logger.info("enrichment_complete", records=len(enriched), failed=failed)
        return enriched


__all__ = ["EnrichmentOrchestrator", "ProgressCounter"]
