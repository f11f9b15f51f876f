"""Paginated retrieval against the exhibitor search endpoint."""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import structlog

from ..config import HarvestConfig
from .errors import PageFetchError
from .record import Exhibitor, new_record


@dataclass(slots=True)
class PageResult:
    """Records parsed from one search page plus the server-reported total."""

    records: list[Exhibitor] = field(default_factory=list)
    total: int = 0


def _dig(payload: Any, *keys: str) -> Any:
    current = payload
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _hit_fields(hits: Any) -> list[Any]:
    if not isinstance(hits, list):
        return []
    return [hit.get("fields") if isinstance(hit, dict) else None for hit in hits]


def _total_hits(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(int(value), 0)


def parse_page(payload: Any) -> PageResult:
    """Turn a successful search payload into a :class:`PageResult`.

    Featured hits are appended only when no record already in this batch
    carries the same identity.
    """

    records = [new_record(raw) for raw in _hit_fields(_dig(payload, "DATA", "results", "exhibitor", "hit"))]
    for raw in _hit_fields(_dig(payload, "DATA", "results", "featured", "hit")):
        record = new_record(raw)
        if not any(existing.exhid == record.exhid for existing in records):
            records.append(record)
    return PageResult(records=records, total=_total_hits(_dig(payload, "DATA", "totalhits")))


class BulkFetcher:
    """Probe the total count, then walk the search pages sequentially."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: HarvestConfig,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self.logger = logger or structlog.get_logger("exhibitor_harvester.fetcher")

    async def fetch_page(self, start: int, size: int) -> PageResult:
        params = {
            "action": "search",
            "searchtype": self.config.search_type,
            "searchsize": size,
            "start": start,
        }
        try:
            response = await self.client.get(
                self.config.api_url, params=params, headers=self.config.search_headers()
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise PageFetchError(start, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise PageFetchError(start, f"invalid JSON body: {exc}") from exc
        if _dig(payload, "SUCCESS") is not True:
            raise PageFetchError(start, "API returned unsuccessful response")
        return parse_page(payload)

    async def count(self) -> int:
        """Learn the total hit count; failures propagate to the caller."""

        result = await self.fetch_page(0, self.config.probe_size)
        return result.total

    async def fetch_all(
        self, total: int, on_page: Callable[[int], None] | None = None
    ) -> list[Exhibitor]:
        """Fetch every page up to ``total``; failed pages are skipped."""

        collected: list[Exhibitor] = []
        page_size = self.config.page_size
        start = 0
        failed_pages = 0
        while start < total:
            try:
                page = await self.fetch_page(start, page_size)
            except PageFetchError as exc:
                failed_pages += 1
                self.logger.warning("page_fetch_failed", start=exc.start, error=exc.reason)
            else:
                collected.extend(page.records)
                if on_page is not None:
                    on_page(len(page.records))
            start += page_size
            await asyncio.sleep(self.config.page_delay)
        self.logger.info(
            "pages_fetched", total=total, records=len(collected), failed_pages=failed_pages
        )
        return collected


__all__ = ["BulkFetcher", "PageResult", "parse_page"]
