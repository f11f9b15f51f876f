"""Harvest pipeline wiring bulk fetch, dedup, enrichment, export and progress."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import httpx
import structlog

from .config import ConfigRepository, HarvestConfig
from .engine import (
    BulkFetcher,
    EnrichmentOrchestrator,
    Exhibitor,
    HarvestError,
    HarvestSummary,
    ProgressCounter,
    dedupe_records,
)
from .engine.exporter import BaseExporter, build_exporters
from .logging_conf import configure_logging
from .ui import ProgressMonitor, ProgressReporter


@dataclass
class HarvestResult:
    records: list[Exhibitor]
    summary: HarvestSummary
    fetched: int = 0
    duplicates: int = 0
    outputs: list[Path] = field(default_factory=list)


class HarvestPipeline:
    """Run one complete harvest: count, page, dedupe, enrich, export."""

    def __init__(
        self,
        config: HarvestConfig,
        output_dir: Path,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        progress_factory: Callable[[], ProgressReporter] | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self.output_dir = output_dir
        self.transport = transport
        self.progress_factory = progress_factory or (
            lambda: ProgressReporter(enabled=config.enable_progress_bar)
        )
        self.logger = logger or configure_logging().bind(component="pipeline")

    @classmethod
    def from_repository(cls, repository: ConfigRepository, **kwargs) -> "HarvestPipeline":
        config = repository.load_config()
        return cls(config, repository.outputs_dir(config), **kwargs)

    def _build_client(self) -> httpx.AsyncClient:
        try:
            return httpx.AsyncClient(
                timeout=self.config.request_timeout,
                follow_redirects=True,
                transport=self.transport,
            )
        except Exception as exc:  # noqa: BLE001
            raise HarvestError(f"Unable to construct HTTP client: {exc}") from exc

    def _exporters(self) -> list[BaseExporter]:
        return build_exporters(self.output_dir, self.config.json_filename, self.config.csv_filename)

    async def run_async(self) -> HarvestResult:
        async with self._build_client() as client:
            fetcher = BulkFetcher(client, self.config, logger=self.logger.bind(phase="bulk"))
            try:
                total = await fetcher.count()
            except HarvestError:
                raise
            except Exception as exc:  # noqa: BLE001
                raise HarvestError(f"Exhibitor count probe failed: {exc}") from exc
            self.logger.info("total_exhibitors", total=total)

            progress = self.progress_factory()
            progress.start("API pages", total)
            try:
                fetched = await fetcher.fetch_all(total, on_page=progress.advance)
            finally:
                progress.close()

            deduped = dedupe_records(fetched)
            self.logger.info(
                "dedup_complete", fetched=len(fetched), unique=deduped.kept, dropped=deduped.dropped
            )

            enricher = EnrichmentOrchestrator(
                client, self.config, logger=self.logger.bind(phase="enrichment")
            )
            counter = ProgressCounter(total=deduped.kept)
            progress = self.progress_factory()
            progress.start("Detail pages", deduped.kept)
            monitor = ProgressMonitor(counter, progress)
            monitor.start()
            try:
                records = await enricher.enrich_all(deduped.records, counter)
            finally:
                await monitor.stop()
                progress.close()

        summary = HarvestSummary.from_records(records)
        outputs = [exporter.export(records, summary) for exporter in self._exporters()]
        for path in outputs:
            self.logger.info("export_written", path=str(path))
        return HarvestResult(
            records=records,
            summary=summary,
            fetched=len(fetched),
            duplicates=deduped.dropped,
            outputs=outputs,
        )

    def run(self) -> HarvestResult:
        return asyncio.run(self.run_async())


__all__ = ["HarvestPipeline", "HarvestResult"]
