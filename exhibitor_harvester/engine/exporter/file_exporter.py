"""File exporters writing the JSON document and the CSV table."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from ..record import Exhibitor
from ..summary import HarvestSummary
from .base import BaseExporter


class JsonExporter(BaseExporter):
    """Summary counters followed by the full exhibitor list."""

    def export(self, records: Sequence[Exhibitor], summary: HarvestSummary) -> Path:
        self._prepare()
        payload: dict = dict(summary.export_counters())
        payload["scraped_at"] = datetime.now(timezone.utc).isoformat()
        payload["exhibitors"] = [record.as_dict() for record in records]
        with self.path.open("w", encoding="utf-8") as stream:
            json.dump(payload, stream, ensure_ascii=False, indent=2)
        return self.path


class CsvExporter(BaseExporter):
    """One row per exhibitor, columns in record field order."""

    def export(self, records: Sequence[Exhibitor], summary: HarvestSummary) -> Path:
        self._prepare()
        with self.path.open("w", encoding="utf-8", newline="") as stream:
            writer = csv.DictWriter(stream, fieldnames=Exhibitor.column_names())
            writer.writeheader()
            for record in records:
                writer.writerow(record.as_dict())
        return self.path


def build_exporters(output_dir: Path, json_filename: str, csv_filename: str) -> list[BaseExporter]:
    return [JsonExporter(output_dir / json_filename), CsvExporter(output_dir / csv_filename)]


__all__ = ["CsvExporter", "JsonExporter", "build_exporters"]
