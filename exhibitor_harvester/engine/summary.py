"""Coverage counters reported after a harvest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .record import Exhibitor

DESCRIPTION_MIN_LENGTH = 20


@dataclass(slots=True)
class HarvestSummary:
    total_count: int = 0
    with_description: int = 0
    with_venue: int = 0
    with_booth: int = 0
    with_website: int = 0
    with_address: int = 0
    with_categories: int = 0

    @classmethod
    def from_records(cls, records: Iterable[Exhibitor]) -> "HarvestSummary":
        summary = cls()
        for record in records:
            summary.total_count += 1
            if len(record.description) > DESCRIPTION_MIN_LENGTH:
                summary.with_description += 1
            if record.booth_venue:
                summary.with_venue += 1
            if record.booth_full:
                summary.with_booth += 1
            if record.website:
                summary.with_website += 1
            if record.address:
                summary.with_address += 1
            if record.product_categories:
                summary.with_categories += 1
        return summary

    def percent(self, count: int) -> int:
        if self.total_count <= 0:
            return 0
        return count * 100 // self.total_count

    def export_counters(self) -> dict[str, int]:
        """Counters carried in the JSON export."""

        return {
            "total_count": self.total_count,
            "with_description": self.with_description,
            "with_booth": self.with_booth,
            "with_website": self.with_website,
            "with_address": self.with_address,
            "with_categories": self.with_categories,
        }


__all__ = ["HarvestSummary"]
