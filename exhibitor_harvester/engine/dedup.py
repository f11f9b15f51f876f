"""Identity based deduplication of the merged page batches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .record import Exhibitor


@dataclass
class DeduplicationResult:
    records: list[Exhibitor]
    dropped: int

    @property
    def kept(self) -> int:
        return len(self.records)


def dedupe_records(records: Iterable[Exhibitor]) -> DeduplicationResult:
    """Keep the first record seen for each ``exhid``, preserving order."""

    seen: set[str] = set()
    unique: list[Exhibitor] = []
    dropped = 0
    for record in records:
        if record.exhid in seen:
            dropped += 1
            continue
        seen.add(record.exhid)
        unique.append(record)
    return DeduplicationResult(records=unique, dropped=dropped)


__all__ = ["DeduplicationResult", "dedupe_records"]
