"""Exporter Service Provider Interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ..record import Exhibitor
from ..summary import HarvestSummary


class BaseExporter(ABC):
    """Uniform exporter contract; each exporter writes one file per run."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @abstractmethod
    def export(self, records: Sequence[Exhibitor], summary: HarvestSummary) -> Path:
        """Write ``records`` to ``self.path`` and return it."""

    def _prepare(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)


__all__ = ["BaseExporter"]
