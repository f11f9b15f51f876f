"""Exception hierarchy for the harvest pipeline."""

from __future__ import annotations


class HarvestError(RuntimeError):
    """Base error; anything escaping the pipeline as this aborts the run."""


class PageFetchError(HarvestError):
    """A single search page could not be retrieved or decoded."""

    def __init__(self, start: int, reason: str) -> None:
        super().__init__(f"Page at start={start} failed: {reason}")
        self.start = start
        self.reason = reason


__all__ = ["HarvestError", "PageFetchError"]
