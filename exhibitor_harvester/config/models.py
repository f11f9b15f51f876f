"""Pydantic models describing a harvest run."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_API_URL = "https://exhibitors.ces.tech/8_0/ajax/remote-proxy.cfm"
DEFAULT_REFERER = "https://exhibitors.ces.tech/8_0/explore/exhibitor-gallery.cfm"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
)


class HarvestConfig(BaseModel):
    """Endpoints, pacing and output settings for one harvest."""

    api_url: str = DEFAULT_API_URL
    referer_url: str = DEFAULT_REFERER
    user_agent: str = DEFAULT_USER_AGENT
    search_type: str = "exhibitorgallery"
    page_size: int = 100
    probe_size: int = 1
    page_delay: float = Field(default=0.1, description="Seconds awaited after each page request.")
    request_timeout: float = 30.0
    concurrency: int = Field(default=30, description="Maximum detail pages in flight.")
    outputs_dir: Path = Field(default=Path("output"))
    json_filename: str = "all_exhibitors.json"
    csv_filename: str = "all_exhibitors.csv"
    enable_progress_bar: bool = True

    @field_validator("outputs_dir", mode="before")
    @classmethod
    def _coerce_dir(cls, value: Any) -> Path:
        return Path(value)

    @field_validator("page_delay")
    @classmethod
    def _non_negative_delay(cls, value: float) -> float:
        if value < 0:
            raise ValueError("page_delay must be >= 0")
        return value

    @model_validator(mode="after")
    def _validate_limits(self) -> "HarvestConfig":
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")
        if self.probe_size < 1:
            raise ValueError("probe_size must be >= 1")
        if self.concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be > 0")
        if not self.json_filename or not self.csv_filename:
            raise ValueError("output filenames cannot be empty")
        return self

    def resolved_outputs_dir(self, base_dir: Path) -> Path:
        """Return the output directory relative to the project home."""

        if not self.outputs_dir.is_absolute():
            return (base_dir / self.outputs_dir).resolve()
        return self.outputs_dir

    def search_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Referer": self.referer_url,
            "X-Requested-With": "XMLHttpRequest",
        }

    def detail_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


__all__ = ["DEFAULT_API_URL", "DEFAULT_REFERER", "DEFAULT_USER_AGENT", "HarvestConfig"]
