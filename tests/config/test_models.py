from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from exhibitor_harvester.config import HarvestConfig


def test_defaults_match_reference_run() -> None:
    config = HarvestConfig()
    assert config.page_size == 100
    assert config.probe_size == 1
    assert config.page_delay == pytest.approx(0.1)
    assert config.request_timeout == pytest.approx(30.0)
    assert config.concurrency == 30
    assert config.search_type == "exhibitorgallery"
    assert config.outputs_dir == Path("output")


@pytest.mark.parametrize(
    "overrides",
    [
        {"page_delay": -0.5},
        {"page_size": 0},
        {"probe_size": 0},
        {"concurrency": 0},
        {"request_timeout": 0},
        {"json_filename": ""},
    ],
)
def test_invalid_values_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        HarvestConfig(**overrides)


def test_outputs_dir_resolution(tmp_path: Path) -> None:
    relative = HarvestConfig(outputs_dir="exports")
    assert relative.resolved_outputs_dir(tmp_path) == (tmp_path / "exports").resolve()
    absolute = HarvestConfig(outputs_dir=tmp_path / "abs")
    assert absolute.resolved_outputs_dir(Path("/elsewhere")) == tmp_path / "abs"


def test_request_headers() -> None:
    config = HarvestConfig(referer_url="https://ref.example", user_agent="UA/1")
    assert config.search_headers() == {
        "Accept": "application/json",
        "Referer": "https://ref.example",
        "X-Requested-With": "XMLHttpRequest",
    }
    assert config.detail_headers() == {"User-Agent": "UA/1"}
