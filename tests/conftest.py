"""Shared fixtures: isolated project home, configs and fake API payloads."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from exhibitor_harvester.config import ConfigLocator, ConfigRepository, HarvestConfig

DETAIL_HTML = r"""
<html><body>
<script>
new Vue({ data: {
  websiteValue: "https:\/\/acme.example\/home",
  addressValues: {"ZIP":"89501","CITY":"Reno","ADDRESS1":"123 Main","ADDRESS2":"","STATE":"-","COUNTRY":"USA"}
}});
</script>
<a class="floorplan" href="/8_0/floorplan/?booth=17214">LVCC, Central Hall &mdash; 17214</a>
<ul>
  <li><a href="/8_0/explore/exhibitor-gallery.cfm?featured=false#/searchtype/category/search/1/show/all">Product Categories</a></li>
  <li><a href="/8_0/explore/exhibitor-gallery.cfm?featured=false#/searchtype/category/search/12/show/all">AI</a></li>
  <li><a href="/8_0/explore/exhibitor-gallery.cfm?featured=false#/searchtype/category/search/3/show/all">X</a></li>
  <li><a href="/8_0/explore/exhibitor-gallery.cfm?featured=false#/searchtype/category/search/40/show/all"> Robotics </a></li>
</ul>
</body></html>
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EXHIBITOR_HARVESTER_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def harvest_config() -> HarvestConfig:
    return HarvestConfig(
        page_size=2,
        page_delay=0.0,
        concurrency=3,
        request_timeout=5.0,
        enable_progress_bar=False,
    )


@pytest.fixture
def temp_config_repository(tmp_path) -> ConfigRepository:
    return ConfigRepository(ConfigLocator(project_root=tmp_path))


def make_hit(exhid: Any, name: str = "", **fields: Any) -> dict:
    payload = {"exhid_l": exhid, "exhname_t": name or f"Exhibitor {exhid}"}
    payload.update(fields)
    return {"fields": payload}


def make_search_payload(
    hits: list[dict] | None = None,
    featured: list[dict] | None = None,
    total: int = 0,
    success: bool = True,
) -> dict:
    return {
        "SUCCESS": success,
        "DATA": {
            "totalhits": total,
            "results": {
                "exhibitor": {"hit": hits or []},
                "featured": {"hit": featured or []},
            },
        },
    }


@pytest.fixture
def hit() -> Callable[..., dict]:
    return make_hit


@pytest.fixture
def search_payload() -> Callable[..., dict]:
    return make_search_payload


@pytest.fixture
def detail_html() -> str:
    return DETAIL_HTML
