from __future__ import annotations

import asyncio

import httpx

from exhibitor_harvester.engine.enrichment import EnrichmentOrchestrator, ProgressCounter
from exhibitor_harvester.engine.record import Exhibitor


def _records(count: int) -> list[Exhibitor]:
    return [Exhibitor(exhid=str(i), name=f"Exhibitor {i}", scraped_at="t") for i in range(count)]


def _enrich(handler, config, records, counter=None):
    async def _main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            orchestrator = EnrichmentOrchestrator(client, config)
            return await orchestrator.enrich_all(records, counter)

    return asyncio.run(_main())


def test_progress_counter_increments() -> None:
    counter = ProgressCounter(total=2)
    assert counter.value == 0
    counter.increment()
    assert counter.increment() == 2
    assert counter.increment(3) == counter.value == 5


def test_enrich_all_applies_extracted_fields(harvest_config, detail_html) -> None:
    seen_agents: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_agents.append(request.headers["User-Agent"])
        return httpx.Response(200, text=detail_html)

    records = _records(2)
    enriched = _enrich(handler, harvest_config, records)
    assert {r.exhid for r in enriched} == {"0", "1"}
    for record in enriched:
        assert record.website == "https://acme.example/home"
        assert record.address == "123 Main, Reno, 89501, USA"
        assert record.booth_full == "LVCC, Central Hall - 17214"
        assert record.product_categories == "AI; Robotics"
    assert set(seen_agents) == {harvest_config.user_agent}


def test_enrich_requests_detail_url_of_each_record(harvest_config) -> None:
    urls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        urls.append(str(request.url))
        return httpx.Response(200, text="")

    records = _records(3)
    _enrich(handler, harvest_config, records)
    assert sorted(urls) == sorted(record.detail_url for record in records)


def test_concurrency_never_exceeds_gate(harvest_config) -> None:
    state = {"in_flight": 0, "peak": 0}

    async def handler(request: httpx.Request) -> httpx.Response:
        state["in_flight"] += 1
        state["peak"] = max(state["peak"], state["in_flight"])
        await asyncio.sleep(0.01)
        state["in_flight"] -= 1
        return httpx.Response(200, text="")

    records = _records(25)
    enriched = _enrich(handler, harvest_config, records)
    assert len(enriched) == 25
    assert state["peak"] <= harvest_config.concurrency
    assert state["peak"] == harvest_config.concurrency


def test_failures_are_contained_and_counted(harvest_config, detail_html) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        exhid = int(request.url.params["exhid"])
        if exhid % 3 == 0:
            raise httpx.ConnectError("refused", request=request)
        if exhid % 3 == 1:
            raise httpx.ReadTimeout("slow", request=request)
        return httpx.Response(200, text=detail_html)

    records = _records(10)
    counter = ProgressCounter(total=10)
    enriched = _enrich(handler, harvest_config, records, counter)
    assert len(enriched) == 10
    assert sorted(r.exhid for r in enriched) == sorted(str(i) for i in range(10))
    assert counter.value == 10
    enriched_ids = {r.exhid for r in enriched if r.website}
    assert enriched_ids == {"2", "5", "8"}


def test_http_error_status_keeps_record_untouched(harvest_config, detail_html) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text=detail_html)

    records = _records(1)
    enriched = _enrich(handler, harvest_config, records)
    assert enriched[0].website == ""
    assert enriched[0].name == "Exhibitor 0"


def test_empty_input_returns_empty(harvest_config) -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not run
        raise AssertionError("unexpected request")

    assert _enrich(handler, harvest_config, []) == []
