from __future__ import annotations

import asyncio
import io

from rich.console import Console

from exhibitor_harvester.engine import HarvestSummary, ProgressCounter
from exhibitor_harvester.ui import ProgressMonitor, ProgressReporter, render_results_table


def test_progress_reporter_bookkeeping_when_disabled() -> None:
    reporter = ProgressReporter(enabled=False)
    reporter.start("API pages", total=3)
    reporter.advance()
    reporter.advance(2)
    assert (reporter.label, reporter.total, reporter.completed) == ("API pages", 3, 3)
    reporter.start("Detail pages", total=5)
    assert reporter.completed == 0
    reporter.close()


def test_progress_reporter_silent_without_terminal() -> None:
    console = Console(file=io.StringIO(), force_terminal=False)
    reporter = ProgressReporter(enabled=True, console=console)
    reporter.start("API pages", total=2)
    reporter.update(2)
    reporter.close()
    assert reporter.enabled is False
    assert reporter.completed == 2
    assert console.file.getvalue() == ""


def test_progress_monitor_mirrors_counter() -> None:
    reporter = ProgressReporter(enabled=False)
    counter = ProgressCounter(total=4)
    reporter.start("Detail pages", total=4)

    async def _main() -> None:
        monitor = ProgressMonitor(counter, reporter, interval=0.01)
        monitor.start()
        for _ in range(4):
            counter.increment()
            await asyncio.sleep(0.02)
        await monitor.stop()

    asyncio.run(_main())
    assert reporter.completed == 4


def test_results_table_lists_counts_and_shares() -> None:
    summary = HarvestSummary(total_count=4, with_website=3, with_booth=1)
    console = Console(file=io.StringIO(), width=100)
    console.print(render_results_table(summary))
    output = console.file.getvalue()
    assert "4 exhibitors" in output
    assert "With website" in output
    assert "75%" in output
    assert "25%" in output


def test_results_table_empty_harvest() -> None:
    console = Console(file=io.StringIO(), width=100)
    console.print(render_results_table(HarvestSummary()))
    assert "0%" in console.file.getvalue()
