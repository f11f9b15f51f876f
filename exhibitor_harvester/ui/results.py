"""Coverage table printed once a harvest finishes."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..engine.summary import HarvestSummary

ROWS = (
    ("With description", "with_description"),
    ("With booth_venue", "with_venue"),
    ("With booth_full", "with_booth"),
    ("With website", "with_website"),
    ("With address", "with_address"),
    ("With categories", "with_categories"),
)


def render_results_table(summary: HarvestSummary) -> Table:
    table = Table(title=f"Results · {summary.total_count} exhibitors", box=box.SIMPLE_HEAD)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Count", style="green", justify="right")
    table.add_column("Share", style="magenta", justify="right")
    for label, attribute in ROWS:
        count = getattr(summary, attribute)
        table.add_row(label, str(count), f"{summary.percent(count)}%")
    return table


__all__ = ["render_results_table"]
