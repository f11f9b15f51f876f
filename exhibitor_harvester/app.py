"""Typer CLI entrypoint for the exhibitor harvester."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console

from .config import ConfigRepository
from .engine import HarvestError
from .logging_conf import configure_logging, default_log_dir, tail_log
from .orchestrator import HarvestPipeline
from .ui import ProgressReporter, render_results_table

app = typer.Typer(
    help="Harvest the exhibitor directory and export it as JSON and CSV.",
    no_args_is_help=True,
    rich_markup_mode=None,
)
config_app = typer.Typer(name="config", help="Inspect configuration.", no_args_is_help=True)
log_app = typer.Typer(name="log", help="Inspect log files.", no_args_is_help=True)

console = Console()


@dataclass
class AppState:
    repository: ConfigRepository
    verbose: bool = False


def build_state(verbose: bool) -> AppState:
    repository = ConfigRepository()
    configure_logging(verbose=verbose)
    return AppState(repository=repository, verbose=verbose)


def _get_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if state is None:
        state = build_state(verbose=False)
        ctx.obj = state
    return state


app.add_typer(config_app, name="config")
app.add_typer(log_app, name="log")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    ctx.obj = build_state(verbose)


@app.command("run", help="Fetch, deduplicate, enrich and export every exhibitor.")
def run(
    ctx: typer.Context,
    quiet: bool = typer.Option(False, "--quiet", help="Hide progress bars."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Directory for the exports."),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", min=1, help="Detail pages in flight."),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, help="Records per search page."),
) -> None:
    state = _get_state(ctx)
    config = state.repository.load_config()
    overrides: dict[str, object] = {}
    if quiet:
        overrides["enable_progress_bar"] = False
    if concurrency is not None:
        overrides["concurrency"] = concurrency
    if page_size is not None:
        overrides["page_size"] = page_size
    if overrides:
        config = config.model_copy(update=overrides)
    target_dir = output_dir or state.repository.outputs_dir(config)

    pipeline = HarvestPipeline(
        config,
        target_dir,
        progress_factory=lambda: ProgressReporter(enabled=config.enable_progress_bar, console=console),
    )
    console.print("Exhibitor harvest started", style="bold")
    try:
        result = pipeline.run()
    except HarvestError as exc:
        console.print(f"Harvest aborted: {exc}", style="red")
        raise typer.Exit(code=1) from exc

    console.print(
        f"Fetched {result.fetched} records, {result.duplicates} duplicates dropped.",
        style="dim",
    )
    console.print(render_results_table(result.summary))
    for path in result.outputs:
        console.print(f"Saved to {path}", style="green", soft_wrap=True)


@config_app.command("show", help="Print the effective configuration as YAML.")
def config_show(ctx: typer.Context) -> None:
    state = _get_state(ctx)
    config = state.repository.load_config()
    console.print(f"# {state.repository.locator.config_path()}", style="dim", soft_wrap=True)
    console.print(
        yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False),
        end="",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


@log_app.command("show", help="Show the most recent harvest log lines.")
def log_show(
    tail: int = typer.Option(100, "--tail", min=1, help="Number of lines to show."),
) -> None:
    lines = tail_log(default_log_dir() / "harvest.log", tail)
    if not lines:
        console.print("No log entries yet.", style="dim")
        return
    console.print(f"harvest.log · last {len(lines)} lines", style="cyan")
    console.print("".join(lines), end="", markup=False, highlight=False, soft_wrap=True)


__all__ = ["AppState", "app", "build_state"]
