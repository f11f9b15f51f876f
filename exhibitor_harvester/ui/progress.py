"""Terminal progress helpers with Rich-based rendering."""

from __future__ import annotations

import asyncio
from typing import Protocol

from rich.console import Console
from rich.errors import LiveError
from rich.progress import (
    BarColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    Task,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class CounterLike(Protocol):
    @property
    def value(self) -> int: ...


class RateColumn(ProgressColumn):
    """Items processed per second, e.g. ``12.5 it/s``."""

    def render(self, task: Task) -> Text:
        speed = task.finished_speed or task.speed
        if speed is None:
            return Text("", style="progress.percentage")
        return Text(f"{speed:.1f} it/s", style="progress.percentage")


class ProgressReporter:
    """Render one progress bar per pipeline phase.

    Falls back to silent bookkeeping when disabled or when stdout is not a
    terminal.
    """

    def __init__(self, enabled: bool = True, console: Console | None = None) -> None:
        self.enabled = enabled
        self._console = console
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self.label: str = ""
        self.total: int = 0
        self.completed: int = 0

    def start(self, label: str, total: int) -> None:
        self.close()
        self.label = label
        self.total = total
        self.completed = 0
        if not self.enabled:
            return
        if self._console is None:
            self._console = Console()
        if not self._console.is_terminal:
            self.enabled = False
            return
        self._progress = Progress(
            SpinnerColumn(style="cyan"),
            TextColumn("[bold blue]{task.description:<14}", justify="left"),
            BarColumn(bar_width=None, complete_style="green", finished_style="green"),
            TaskProgressColumn(show_speed=False),
            TimeElapsedColumn(),
            RateColumn(),
            refresh_per_second=12,
            expand=True,
            console=self._console,
        )
        try:
            self._progress.start()
        except LiveError:
            # another live display owns the console
            self.enabled = False
            self._progress = None
            return
        self._task_id = self._progress.add_task(label, total=total)

    def advance(self, amount: int = 1) -> None:
        self.update(self.completed + amount)

    def update(self, completed: int) -> None:
        self.completed = completed
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=completed)

    def close(self) -> None:
        if self._progress is not None:
            if self._task_id is not None:
                self._progress.update(self._task_id, completed=self.completed)
            self._progress.stop()
            self._progress = None
        self._task_id = None


class ProgressMonitor:
    """Poll a shared counter and mirror its value into a reporter."""

    def __init__(self, counter: CounterLike, reporter: ProgressReporter, interval: float = 0.1) -> None:
        self.counter = counter
        self.reporter = reporter
        self.interval = interval
        self._task: asyncio.Task | None = None
        self._stopped = asyncio.Event()

    async def _poll(self) -> None:
        while not self._stopped.is_set():
            self.reporter.update(self.counter.value)
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                continue
        self.reporter.update(self.counter.value)

    def start(self) -> None:
        self._task = asyncio.create_task(self._poll())

    async def stop(self) -> None:
        self._stopped.set()
        if self._task is not None:
            await self._task
            self._task = None


__all__ = ["CounterLike", "ProgressMonitor", "ProgressReporter", "RateColumn"]
