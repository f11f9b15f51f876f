"""User interaction helpers."""

from .progress import ProgressMonitor, ProgressReporter
from .results import render_results_table

__all__ = ["ProgressMonitor", "ProgressReporter", "render_results_table"]
