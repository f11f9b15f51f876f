"""Exhibitor directory harvester: paginated search plus detail-page enrichment."""

__version__ = "0.1.0"
