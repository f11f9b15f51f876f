"""Engine components orchestrating fetch → dedup → enrich → export."""

from .dedup import DeduplicationResult, dedupe_records
from .enrichment import EnrichmentOrchestrator, ProgressCounter
from .errors import HarvestError, PageFetchError
from .extractor import apply_fields, extract_fields
from .fetcher import BulkFetcher, PageResult
from .record import Exhibitor, detail_url_for, new_record, normalize_tokens
from .summary import HarvestSummary

__all__ = [
    "BulkFetcher",
    "DeduplicationResult",
    "EnrichmentOrchestrator",
    "Exhibitor",
    "HarvestError",
    "HarvestSummary",
    "PageFetchError",
    "PageResult",
    "ProgressCounter",
    "apply_fields",
    "dedupe_records",
    "detail_url_for",
    "extract_fields",
    "new_record",
    "normalize_tokens",
]
