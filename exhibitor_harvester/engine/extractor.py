"""Pattern-based field extraction from exhibitor detail pages.

Detail pages are rendered by a Vue app whose initial state is inlined as
``key: value`` assignments, so every rule here is a regular expression over
the raw page text. Rules are independent: each one maps the text to a value
or ``None`` and never raises.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Callable

from .record import TOKEN_SEPARATOR, Exhibitor

WEBSITE_RE = re.compile(r'websiteValue:\s*"([^"]+)"')
ADDRESS_RE = re.compile(r"addressValues:\s*(\{[^}]+\})")
CATEGORY_RE = re.compile(r'searchtype/category/search/\d+/show/all">([^<]+)<')
HOSPITALITY_RE = re.compile(r">([\w\s]+Hospitality Suites?[^<]*)<")

VENUE_PREFIXES = (
    "LVCC",
    "Venetian",
    "Westgate",
    "Aria",
    "Wynn",
    "Fontainebleau",
    "Resorts World",
)
BOOTH_RE = re.compile(
    "("
    + "|".join(f"{re.escape(prefix)}[^&<]+" for prefix in VENUE_PREFIXES)
    + r")\s*(?:&mdash;|—|-)\s*(\d+[a-zA-Z]?)"
)

ADDRESS_KEYS = ("ADDRESS1", "ADDRESS2", "CITY", "STATE", "ZIP", "COUNTRY")
ADDRESS_SENTINEL = "-"
CATEGORY_PLACEHOLDER = "Product Categories"
CATEGORY_MIN_LENGTH = 2


@dataclass(frozen=True, slots=True)
class BoothLocation:
    venue: str
    full: str


def extract_website(text: str) -> str | None:
    match = WEBSITE_RE.search(text)
    if not match:
        return None
    return match.group(1).replace("\\/", "/")


def assemble_address(values: dict) -> str | None:
    """Join the known address parts in fixed order, skipping blanks and ``-``."""

    parts: list[str] = []
    for key in ADDRESS_KEYS:
        value = values.get(key)
        if not isinstance(value, str) or not value or value == ADDRESS_SENTINEL:
            continue
        parts.append(value)
    return ", ".join(parts) if parts else None


def extract_address(text: str) -> str | None:
    match = ADDRESS_RE.search(text)
    if not match:
        return None
    try:
        payload = json.loads(match.group(1))
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None
    return assemble_address(payload)


def extract_booth(text: str) -> BoothLocation | None:
    """Locate the floor-plan label, falling back to hospitality suites."""

    match = BOOTH_RE.search(text)
    if match:
        venue = match.group(1).strip()
        return BoothLocation(venue=venue, full=f"{venue} - {match.group(2)}")
    match = HOSPITALITY_RE.search(text)
    if match:
        label = match.group(1).strip()
        return BoothLocation(venue=label, full=label)
    return None


def filter_categories(candidates: list[str]) -> list[str]:
    kept: list[str] = []
    for candidate in candidates:
        name = candidate.strip()
        if not name or name == CATEGORY_PLACEHOLDER or len(name) < CATEGORY_MIN_LENGTH:
            continue
        kept.append(name)
    return kept


def extract_categories(text: str) -> str | None:
    categories = filter_categories([m.group(1) for m in CATEGORY_RE.finditer(text)])
    return TOKEN_SEPARATOR.join(categories) if categories else None


def _booth_fields(text: str) -> dict[str, str]:
    location = extract_booth(text)
    if location is None:
        return {}
    return {"booth_venue": location.venue, "booth_full": location.full}


def _single(name: str, rule: Callable[[str], str | None]) -> Callable[[str], dict[str, str]]:
    def _apply(text: str) -> dict[str, str]:
        value = rule(text)
        return {name: value} if value else {}

    return _apply


RULES: tuple[Callable[[str], dict[str, str]], ...] = (
    _single("website", extract_website),
    _single("address", extract_address),
    _booth_fields,
    _single("product_categories", extract_categories),
)


def extract_fields(text: str) -> dict[str, str]:
    """Apply every rule to ``text`` and merge whatever was found."""

    found: dict[str, str] = {}
    if not isinstance(text, str) or not text:
        return found
    for rule in RULES:
        try:
            found.update(rule(text))
        except Exception:  # noqa: BLE001
            continue
    return found


def apply_fields(record: Exhibitor, updates: dict[str, str]) -> Exhibitor:
    """Fill empty enrichment fields on ``record``; populated fields are kept."""

    for name, value in updates.items():
        if value and not getattr(record, name):
            setattr(record, name, value)
    return record


__all__ = [
    "BoothLocation",
    "RULES",
    "VENUE_PREFIXES",
    "apply_fields",
    "assemble_address",
    "extract_address",
    "extract_booth",
    "extract_categories",
    "extract_fields",
    "extract_website",
    "filter_categories",
]
