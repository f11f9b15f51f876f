"""Canonical exhibitor record and the rules for building it from search hits."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

DETAIL_URL_TEMPLATE = "https://exhibitors.ces.tech/8_0/exhibitor/exhibitor-details.cfm?exhid={exhid}"
CONTAMINATION = "randomstring"
TOKEN_SEPARATOR = "; "

# Column order shared by the JSON and CSV exporters.
COLUMNS = (
    "name",
    "exhid",
    "detail_url",
    "booth_venue",
    "booth_number",
    "booth_full",
    "description",
    "website",
    "address",
    "product_categories",
    "hall_ids",
    "seek_funding",
    "funding_amount",
    "revenue",
    "investment_stage",
    "scraped_at",
)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def detail_url_for(exhid: str) -> str:
    """Return the detail page URL for an exhibitor identity."""

    return DETAIL_URL_TEMPLATE.format(exhid=exhid)


@dataclass(slots=True)
class Exhibitor:
    """One exhibitor; every field is a plain string, empty when unknown."""

    name: str = ""
    exhid: str = ""
    booth_venue: str = ""
    booth_number: str = ""
    booth_full: str = ""
    description: str = ""
    website: str = ""
    address: str = ""
    product_categories: str = ""
    hall_ids: str = ""
    seek_funding: str = ""
    funding_amount: str = ""
    revenue: str = ""
    investment_stage: str = ""
    scraped_at: str = field(default_factory=_utc_now)

    @property
    def detail_url(self) -> str:
        return detail_url_for(self.exhid)

    def as_dict(self) -> dict[str, str]:
        return {column: getattr(self, column) for column in COLUMNS}

    @staticmethod
    def column_names() -> list[str]:
        return list(COLUMNS)


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if isinstance(value, str):
        return value
    # bool is an int subclass; a flag is not an identifier
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return ""


def normalize_tokens(values: Iterable[Any] | None) -> str:
    """Clean a raw token array and join the survivors with ``"; "``.

    The contamination marker is stripped first, then whitespace; empty tokens
    and non-string entries are dropped. Original order is preserved.
    """

    if not isinstance(values, (list, tuple)):
        return ""
    cleaned: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        token = value.replace(CONTAMINATION, "").strip()
        if token:
            cleaned.append(token)
    return TOKEN_SEPARATOR.join(cleaned)


def new_record(raw_fields: Mapping[str, Any] | None) -> Exhibitor:
    """Build an :class:`Exhibitor` from the ``fields`` mapping of a search hit."""

    raw: Mapping[str, Any] = raw_fields if isinstance(raw_fields, Mapping) else {}
    return Exhibitor(
        name=_text(raw, "exhname_t"),
        exhid=_text(raw, "exhid_l"),
        description=_text(raw, "exhdesc_t"),
        booth_number=normalize_tokens(raw.get("boothsdisplay_la")),
        hall_ids=normalize_tokens(raw.get("hallid_la")),
        seek_funding=_text(raw, "seekfunding_t"),
        funding_amount=_text(raw, "fundingamount_t").replace(";", ","),
        revenue=_text(raw, "revenue_t").replace(";", ","),
        investment_stage=_text(raw, "investmentstage_l"),
    )


__all__ = [
    "COLUMNS",
    "DETAIL_URL_TEMPLATE",
    "Exhibitor",
    "detail_url_for",
    "new_record",
    "normalize_tokens",
]
