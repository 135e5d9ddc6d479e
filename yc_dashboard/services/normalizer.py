"""
yc_dashboard/services/normalizer.py

Deterministic mapping of raw directory records into normalized records.

Year policy
-----------
The year is the first run of exactly four ASCII digits in ``batch``
("Summer 2023" -> 2023). When no such run exists the current calendar
year is used. This fallback is a documented default, not an error.

Country policy
--------------
The country is the last comma-separated segment of ``all_locations``
(locations are listed most-specific-first), passed through
``COUNTRY_ALIASES``. Empty locations yield ``None``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date
from types import MappingProxyType
from typing import Final

from yc_dashboard.domain.company import NormalizedCompanyRecord
from yc_dashboard.schemas.company import RawCompanyRecord

COUNTRY_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "USA": "United States",
        "US": "United States",
        "UK": "United Kingdom",
        "UAE": "United Arab Emirates",
    }
)
"""Abbreviation to canonical country name. Unmapped values pass through."""

_YEAR_PATTERN = re.compile(r"(?<!\d)\d{4}(?!\d)", re.ASCII)


def extract_year(batch: str | None, *, today: date | None = None) -> int:
    """
    Return the four-digit year embedded in a batch label.

    Falls back to the current year (or ``today.year``) when the label
    carries no four-digit run.
    """

    match = _YEAR_PATTERN.search(batch or "")
    if match is not None:
        return int(match.group(0))
    return (today or date.today()).year


def _location_segments(location: str | None) -> list[str]:
    if not location or not location.strip():
        return []
    return [segment.strip() for segment in location.split(",")]


def extract_country(
    location: str | None,
    *,
    aliases: Mapping[str, str] = COUNTRY_ALIASES,
) -> str | None:
    """
    Return the canonical country for a comma-separated location string.
    """

    segments = _location_segments(location)
    if not segments or not segments[-1]:
        return None
    last = segments[-1]
    return aliases.get(last, last)


def extract_city(location: str | None) -> str | None:
    """
    Return the most specific (first) segment of a location string.
    """

    segments = _location_segments(location)
    if not segments or not segments[0]:
        return None
    return segments[0]


def normalize_company(
    raw: RawCompanyRecord,
    *,
    today: date | None = None,
    aliases: Mapping[str, str] = COUNTRY_ALIASES,
) -> NormalizedCompanyRecord:
    """
    Map one raw record into the normalized shape.
    """

    location = raw.all_locations if raw.all_locations.strip() else None
    return NormalizedCompanyRecord(
        name=raw.name,
        batch=raw.batch,
        year=extract_year(raw.batch, today=today),
        status=raw.status or None,
        location=location,
        country=extract_country(location, aliases=aliases),
    )


def normalize_companies(
    raws: Iterable[RawCompanyRecord],
    *,
    today: date | None = None,
    aliases: Mapping[str, str] = COUNTRY_ALIASES,
) -> list[NormalizedCompanyRecord]:
    """
    Normalize a sequence of raw records, preserving order.
    """

    today = today or date.today()
    return [normalize_company(raw, today=today, aliases=aliases) for raw in raws]
