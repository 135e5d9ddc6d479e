"""
yc_dashboard/services/aggregation_service.py

Frequency-table aggregation over company records.

Both aggregations are a single pass over the input and have no side
effects. A record with a missing field is counted under
``UNKNOWN_LABEL`` rather than skipped, so for every dimension the bucket
counts add up to the number of input records.

Key order of the resulting tables is not part of the contract; callers
sort before display (see ``yc_dashboard.services.view_models``).
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Final

from yc_dashboard.domain.company import (
    DashboardStatistics,
    NormalizedCompanyRecord,
    RegionStatistics,
)
from yc_dashboard.schemas.company import RawCompanyRecord
from yc_dashboard.services.normalizer import extract_city, extract_year

logger = logging.getLogger(__name__)

UNKNOWN_LABEL: Final[str] = "Unknown"

STATUS_ACTIVE: Final[str] = "Active"
STATUS_ACQUIRED: Final[str] = "Acquired"
STATUS_INACTIVE: Final[str] = "Inactive"


def _label(value: str | None) -> str:
    return value if value else UNKNOWN_LABEL


def aggregate(records: Sequence[NormalizedCompanyRecord]) -> DashboardStatistics:
    """
    Count normalized records by year, country and status.
    """

    by_year: Counter[str] = Counter()
    by_country: Counter[str] = Counter()
    by_status: Counter[str] = Counter()

    for record in records:
        by_year[str(record.year)] += 1
        by_country[_label(record.country)] += 1
        by_status[_label(record.status)] += 1

    return DashboardStatistics(
        total_companies=len(records),
        by_year=dict(by_year),
        by_country=dict(by_country),
        by_status=dict(by_status),
    )


def aggregate_region(
    records: Sequence[RawCompanyRecord],
    *,
    today: date | None = None,
) -> RegionStatistics:
    """
    Count raw records for the region view.

    Groups by city (first location segment), industry and batch year, and
    tracks hiring / status flag counts plus the top-company subset.
    """

    today = today or date.today()
    by_city: Counter[str] = Counter()
    by_industry: Counter[str] = Counter()
    by_year: Counter[str] = Counter()
    status_counts: Counter[str] = Counter()
    hiring = 0
    top_companies: list[RawCompanyRecord] = []

    for record in records:
        by_city[_label(extract_city(record.all_locations))] += 1
        by_industry[_label(record.industry)] += 1
        by_year[str(extract_year(record.batch, today=today))] += 1
        status_counts[record.status] += 1
        if record.is_hiring:
            hiring += 1
        if record.top_company:
            top_companies.append(record)

    logger.debug(
        "Aggregated region records total=%s cities=%s industries=%s",
        len(records),
        len(by_city),
        len(by_industry),
    )

    return RegionStatistics(
        total=len(records),
        active=status_counts[STATUS_ACTIVE],
        acquired=status_counts[STATUS_ACQUIRED],
        inactive=status_counts[STATUS_INACTIVE],
        hiring=hiring,
        by_city=dict(by_city),
        by_industry=dict(by_industry),
        by_year=dict(by_year),
        top_companies=tuple(top_companies),
    )


def filter_region(records: Iterable[RawCompanyRecord], marker: str) -> list[RawCompanyRecord]:
    """
    Select records located in a region.

    A record matches when ``marker`` is a substring of ``all_locations``
    or an exact element of ``regions``.
    """

    return [
        record
        for record in records
        if marker in record.all_locations or marker in record.regions
    ]
