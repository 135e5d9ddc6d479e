"""
yc_dashboard/domain/company.py

Domain value types derived from directory records.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from yc_dashboard.schemas.company import RawCompanyRecord

FrequencyTable = dict[str, int]
"""Category label to occurrence count. Absent categories are absent keys."""


@dataclass(frozen=True)
class NormalizedCompanyRecord:
    """
    Company record after year and country derivation.

    Independent of the raw source schema: both the live API and the
    static snapshot produce this shape.
    """

    name: str
    batch: str
    year: int
    status: str | None
    location: str | None
    country: str | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DashboardStatistics:
    """
    Headline statistics for a set of normalized records.

    Recomputed whenever the input set changes; has no identity of its own.
    """

    total_companies: int
    by_year: FrequencyTable = field(default_factory=dict)
    by_country: FrequencyTable = field(default_factory=dict)
    by_status: FrequencyTable = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics snapshot document shape."""
        return {
            "total_companies": self.total_companies,
            "by_year": dict(self.by_year),
            "by_country": dict(self.by_country),
            "by_status": dict(self.by_status),
        }


@dataclass(frozen=True)
class RegionStatistics:
    """
    Statistics for the region-specific view.

    Flag counts are tracked separately from the frequency tables;
    ``top_companies`` keeps the raw records in input order.
    """

    total: int
    active: int
    acquired: int
    inactive: int
    hiring: int
    by_city: FrequencyTable = field(default_factory=dict)
    by_industry: FrequencyTable = field(default_factory=dict)
    by_year: FrequencyTable = field(default_factory=dict)
    top_companies: tuple[RawCompanyRecord, ...] = ()
