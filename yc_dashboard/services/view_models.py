"""
yc_dashboard/services/view_models.py

Render-ready view models for the dashboard pages.

This module decides *what* each page shows (which cards, which series in
which order, which table rows). It never decides *how* they are drawn.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from yc_dashboard.config import DashboardSettings
from yc_dashboard.domain.company import (
    DashboardStatistics,
    NormalizedCompanyRecord,
    RegionStatistics,
)
from yc_dashboard.schemas.company import RawCompanyRecord
from yc_dashboard.services.aggregation_service import (
    STATUS_ACQUIRED,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from yc_dashboard.services.insights import TextInsight, overview_insights, region_insights
from yc_dashboard.services.search_service import (
    PageWindow,
    clamp_page,
    filter_companies,
    page_window,
    paginate,
    total_pages,
)
from yc_dashboard.services.series import SeriesPoint, chronological_series, ranked_series, share


@dataclass(frozen=True)
class StatCard:
    """A headline number with a short caption."""

    title: str
    value: int
    caption: str


@dataclass(frozen=True)
class NotableCompany:
    """A top company as listed on the region page, with its outbound link."""

    name: str
    batch: str
    one_liner: str
    link: str

    @classmethod
    def from_record(cls, record: RawCompanyRecord) -> NotableCompany:
        return cls(name=record.name, batch=record.batch, one_liner=record.one_liner, link=record.link)


@dataclass(frozen=True)
class OverviewView:
    cards: tuple[StatCard, ...]
    countries: tuple[SeriesPoint, ...]
    years: tuple[SeriesPoint, ...]
    statuses: tuple[SeriesPoint, ...]
    insights: tuple[TextInsight, ...]


@dataclass(frozen=True)
class RegionView:
    cards: tuple[StatCard, ...]
    years: tuple[SeriesPoint, ...]
    statuses: tuple[SeriesPoint, ...]
    cities: tuple[SeriesPoint, ...]
    industries: tuple[SeriesPoint, ...]
    notable: tuple[NotableCompany, ...]
    insights: tuple[TextInsight, ...]


@dataclass(frozen=True)
class TablePage:
    """
    One visible page of the searchable company table.

    ``window.page_number`` is the page actually shown, which may differ
    from the requested one after clamping.
    """

    rows: tuple[NormalizedCompanyRecord, ...]
    query: str
    window: PageWindow


def _latest_year_card(by_year: dict[str, int]) -> StatCard:
    years = chronological_series(by_year)
    if not years:
        return StatCard(title="Latest Batch Year", value=0, caption="No batches yet")
    latest = years[-1]
    return StatCard(
        title=f"{latest.label} Batch",
        value=latest.value,
        caption=f"Companies from {latest.label}",
    )


def build_overview(stats: DashboardStatistics, settings: DashboardSettings) -> OverviewView:
    """
    Assemble the overview page from headline statistics.
    """

    total = stats.total_companies
    active = stats.by_status.get(STATUS_ACTIVE, 0)
    acquired = stats.by_status.get(STATUS_ACQUIRED, 0)
    cards = (
        StatCard(title="Total Companies", value=total, caption="Across all batches"),
        StatCard(title="Active Companies", value=active, caption=f"{share(active, total)}% of total"),
        StatCard(title="Acquired", value=acquired, caption=f"{share(acquired, total)}% of total"),
        _latest_year_card(stats.by_year),
    )
    return OverviewView(
        cards=cards,
        countries=tuple(ranked_series(stats.by_country, limit=settings.top_countries)),
        years=tuple(chronological_series(stats.by_year, since=settings.year_floor)),
        statuses=tuple(ranked_series(stats.by_status)),
        insights=tuple(overview_insights(stats, year_floor=settings.year_floor)),
    )


def build_region_view(stats: RegionStatistics, settings: DashboardSettings) -> RegionView:
    """
    Assemble the region page from region statistics.
    """

    total = stats.total
    cards = (
        StatCard(title="Total Companies", value=total, caption="Across all batches"),
        StatCard(
            title="Active Companies",
            value=stats.active,
            caption=f"{share(stats.active, total)}% of total",
        ),
        StatCard(
            title="Acquired",
            value=stats.acquired,
            caption=f"{share(stats.acquired, total)}% exit rate",
        ),
        StatCard(title="Currently Hiring", value=stats.hiring, caption="Open positions"),
    )
    statuses = (
        SeriesPoint(label=STATUS_ACTIVE, value=stats.active),
        SeriesPoint(label=STATUS_ACQUIRED, value=stats.acquired),
        SeriesPoint(label=STATUS_INACTIVE, value=stats.inactive),
    )
    return RegionView(
        cards=cards,
        years=tuple(chronological_series(stats.by_year, since=settings.region_year_floor)),
        statuses=statuses,
        cities=tuple(ranked_series(stats.by_city, limit=settings.top_cities)),
        industries=tuple(ranked_series(stats.by_industry, limit=settings.top_industries)),
        notable=tuple(NotableCompany.from_record(record) for record in stats.top_companies),
        insights=tuple(region_insights(stats)),
    )


def build_table_page(
    records: Sequence[NormalizedCompanyRecord],
    *,
    query: str,
    page_number: int,
    page_size: int,
) -> TablePage:
    """
    Filter, then clamp the requested page against the filtered length, then slice.
    """

    filtered = filter_companies(records, query)
    page_count = total_pages(len(filtered), page_size)
    shown_page = clamp_page(page_number, page_count)
    return TablePage(
        rows=tuple(paginate(filtered, page_size, shown_page)),
        query=query,
        window=page_window(len(filtered), page_size, shown_page),
    )
