"""
yc_dashboard/services/insights.py

Rule-based narrative insights derived from dashboard statistics.

Every rule reads only the statistics object it is given. Missing
categories count as zero, so an empty data set still yields well-formed
(if unremarkable) insights.
"""

from __future__ import annotations

from dataclasses import dataclass

from yc_dashboard.domain.company import DashboardStatistics, RegionStatistics
from yc_dashboard.services.aggregation_service import STATUS_ACQUIRED, STATUS_ACTIVE
from yc_dashboard.services.series import chronological_series, ranked_series, share


@dataclass(frozen=True)
class TextInsight:
    """
    One insight card: a category badge, a headline and a sentence.
    """

    category: str
    title: str
    description: str


def overview_insights(stats: DashboardStatistics, *, year_floor: int) -> list[TextInsight]:
    """Insights for the overview page."""
    total = stats.total_companies
    insights: list[TextInsight] = []

    countries = ranked_series(stats.by_country, limit=1)
    if countries:
        leader = countries[0]
        insights.append(
            TextInsight(
                category="Geography",
                title=f"{leader.label} Leads",
                description=(
                    f"{leader.label} accounts for {leader.value} companies "
                    f"({share(leader.value, total)}% of total)."
                ),
            )
        )

    recent = chronological_series(stats.by_year, since=year_floor)
    if recent:
        peak = max(recent, key=lambda point: (point.value, point.label))
        insights.append(
            TextInsight(
                category="Growth",
                title=f"Peak Year {peak.label}",
                description=(
                    f"{peak.label} saw the highest number of new companies ({peak.value}) "
                    f"since {year_floor}."
                ),
            )
        )

    active = stats.by_status.get(STATUS_ACTIVE, 0)
    acquired = stats.by_status.get(STATUS_ACQUIRED, 0)
    insights.append(
        TextInsight(
            category="Outcomes",
            title="Survival Rate",
            description=(
                f"{share(active, total)}% of companies remain active, "
                f"while {acquired} have been acquired."
            ),
        )
    )
    return insights


def region_insights(stats: RegionStatistics) -> list[TextInsight]:
    """Insights for the region page."""
    total = stats.total
    insights: list[TextInsight] = []

    cities = ranked_series(stats.by_city, limit=1)
    if cities:
        hub = cities[0]
        insights.append(
            TextInsight(
                category="Geography",
                title=f"{hub.label} Dominance",
                description=(
                    f"{hub.label} hosts {hub.value} companies "
                    f"({share(hub.value, total)}% of total)."
                ),
            )
        )

    industries = ranked_series(stats.by_industry, limit=2)
    if industries:
        listed = " and ".join(f"{point.label} ({point.value})" for point in industries)
        insights.append(
            TextInsight(
                category="Industries",
                title="Leading Sectors",
                description=f"{listed} lead the regional ecosystem.",
            )
        )

    insights.append(
        TextInsight(
            category="Outcomes",
            title="Success Rate",
            description=(
                f"{share(stats.active, total)}% of companies remain active, "
                f"with {stats.acquired} acquisitions."
            ),
        )
    )
    insights.append(
        TextInsight(
            category="Hiring",
            title="Hiring Momentum",
            description=(
                f"{stats.hiring} companies ({share(stats.hiring, total)}%) are actively hiring."
            ),
        )
    )
    return insights
