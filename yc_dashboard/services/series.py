"""
yc_dashboard/services/series.py

Ordering helpers that turn frequency tables into chart-ready series.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesPoint:
    """One labelled count in a chart series."""

    label: str
    value: int


def ranked_series(table: Mapping[str, int], limit: int | None = None) -> list[SeriesPoint]:
    """
    Sort a table by count (descending), ties broken by label.
    """

    ordered = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ordered = ordered[: max(0, limit)]
    return [SeriesPoint(label=label, value=count) for label, count in ordered]


def chronological_series(
    table: Mapping[str, int],
    since: int | None = None,
) -> list[SeriesPoint]:
    """
    Sort a year-keyed table by year, optionally keeping ``year >= since``.

    Keys that are not integers are dropped.
    """

    points: list[tuple[int, int]] = []
    for label, count in table.items():
        try:
            year = int(label)
        except ValueError:
            continue
        if since is not None and year < since:
            continue
        points.append((year, count))
    points.sort()
    return [SeriesPoint(label=str(year), value=count) for year, count in points]


def share(part: int, total: int) -> float:
    """
    Percentage of ``part`` in ``total``, one decimal; 0.0 for an empty total.
    """

    if total <= 0:
        return 0.0
    return round(part / total * 100, 1)
