"""
yc_dashboard/services/dashboard_service.py

Orchestration of fetch, normalization, aggregation and view assembly for
each dashboard page.

Fetch failures (unreachable resource, non-2xx status, malformed JSON) are
caught here, logged, and returned as ``Failed``. No retry is attempted and
no partial result is returned. Any other exception propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from functools import lru_cache
from typing import Any

from yc_dashboard.config import (
    DashboardSettings,
    get_dashboard_settings,
    get_external_http_settings,
    get_snapshot_settings,
    get_yc_directory_settings,
)
from yc_dashboard.connectors import ConnectorError, SnapshotConnector, YCDirectoryConnector
from yc_dashboard.domain.company import (
    DashboardStatistics,
    NormalizedCompanyRecord,
    RegionStatistics,
)
from yc_dashboard.domain.load_state import Failed, LoadState, Ready
from yc_dashboard.logging_utils import log_event
from yc_dashboard.schemas.company import RawCompanyRecord
from yc_dashboard.services.aggregation_service import aggregate, aggregate_region
from yc_dashboard.services.normalizer import normalize_companies
from yc_dashboard.services.view_models import (
    OverviewView,
    RegionView,
    TablePage,
    build_overview,
    build_region_view,
    build_table_page,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverviewData:
    companies: list[NormalizedCompanyRecord]
    stats: DashboardStatistics
    view: OverviewView


@dataclass(frozen=True)
class RegionData:
    marker: str
    companies: list[RawCompanyRecord]
    stats: RegionStatistics
    view: RegionView
    loaded_at: datetime


class DashboardService:
    """
    Builds the data behind each dashboard page.

    Every ``load_*`` method returns ``Ready`` or ``Failed``; callers own the
    ``Loading`` state (see ``ViewSlot``).
    """

    def __init__(
        self,
        *,
        directory: YCDirectoryConnector,
        snapshot: SnapshotConnector,
        settings: DashboardSettings,
        region_marker: str = "India",
    ) -> None:
        self._directory = directory
        self._snapshot = snapshot
        self._settings = settings
        self._region_marker = region_marker

    def load_overview(self) -> LoadState:
        """
        Overview page from the static snapshot. Both documents must load.
        """

        def _load() -> OverviewData:
            companies = self._snapshot.load_companies()
            stats = self._snapshot.load_statistics()
            return OverviewData(
                companies=companies,
                stats=stats,
                view=build_overview(stats, self._settings),
            )

        return self._guarded("overview", _load)

    def load_live_overview(self) -> LoadState:
        """
        Overview page computed from the live AI-tagged company set.
        """

        def _load() -> OverviewData:
            companies = self._fetch_ai_companies()
            stats = aggregate(companies)
            return OverviewData(
                companies=companies,
                stats=stats,
                view=build_overview(stats, self._settings),
            )

        return self._guarded("live_overview", _load)

    def load_directory(self) -> LoadState:
        """
        Normalized live AI companies for the searchable table.
        """

        return self._guarded("directory", self._fetch_ai_companies)

    def load_region(self, marker: str | None = None) -> LoadState:
        """
        Region page from the full company set filtered by ``marker``.
        """

        marker = marker or self._region_marker

        def _load() -> RegionData:
            fetched = self._directory.fetch_region_companies(marker)
            stats = aggregate_region(fetched.records)
            return RegionData(
                marker=marker,
                companies=fetched.records,
                stats=stats,
                view=build_region_view(stats, self._settings),
                loaded_at=datetime.now(timezone.utc),
            )

        return self._guarded("region", _load)

    def table_page(
        self,
        records: Sequence[NormalizedCompanyRecord],
        *,
        query: str = "",
        page_number: int = 1,
    ) -> TablePage:
        """
        One page of the company table using the configured page size.
        """

        return build_table_page(
            records,
            query=query,
            page_number=page_number,
            page_size=self._settings.page_size,
        )

    def _fetch_ai_companies(self) -> list[NormalizedCompanyRecord]:
        fetched = self._directory.fetch_ai_companies()
        if fetched.failed_records:
            logger.warning(
                "Skipped invalid company rows source=%s failed=%s",
                fetched.source,
                fetched.failed_records,
            )
        return normalize_companies(fetched.records, today=date.today())

    def _guarded(self, view: str, loader: Callable[[], Any]) -> LoadState:
        try:
            data = loader()
        except ConnectorError as exc:
            log_event(
                logger,
                logging.ERROR,
                "dashboard_load_failed",
                view=view,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return Failed(reason=str(exc))
        log_event(logger, logging.INFO, "dashboard_load_ready", view=view)
        return Ready(data)


@lru_cache(maxsize=1)
def get_dashboard_service() -> DashboardService:
    """
    Build and cache the dashboard service from environment settings.
    """

    http_settings = get_external_http_settings()
    directory_settings = get_yc_directory_settings()
    return DashboardService(
        directory=YCDirectoryConnector(settings=directory_settings, http_settings=http_settings),
        snapshot=SnapshotConnector(settings=get_snapshot_settings(), http_settings=http_settings),
        settings=get_dashboard_settings(),
        region_marker=directory_settings.region_marker,
    )
