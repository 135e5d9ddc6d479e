"""
yc_dashboard/connectors/snapshot_connector.py

Loader for the pre-generated static snapshot documents.

The snapshot is two JSON files: a list of normalized companies and the
statistics object computed from them. They are read from a local
directory or, when the configured base is an ``http(s)`` URL, fetched
relative to it.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from yc_dashboard.config import ExternalHTTPSettings, SnapshotSettings
from yc_dashboard.connectors.base import (
    BaseConnector,
    ConnectorPayloadError,
    ConnectorRequestError,
)
from yc_dashboard.domain.company import DashboardStatistics, NormalizedCompanyRecord
from yc_dashboard.schemas.snapshot import SnapshotCompany, SnapshotStatistics
from yc_dashboard.services.normalizer import extract_year

logger = logging.getLogger(__name__)


class SnapshotConnector(BaseConnector):
    """
    Reads the companies and statistics snapshot documents.
    """

    def __init__(
        self,
        *,
        settings: SnapshotSettings,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="snapshot", http_settings=http_settings, session=session)
        self._settings = settings

    @property
    def is_remote(self) -> bool:
        return self._settings.base.startswith(("http://", "https://"))

    def load_companies(self, *, today: date | None = None) -> list[NormalizedCompanyRecord]:
        """
        Load the companies document as normalized records.
        """

        payload = self._load_json(self._settings.companies_file)
        if not isinstance(payload, list):
            raise ConnectorPayloadError(f"{self.source}: companies document must be a JSON array.")

        try:
            entries = [SnapshotCompany.model_validate(item) for item in payload]
        except ValidationError as exc:
            logger.error(
                "Invalid companies snapshot file=%s errors=%s",
                self._settings.companies_file,
                exc.error_count(),
            )
            raise ConnectorPayloadError(f"{self.source}: companies document failed validation.") from exc

        return [
            NormalizedCompanyRecord(
                name=entry.name,
                batch=entry.batch,
                year=entry.year if entry.year is not None else extract_year(entry.batch, today=today),
                status=entry.status or None,
                location=entry.location or None,
                country=entry.country or None,
            )
            for entry in entries
        ]

    def load_statistics(self) -> DashboardStatistics:
        """
        Load the statistics document.
        """

        payload = self._load_json(self._settings.stats_file)
        try:
            parsed = SnapshotStatistics.model_validate(payload)
        except ValidationError as exc:
            logger.error(
                "Invalid statistics snapshot file=%s errors=%s",
                self._settings.stats_file,
                exc.error_count(),
            )
            raise ConnectorPayloadError(f"{self.source}: statistics document failed validation.") from exc

        return DashboardStatistics(
            total_companies=parsed.total_companies,
            by_year=dict(parsed.by_year),
            by_country=dict(parsed.by_country),
            by_status=dict(parsed.by_status),
        )

    def _load_json(self, filename: str) -> Any:
        if self.is_remote:
            return self._request_json(url=self.join_url(self._settings.base, filename))

        target = Path(self._settings.base).expanduser() / filename
        if not target.is_file():
            logger.error("Snapshot file not found source=%s path=%s", self.source, target)
            raise ConnectorRequestError(f"{self.source}: snapshot file not found: {target}")
        try:
            with target.open("r", encoding="utf-8") as infile:
                return json.load(infile)
        except json.JSONDecodeError as exc:
            logger.error("Snapshot file is not valid JSON source=%s path=%s", self.source, target)
            raise ConnectorPayloadError(f"{self.source}: snapshot file is not valid JSON: {target}") from exc
        except OSError as exc:
            raise ConnectorRequestError(f"{self.source}: snapshot file unreadable: {target}") from exc
