"""
yc_dashboard/connectors/yc_directory_connector.py

Connector for the public yc-oss company directory API.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from yc_dashboard.config import ExternalHTTPSettings, YCDirectorySettings
from yc_dashboard.connectors.base import (
    BaseConnector,
    ConnectorFetchResult,
    ConnectorPayloadError,
)
from yc_dashboard.schemas.company import RawCompanyRecord
from yc_dashboard.services.aggregation_service import filter_region

logger = logging.getLogger(__name__)


class YCDirectoryConnector(BaseConnector):
    """
    Read-only access to the directory's static JSON endpoints.
    """

    def __init__(
        self,
        *,
        settings: YCDirectorySettings,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="yc_directory", http_settings=http_settings, session=session)
        self._settings = settings

    def fetch_ai_companies(self) -> ConnectorFetchResult[RawCompanyRecord]:
        """Fetch every company tagged artificial-intelligence."""
        return self._fetch_companies(self._settings.ai_tag_path)

    def fetch_all_companies(self) -> ConnectorFetchResult[RawCompanyRecord]:
        """Fetch the unfiltered company set."""
        return self._fetch_companies(self._settings.all_companies_path)

    def fetch_region_companies(self, marker: str | None = None) -> ConnectorFetchResult[RawCompanyRecord]:
        """
        Fetch all companies and keep those located in ``marker``.

        The endpoint has no server-side region filter, so the full set is
        downloaded and filtered locally.
        """

        marker = marker or self._settings.region_marker
        fetched = self.fetch_all_companies()
        selected = filter_region(fetched.records, marker)
        logger.info(
            "Region filter applied source=%s marker=%s matched=%s of=%s",
            self.source,
            marker,
            len(selected),
            len(fetched.records),
        )
        return ConnectorFetchResult(
            source=self.source,
            records=selected,
            failed_records=fetched.failed_records,
        )

    def fetch_metadata(self) -> dict[str, Any]:
        """Fetch the API's metadata document (last build time, counts)."""
        url = self.join_url(self._settings.base_url, self._settings.meta_path)
        payload = self._request_json(url=url)
        if not isinstance(payload, dict):
            raise ConnectorPayloadError(f"{self.source}: expected a JSON object for metadata.")
        return payload

    def _fetch_companies(self, path: str) -> ConnectorFetchResult[RawCompanyRecord]:
        url = self.join_url(self._settings.base_url, path)
        rows = self._request_json_list(url=url)

        records: list[RawCompanyRecord] = []
        failed_records = 0
        for index, row in enumerate(rows):
            try:
                records.append(RawCompanyRecord.model_validate(row))
            except ValidationError as exc:
                failed_records += 1
                logger.warning(
                    "Failed to validate company row source=%s index=%s errors=%s",
                    self.source,
                    index,
                    exc.error_count(),
                )

        return ConnectorFetchResult(
            source=self.source,
            records=records,
            failed_records=failed_records,
        )
