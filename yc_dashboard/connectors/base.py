"""
yc_dashboard/connectors/base.py

Base connector abstraction and shared HTTP mechanics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import requests

from yc_dashboard.config import ExternalHTTPSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConnectorError(RuntimeError):
    """
    Base class for failures at the fetch boundary.
    """


class ConnectorRequestError(ConnectorError):
    """
    Raised when a resource is unreachable or answers with a non-2xx status.
    """


class ConnectorPayloadError(ConnectorError):
    """
    Raised when a resource answers with malformed JSON or an unexpected shape.
    """


@dataclass(frozen=True)
class ConnectorFetchResult(Generic[T]):
    """
    Connector fetch outcome with validated records.
    """

    source: str
    records: list[T] = field(default_factory=list)
    failed_records: int = 0


class BaseConnector:
    """
    Shared single-shot JSON fetching over a ``requests.Session``.

    Each call issues exactly one request. Failures are raised as
    ``ConnectorRequestError`` or ``ConnectorPayloadError`` and are never
    retried here.
    """

    source: str

    def __init__(
        self,
        *,
        source: str,
        http_settings: ExternalHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        self.source = source
        self._session = session or requests.Session()
        self._timeout_seconds = http_settings.timeout_seconds
        self._headers = {"Accept": "application/json"}
        if http_settings.user_agent:
            self._headers["User-Agent"] = http_settings.user_agent

    def _request_json(self, *, url: str) -> Any:
        """
        Execute a GET request and return parsed JSON.
        """

        response = self._request(url=url)
        try:
            return response.json()
        except ValueError as exc:
            logger.error("Connector payload was not JSON source=%s url=%s", self.source, url)
            raise ConnectorPayloadError(f"{self.source}: response was not valid JSON.") from exc

    def _request_json_list(self, *, url: str) -> list[Any]:
        """
        Execute a GET request whose body must be a JSON array.
        """

        payload = self._request_json(url=url)
        if not isinstance(payload, list):
            logger.error(
                "Unexpected payload shape source=%s url=%s type=%s",
                self.source,
                url,
                type(payload).__name__,
            )
            raise ConnectorPayloadError(f"{self.source}: expected a JSON array.")
        return payload

    def _request(self, *, url: str) -> requests.Response:
        try:
            response = self._session.get(
                url,
                headers=self._headers,
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
            return response
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            logger.error(
                "Connector request failed source=%s status=%s url=%s error=%s",
                self.source,
                status_code,
                url,
                exc,
            )
            raise ConnectorRequestError(
                f"{self.source}: request failed with status {status_code}."
            ) from exc
        except requests.RequestException as exc:
            logger.error(
                "Connector transport failure source=%s url=%s error=%s",
                self.source,
                url,
                exc,
            )
            raise ConnectorRequestError(f"{self.source}: resource unreachable.") from exc

    @staticmethod
    def join_url(base_url: str, path: str) -> str:
        return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
