from __future__ import annotations

from typing import Any

import pytest

from tests.helpers import BASE_URL, FakeSession
from yc_dashboard.config import ExternalHTTPSettings, YCDirectorySettings
from yc_dashboard.connectors import YCDirectoryConnector


@pytest.fixture()
def http_settings() -> ExternalHTTPSettings:
    return ExternalHTTPSettings(timeout_seconds=5.0, user_agent="yc-dashboard-tests")


@pytest.fixture()
def directory_settings() -> YCDirectorySettings:
    return YCDirectorySettings(base_url=BASE_URL)


@pytest.fixture()
def make_directory(http_settings: ExternalHTTPSettings, directory_settings: YCDirectorySettings):
    def _build(routes: dict[str, Any]) -> tuple[YCDirectoryConnector, FakeSession]:
        session = FakeSession(routes)
        connector = YCDirectoryConnector(
            settings=directory_settings,
            http_settings=http_settings,
            session=session,  # type: ignore[arg-type]
        )
        return connector, session

    return _build
