from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from tests.helpers import FakeSession, make_response
from yc_dashboard.config import ExternalHTTPSettings, SnapshotSettings
from yc_dashboard.connectors import ConnectorPayloadError, ConnectorRequestError, SnapshotConnector
from yc_dashboard.domain.company import DashboardStatistics, NormalizedCompanyRecord

COMPANIES = [
    {
        "name": "Acme AI",
        "batch": "Summer 2023",
        "year": 2023,
        "status": "Active",
        "location": "San Francisco, CA, USA",
        "country": "United States",
    },
    {
        "name": "Legacy",
        "batch": "W21",
        "status": None,
        "location": None,
        "country": None,
    },
]

STATS = {
    "total_companies": 2,
    "by_year": {"2023": 1, "2031": 1},
    "by_country": {"United States": 1, "Unknown": 1},
    "by_status": {"Active": 1, "Unknown": 1},
}


def _write(directory: Path, name: str, content: str) -> None:
    (directory / name).write_text(content, encoding="utf-8")


def _connector(base: str, session: FakeSession | None = None) -> SnapshotConnector:
    return SnapshotConnector(
        settings=SnapshotSettings(base=base),
        http_settings=ExternalHTTPSettings(),
        session=session,  # type: ignore[arg-type]
    )


@pytest.fixture()
def snapshot_dir(tmp_path: Path) -> Path:
    _write(tmp_path, "yc_ai_companies.json", json.dumps(COMPANIES))
    _write(tmp_path, "yc_ai_stats.json", json.dumps(STATS))
    return tmp_path


def test_load_companies_from_directory(snapshot_dir: Path) -> None:
    companies = _connector(str(snapshot_dir)).load_companies(today=date(2031, 1, 1))

    assert companies[0] == NormalizedCompanyRecord(
        name="Acme AI",
        batch="Summer 2023",
        year=2023,
        status="Active",
        location="San Francisco, CA, USA",
        country="United States",
    )
    assert companies[1].year == 2031
    assert companies[1].status is None


def test_out_of_range_year_falls_back_to_batch(tmp_path: Path) -> None:
    rows = [
        {"name": "Short", "batch": "Winter 2019", "year": 23},
        {"name": "Negative", "batch": "no batch", "year": -5},
        {"name": "Huge", "batch": "Summer 2022", "year": 20221},
    ]
    _write(tmp_path, "yc_ai_companies.json", json.dumps(rows))

    companies = _connector(str(tmp_path)).load_companies(today=date(2031, 1, 1))

    assert [company.year for company in companies] == [2019, 2031, 2022]


def test_load_statistics_from_directory(snapshot_dir: Path) -> None:
    stats = _connector(str(snapshot_dir)).load_statistics()

    assert stats == DashboardStatistics(
        total_companies=2,
        by_year={"2023": 1, "2031": 1},
        by_country={"United States": 1, "Unknown": 1},
        by_status={"Active": 1, "Unknown": 1},
    )


def test_missing_file_is_a_request_error(tmp_path: Path) -> None:
    with pytest.raises(ConnectorRequestError):
        _connector(str(tmp_path)).load_statistics()


def test_invalid_json_is_a_payload_error(snapshot_dir: Path) -> None:
    _write(snapshot_dir, "yc_ai_stats.json", "{not json")

    with pytest.raises(ConnectorPayloadError):
        _connector(str(snapshot_dir)).load_statistics()


def test_wrong_shape_is_a_payload_error(snapshot_dir: Path) -> None:
    _write(snapshot_dir, "yc_ai_companies.json", json.dumps({"companies": COMPANIES}))
    _write(snapshot_dir, "yc_ai_stats.json", json.dumps({"by_year": {}}))

    connector = _connector(str(snapshot_dir))
    with pytest.raises(ConnectorPayloadError):
        connector.load_companies()
    with pytest.raises(ConnectorPayloadError):
        connector.load_statistics()


def test_remote_base_fetches_relative_to_url() -> None:
    base = "https://example.org/dashboard/"
    session = FakeSession(
        {
            "https://example.org/dashboard/yc_ai_stats.json": make_response(
                "https://example.org/dashboard/yc_ai_stats.json", STATS
            ),
        }
    )
    connector = _connector(base, session)

    assert connector.is_remote
    assert connector.load_statistics().total_companies == 2
    with pytest.raises(ConnectorRequestError):
        connector.load_companies()
