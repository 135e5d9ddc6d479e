from __future__ import annotations

import json
from pathlib import Path

from scripts.generate_snapshot import main
from tests.helpers import AI_URL, FakeSession, company_payload, make_response
from yc_dashboard.config import ExternalHTTPSettings, YCDirectorySettings
from yc_dashboard.connectors import YCDirectoryConnector


def _connector(routes: dict) -> YCDirectoryConnector:
    return YCDirectoryConnector(
        settings=YCDirectorySettings(),
        http_settings=ExternalHTTPSettings(),
        session=FakeSession(routes),  # type: ignore[arg-type]
    )


def test_writes_both_snapshot_documents(tmp_path: Path, capsys) -> None:
    rows = [
        company_payload(name="Acme AI", batch="Summer 2023", all_locations="London, UK"),
        company_payload(name="Beta", batch="Winter 2024", status="Acquired"),
    ]
    connector = _connector({AI_URL: make_response(AI_URL, rows)})

    exit_code = main(["--output-dir", str(tmp_path)], connector=connector)

    assert exit_code == 0
    companies = json.loads((tmp_path / "yc_ai_companies.json").read_text(encoding="utf-8"))
    stats = json.loads((tmp_path / "yc_ai_stats.json").read_text(encoding="utf-8"))
    assert companies[0] == {
        "name": "Acme AI",
        "batch": "Summer 2023",
        "year": 2023,
        "status": "Active",
        "location": "London, UK",
        "country": "United Kingdom",
    }
    assert stats == {
        "total_companies": 2,
        "by_year": {"2023": 1, "2024": 1},
        "by_country": {"United Kingdom": 1, "United States": 1},
        "by_status": {"Active": 1, "Acquired": 1},
    }
    summary = json.loads(capsys.readouterr().out)
    assert summary["status"] == "ok"
    assert summary["companies_written"] == 2


def test_fetch_failure_exits_non_zero(tmp_path: Path, capsys) -> None:
    connector = _connector({AI_URL: make_response(AI_URL, {}, status_code=500)})

    exit_code = main(["--output-dir", str(tmp_path / "out")], connector=connector)

    assert exit_code == 1
    assert not (tmp_path / "out").exists()
    assert json.loads(capsys.readouterr().out)["status"] == "failed"
