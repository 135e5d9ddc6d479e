"""
Generate the static dashboard snapshot from the live directory API.
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from pathlib import Path

from yc_dashboard.config import (
    get_external_http_settings,
    get_snapshot_settings,
    get_yc_directory_settings,
)
from yc_dashboard.connectors import ConnectorError, YCDirectoryConnector
from yc_dashboard.domain.company import DashboardStatistics, NormalizedCompanyRecord
from yc_dashboard.logging_utils import configure_logging
from yc_dashboard.services.aggregation_service import aggregate
from yc_dashboard.services.normalizer import normalize_companies

logger = logging.getLogger("scripts.generate_snapshot")


def write_snapshot(
    output_dir: Path,
    companies: Sequence[NormalizedCompanyRecord],
    stats: DashboardStatistics,
    *,
    companies_file: str,
    stats_file: str,
) -> tuple[Path, Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    companies_path = output_dir / companies_file
    stats_path = output_dir / stats_file
    with companies_path.open("w", encoding="utf-8") as outfile:
        json.dump([company.to_dict() for company in companies], outfile, indent=2)
    with stats_path.open("w", encoding="utf-8") as outfile:
        json.dump(stats.to_dict(), outfile, indent=2, sort_keys=True)
    return companies_path, stats_path


def main(argv: Sequence[str] | None = None, connector: YCDirectoryConnector | None = None) -> int:
    snapshot_settings = get_snapshot_settings()
    parser = argparse.ArgumentParser(description="Write the static dashboard snapshot documents.")
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=snapshot_settings.base,
        help="Directory receiving the snapshot files.",
    )
    parser.add_argument("--companies-file", default=snapshot_settings.companies_file)
    parser.add_argument("--stats-file", default=snapshot_settings.stats_file)
    args = parser.parse_args(argv)

    configure_logging()
    connector = connector or YCDirectoryConnector(
        settings=get_yc_directory_settings(),
        http_settings=get_external_http_settings(),
    )

    try:
        fetched = connector.fetch_ai_companies()
    except ConnectorError as exc:
        logger.error("Snapshot generation failed error=%s", exc)
        print(json.dumps({"status": "failed", "error": str(exc)}, indent=2))
        return 1

    companies = normalize_companies(fetched.records)
    stats = aggregate(companies)
    companies_path, stats_path = write_snapshot(
        Path(args.output_dir),
        companies,
        stats,
        companies_file=args.companies_file,
        stats_file=args.stats_file,
    )

    payload = {
        "status": "ok",
        "companies_written": len(companies),
        "failed_records": fetched.failed_records,
        "companies_path": str(companies_path),
        "stats_path": str(stats_path),
    }
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
