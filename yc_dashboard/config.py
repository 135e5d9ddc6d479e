"""
yc_dashboard/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    """
    Read an optional string value from environment variables.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None


@dataclass(frozen=True)
class ExternalHTTPSettings:
    """
    Shared HTTP behavior settings for connectors.

    Requests are issued once; there is no retry or backoff policy.
    """

    timeout_seconds: float = 15.0
    user_agent: str | None = None


@dataclass(frozen=True)
class YCDirectorySettings:
    """
    Live yc-oss directory API settings.
    """

    base_url: str = "https://yc-oss.github.io/api"
    ai_tag_path: str = "tags/artificial-intelligence.json"
    all_companies_path: str = "companies/all.json"
    meta_path: str = "meta.json"
    region_marker: str = "India"


@dataclass(frozen=True)
class SnapshotSettings:
    """
    Location of the pre-generated static snapshot documents.

    ``base`` is either a local directory or an ``http(s)`` base URL.
    """

    base: str = "public"
    companies_file: str = "yc_ai_companies.json"
    stats_file: str = "yc_ai_stats.json"


@dataclass(frozen=True)
class DashboardSettings:
    """
    View-model tuning knobs for the dashboard pages.
    """

    page_size: int = 10
    year_floor: int = 2020
    region_year_floor: int = 2015
    top_countries: int = 10
    top_cities: int = 10
    top_industries: int = 8


@lru_cache(maxsize=1)
def get_external_http_settings() -> ExternalHTTPSettings:
    """
    Return shared connector HTTP settings from environment variables.
    """

    return ExternalHTTPSettings(
        timeout_seconds=max(1.0, _get_float_env("EXTERNAL_HTTP_TIMEOUT_SECONDS", 15.0)),
        user_agent=_get_optional_str_env("EXTERNAL_HTTP_USER_AGENT"),
    )


@lru_cache(maxsize=1)
def get_yc_directory_settings() -> YCDirectorySettings:
    """
    Return live directory API settings from environment variables.
    """

    return YCDirectorySettings(
        base_url=_get_str_env("YC_API_BASE_URL", "https://yc-oss.github.io/api"),
        ai_tag_path=_get_str_env("YC_API_AI_TAG_PATH", "tags/artificial-intelligence.json"),
        all_companies_path=_get_str_env("YC_API_ALL_COMPANIES_PATH", "companies/all.json"),
        meta_path=_get_str_env("YC_API_META_PATH", "meta.json"),
        region_marker=_get_str_env("YC_REGION_MARKER", "India"),
    )


@lru_cache(maxsize=1)
def get_snapshot_settings() -> SnapshotSettings:
    """
    Return static snapshot settings from environment variables.
    """

    return SnapshotSettings(
        base=_get_str_env("SNAPSHOT_BASE", "public"),
        companies_file=_get_str_env("SNAPSHOT_COMPANIES_FILE", "yc_ai_companies.json"),
        stats_file=_get_str_env("SNAPSHOT_STATS_FILE", "yc_ai_stats.json"),
    )


@lru_cache(maxsize=1)
def get_dashboard_settings() -> DashboardSettings:
    """
    Return dashboard view settings from environment variables.
    """

    return DashboardSettings(
        page_size=max(1, _get_int_env("DASHBOARD_PAGE_SIZE", 10)),
        year_floor=_get_int_env("DASHBOARD_YEAR_FLOOR", 2020),
        region_year_floor=_get_int_env("DASHBOARD_REGION_YEAR_FLOOR", 2015),
        top_countries=max(1, _get_int_env("DASHBOARD_TOP_COUNTRIES", 10)),
        top_cities=max(1, _get_int_env("DASHBOARD_TOP_CITIES", 10)),
        top_industries=max(1, _get_int_env("DASHBOARD_TOP_INDUSTRIES", 8)),
    )
