"""
Shared test doubles and payload builders.
"""

from __future__ import annotations

import json
from typing import Any

import requests

from yc_dashboard.schemas.company import RawCompanyRecord

BASE_URL = "https://yc-oss.github.io/api"
AI_URL = f"{BASE_URL}/tags/artificial-intelligence.json"
ALL_URL = f"{BASE_URL}/companies/all.json"
META_URL = f"{BASE_URL}/meta.json"


def make_response(url: str, payload: Any = None, *, status_code: int = 200, body: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    return response


class FakeSession:
    """
    Stand-in for ``requests.Session`` serving canned responses by URL.

    A route value may be a ``requests.Response`` or an exception instance
    to raise. Unknown URLs answer 404.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = routes or {}
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        route = self.routes.get(url)
        if route is None:
            return make_response(url, body=b"not found", status_code=404)
        if isinstance(route, BaseException):
            raise route
        return route


def company_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 1,
        "name": "Acme AI",
        "slug": "acme-ai",
        "batch": "Summer 2023",
        "status": "Active",
        "all_locations": "San Francisco, CA, USA",
        "industry": "B2B",
        "one_liner": "Agents for procurement.",
        "isHiring": False,
        "top_company": False,
        "team_size": 12,
        "website": "https://acme.example",
        "url": "https://www.ycombinator.com/companies/acme-ai",
        "regions": ["United States of America", "America / Canada"],
    }
    payload.update(overrides)
    return payload


def raw_company(**overrides: Any) -> RawCompanyRecord:
    return RawCompanyRecord.model_validate(company_payload(**overrides))
