from __future__ import annotations

import pytest
import requests

from tests.helpers import AI_URL, ALL_URL, META_URL, company_payload, make_response
from yc_dashboard.connectors import ConnectorPayloadError, ConnectorRequestError


def test_fetch_ai_companies_validates_rows(make_directory) -> None:
    rows = [
        company_payload(name="Acme AI"),
        company_payload(name="Beta", isHiring=None, team_size="n/a", regions=None),
        "not-a-record",
        company_payload(name={"unexpected": "object"}),
    ]
    connector, session = make_directory({AI_URL: make_response(AI_URL, rows)})

    result = connector.fetch_ai_companies()

    assert result.source == "yc_directory"
    assert [record.name for record in result.records] == ["Acme AI", "Beta"]
    assert result.failed_records == 2
    beta = result.records[1]
    assert beta.is_hiring is False
    assert beta.team_size is None
    assert beta.regions == ()


def test_request_uses_timeout_and_json_headers(make_directory) -> None:
    connector, session = make_directory({AI_URL: make_response(AI_URL, [])})

    connector.fetch_ai_companies()

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == AI_URL
    assert call["timeout"] == 5.0
    assert call["headers"]["Accept"] == "application/json"
    assert call["headers"]["User-Agent"] == "yc-dashboard-tests"
    assert set(call) == {"url", "headers", "timeout"}


def test_non_2xx_status_raises_request_error_without_retry(make_directory) -> None:
    connector, session = make_directory({AI_URL: make_response(AI_URL, {}, status_code=503)})

    with pytest.raises(ConnectorRequestError):
        connector.fetch_ai_companies()
    assert len(session.calls) == 1


def test_transport_failure_raises_request_error(make_directory) -> None:
    connector, _ = make_directory({AI_URL: requests.ConnectionError("connection refused")})

    with pytest.raises(ConnectorRequestError):
        connector.fetch_ai_companies()


def test_malformed_json_raises_payload_error(make_directory) -> None:
    connector, _ = make_directory({AI_URL: make_response(AI_URL, body=b"<html>oops</html>")})

    with pytest.raises(ConnectorPayloadError):
        connector.fetch_ai_companies()


def test_non_array_payload_raises_payload_error(make_directory) -> None:
    connector, _ = make_directory({AI_URL: make_response(AI_URL, {"companies": []})})

    with pytest.raises(ConnectorPayloadError):
        connector.fetch_ai_companies()


def test_fetch_region_companies_filters_locally(make_directory) -> None:
    rows = [
        company_payload(name="Razorpay", all_locations="Bengaluru, Karnataka, India"),
        company_payload(name="Remote Co", all_locations="Remote", regions=["India"]),
        company_payload(name="Stripe", all_locations="San Francisco, CA, USA"),
    ]
    connector, session = make_directory({ALL_URL: make_response(ALL_URL, rows)})

    result = connector.fetch_region_companies()

    assert [record.name for record in result.records] == ["Razorpay", "Remote Co"]
    assert session.calls[0]["url"] == ALL_URL


def test_fetch_region_companies_with_explicit_marker(make_directory) -> None:
    rows = [
        company_payload(name="Razorpay", all_locations="Bengaluru, Karnataka, India"),
        company_payload(name="Mercado", all_locations="Buenos Aires, Argentina", regions=["Latin America"]),
    ]
    connector, _ = make_directory({ALL_URL: make_response(ALL_URL, rows)})

    result = connector.fetch_region_companies("Latin America")

    assert [record.name for record in result.records] == ["Mercado"]


def test_fetch_metadata(make_directory) -> None:
    meta = {"last_updated": "2026-10-01T00:00:00Z", "total": 5400}
    connector, _ = make_directory({META_URL: make_response(META_URL, meta)})

    assert connector.fetch_metadata() == meta


def test_fetch_metadata_rejects_non_object(make_directory) -> None:
    connector, _ = make_directory({META_URL: make_response(META_URL, [1, 2])})

    with pytest.raises(ConnectorPayloadError):
        connector.fetch_metadata()
