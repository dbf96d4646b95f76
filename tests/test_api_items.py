"""Regression tests for ledger item CRUD API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.api.application import create_api_application
from app.config import AppSettings
from app.ledger import LedgerItemService

from conftest import HealthyDatabaseService


def _build_client(settings: AppSettings, item_service: LedgerItemService) -> TestClient:
    """Create a test client over the API factory.

    Args:
        settings: Test settings.
        item_service: Ledger item service with in-memory storage.

    Returns:
        TestClient: HTTP client bound to the application.
    """

    return TestClient(create_api_application(settings, HealthyDatabaseService(), item_service))


def _item_body(**overrides) -> dict[str, object]:
    """Build a valid item request body with optional overrides."""

    body: dict[str, object] = {
        "type": "income",
        "amount": 1000.5,
        "category": "Salary",
        "date": "2024-01-05T10:00:00Z",
    }
    body.update(overrides)
    return body


def test_api_item_create_returns_created_item(app_settings: AppSettings, item_service: LedgerItemService) -> None:
    """Return HTTP 201 with the stored item payload.

    Args:
        app_settings: Test settings.
        item_service: Service under test.

    Returns:
        None: Assertions validate response payload.

    Raises:
        AssertionError: Raised when create response differs.
    """

    client = _build_client(app_settings, item_service)

    response = client.post("/api/items", json=_item_body(date="2024-01-05T12:00:00+02:00"))

    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "type": "income",
        "amount": 1000.5,
        "category": "Salary",
        "date": "2024-01-05T10:00:00+00:00",
        "created_at": "2026-01-01T12:00:00+00:00",
        "updated_at": "2026-01-01T12:00:00+00:00",
    }


def test_api_item_create_rejects_domain_invariant_violations(
    app_settings: AppSettings,
    item_service: LedgerItemService,
) -> None:
    """Return HTTP 400 `INVALID_ITEM` for amounts outside storage limits and other broken invariants.

    Args:
        app_settings: Test settings.
        item_service: Service under test.

    Returns:
        None: Assertions validate error envelopes.

    Raises:
        AssertionError: Raised when invalid items are accepted.
    """

    client = _build_client(app_settings, item_service)

    for body, message in (
        (_item_body(amount=-1), "amount cannot be negative"),
        (_item_body(amount="10.005"), "amount must have at most 2 decimal places"),
        (_item_body(amount="1e20"), "amount must have at most 16 integer digits"),
        (_item_body(type="transfer"), "type must be 'income' or 'expense'"),
        (_item_body(category="  "), "category is required"),
        (_item_body(date="2024-01-05T10:00:00"), "date must include a timezone offset"),
    ):
        response = client.post("/api/items", json=body)

        assert response.status_code == 400
        assert response.json() == {"status": "error", "code": "INVALID_ITEM", "message": message}


def test_api_item_create_rejects_malformed_body(app_settings: AppSettings, item_service: LedgerItemService) -> None:
    """Return HTTP 400 `INVALID_REQUEST_BODY` instead of 422 for shape errors."""

    client = _build_client(app_settings, item_service)

    missing_field_response = client.post("/api/items", json={"type": "income", "amount": 10})
    broken_json_response = client.post(
        "/api/items",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert missing_field_response.status_code == 400
    assert missing_field_response.json()["code"] == "INVALID_REQUEST_BODY"
    assert broken_json_response.status_code == 400
    assert broken_json_response.json()["code"] == "INVALID_REQUEST_BODY"


def test_api_item_detail_returns_item_or_not_found(app_settings: AppSettings, item_service: LedgerItemService) -> None:
    """Return stored item, HTTP 404 for unknown ids and HTTP 400 for non-integer ids.

    Args:
        app_settings: Test settings.
        item_service: Service under test.

    Returns:
        None: Assertions validate detail responses.

    Raises:
        AssertionError: Raised when detail responses differ.
    """

    client = _build_client(app_settings, item_service)
    created_id = client.post("/api/items", json=_item_body()).json()["id"]

    found_response = client.get(f"/api/items/{created_id}")
    missing_response = client.get("/api/items/999")
    invalid_response = client.get("/api/items/abc")

    assert found_response.status_code == 200
    assert found_response.json()["category"] == "Salary"
    assert missing_response.status_code == 404
    assert missing_response.json()["code"] == "ITEM_NOT_FOUND"
    assert invalid_response.status_code == 400
    assert invalid_response.json()["code"] == "INVALID_ID"


def test_api_item_update_replaces_fields(app_settings: AppSettings, item_service: LedgerItemService) -> None:
    """Return HTTP 200 with replaced fields and keep the id."""

    client = _build_client(app_settings, item_service)
    created_id = client.post("/api/items", json=_item_body()).json()["id"]

    response = client.put(
        f"/api/items/{created_id}",
        json=_item_body(type="expense", amount=42, category="Rent", date="2024-02-01T00:00:00Z"),
    )

    assert response.status_code == 200
    assert response.json()["id"] == created_id
    assert response.json()["type"] == "expense"
    assert response.json()["amount"] == 42
    assert response.json()["category"] == "Rent"
    assert response.json()["date"] == "2024-02-01T00:00:00+00:00"


def test_api_item_update_reports_validation_and_missing_items(
    app_settings: AppSettings,
    item_service: LedgerItemService,
) -> None:
    """Return HTTP 400 for invalid updates and HTTP 404 for unknown ids."""

    client = _build_client(app_settings, item_service)
    created_id = client.post("/api/items", json=_item_body()).json()["id"]

    invalid_response = client.put(f"/api/items/{created_id}", json=_item_body(amount=-3))
    missing_response = client.put("/api/items/999", json=_item_body())

    assert invalid_response.status_code == 400
    assert invalid_response.json()["code"] == "INVALID_ITEM"
    assert missing_response.status_code == 404
    assert missing_response.json()["code"] == "ITEM_NOT_FOUND"


def test_api_item_delete_returns_no_content_then_not_found(
    app_settings: AppSettings,
    item_service: LedgerItemService,
) -> None:
    """Return HTTP 204 on first delete and HTTP 404 on repeat delete.

    Args:
        app_settings: Test settings.
        item_service: Service under test.

    Returns:
        None: Assertions validate delete responses.

    Raises:
        AssertionError: Raised when delete responses differ.
    """

    client = _build_client(app_settings, item_service)
    created_id = client.post("/api/items", json=_item_body()).json()["id"]

    first_response = client.delete(f"/api/items/{created_id}")
    second_response = client.delete(f"/api/items/{created_id}")

    assert first_response.status_code == 204
    assert first_response.content == b""
    assert second_response.status_code == 404
    assert client.get(f"/api/items/{created_id}").status_code == 404


def test_api_item_list_filters_paginates_and_caps_limit(
    app_settings: AppSettings,
    item_service: LedgerItemService,
) -> None:
    """Filter by inclusive range, order newest first and cap limit at the configured maximum.

    Args:
        app_settings: Test settings with default limit 2 and max limit 3.
        item_service: Service under test.

    Returns:
        None: Assertions validate list envelope.

    Raises:
        AssertionError: Raised when list envelope differs.
    """

    client = _build_client(app_settings, item_service)
    for day in ("01", "02", "03", "04", "05"):
        client.post("/api/items", json=_item_body(category=f"day-{day}", date=f"2024-01-{day}T00:00:00Z"))

    default_response = client.get("/api/items")
    capped_response = client.get("/api/items", params={"limit": 10})
    filtered_response = client.get(
        "/api/items",
        params={"from": "2024-01-02T00:00:00Z", "to": "2024-01-03T00:00:00+00:00", "limit": 3},
    )

    assert [item["category"] for item in default_response.json()["items"]] == ["day-05", "day-04"]
    assert default_response.json()["page"] == {"limit": 2, "applied_limit": 2, "offset": 0, "returned": 2}
    assert capped_response.json()["page"]["applied_limit"] == 3
    assert capped_response.json()["page"]["returned"] == 3
    assert [item["category"] for item in filtered_response.json()["items"]] == ["day-03", "day-02"]
    assert filtered_response.json()["filters"] == {
        "from": "2024-01-02T00:00:00+00:00",
        "to": "2024-01-03T00:00:00+00:00",
    }


def test_api_item_list_rejects_bad_dates_and_reversed_ranges(
    app_settings: AppSettings,
    item_service: LedgerItemService,
) -> None:
    """Return HTTP 400 error envelopes for unparseable and reversed bounds."""

    client = _build_client(app_settings, item_service)

    bad_date_response = client.get("/api/items", params={"from": "not-a-date"})
    reversed_response = client.get(
        "/api/items",
        params={"from": "2024-02-01T00:00:00Z", "to": "2024-01-01T00:00:00Z"},
    )
    bad_limit_response = client.get("/api/items", params={"limit": 0})

    assert bad_date_response.status_code == 400
    assert bad_date_response.json()["code"] == "INVALID_DATE"
    assert reversed_response.status_code == 400
    assert reversed_response.json()["code"] == "INVALID_RANGE"
    assert bad_limit_response.status_code == 400
    assert bad_limit_response.json()["code"] == "INVALID_QUERY"
