"""JSON serialization helpers for ledger items, analytics and error envelopes."""

from __future__ import annotations

from fastapi.responses import JSONResponse

from app.domain import AnalyticsResult, LedgerItem


def api_serialize_ledger_item(item: LedgerItem) -> dict[str, object]:
    """Serialize one typed ledger item to JSON payload.

    Args:
        item: Typed ledger item.

    Returns:
        dict[str, object]: JSON-serializable item payload.
    """

    return {
        "id": item.item_id,
        "type": item.item_type.value,
        "amount": float(item.amount),
        "category": item.category,
        "date": item.date.isoformat(),
        "created_at": item.created_at_utc.isoformat(),
        "updated_at": item.updated_at_utc.isoformat(),
    }


def api_serialize_analytics_result(result: AnalyticsResult) -> dict[str, object]:
    """Serialize analytics result with numeric fields matching the wire contract.

    Args:
        result: Aggregated analytics result.

    Returns:
        dict[str, object]: `{sum, avg, count, median, percentile_90}` payload.
    """

    return {
        "sum": float(result.sum),
        "avg": float(result.avg),
        "count": result.count,
        "median": float(result.median),
        "percentile_90": float(result.percentile_90),
    }


def api_error_response(status_code: int, code: str, message: str) -> JSONResponse:
    """Build the shared error envelope response.

    Args:
        status_code: HTTP status code.
        code: Deterministic machine-readable error code.
        message: Human-readable error message.

    Returns:
        JSONResponse: Error envelope response.
    """

    payload = {
        "status": "error",
        "code": code,
        "message": message,
    }
    return JSONResponse(content=payload, status_code=status_code)


__all__ = ["api_error_response", "api_serialize_analytics_result", "api_serialize_ledger_item"]
