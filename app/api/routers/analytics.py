"""Analytics API router composition for date-range statistics."""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from app.domain import InvalidRangeError, domain_parse_timestamp_utc
from app.ledger import LedgerItemService

from ..serializers import api_error_response, api_serialize_analytics_result


def api_create_analytics_router(item_service: LedgerItemService) -> APIRouter:
    """Create analytics router exposing the range statistics endpoint.

    Args:
        item_service: Ledger item use-case service.

    Returns:
        APIRouter: Router exposing `/api/analytics`.

    Raises:
        ValueError: Raised when item_service is invalid.
    """

    if item_service is None:
        raise ValueError("item_service must not be None")

    router = APIRouter(prefix="/api", tags=["analytics"])

    @router.get("/analytics")
    def api_analytics_range(
        date_from: str | None = Query(default=None, alias="from"),
        date_to: str | None = Query(default=None, alias="to"),
    ) -> JSONResponse:
        """Return count, sum, average, median and 90th percentile for one range.

        Args:
            date_from: Required RFC 3339 inclusive lower bound.
            date_to: Required RFC 3339 inclusive upper bound.

        Returns:
            JSONResponse: Analytics payload or error envelope.
        """

        if not date_from or not date_to:
            return api_error_response(
                status.HTTP_400_BAD_REQUEST,
                "MISSING_RANGE",
                "both 'from' and 'to' parameters are required",
            )

        try:
            parsed_from = domain_parse_timestamp_utc(date_from)
        except ValueError:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_DATE", "invalid 'from' date format")
        try:
            parsed_to = domain_parse_timestamp_utc(date_to)
        except ValueError:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_DATE", "invalid 'to' date format")

        try:
            result = item_service.ledger_analytics_compute(date_from=parsed_from, date_to=parsed_to)
        except InvalidRangeError as error:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_RANGE", str(error))
        return JSONResponse(content=api_serialize_analytics_result(result), status_code=status.HTTP_200_OK)

    return router


__all__ = ["api_create_analytics_router"]
