"""Ledger item API router composition for CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, Response, status
from fastapi.responses import JSONResponse

from app.config import AppSettings
from app.domain import (
    InvalidRangeError,
    ItemNotFoundError,
    ItemValidationError,
    domain_parse_timestamp_utc,
)
from app.ledger import LedgerItemService

from ..schemas import LedgerItemPayload
from ..serializers import api_error_response, api_serialize_ledger_item


def api_create_items_router(settings: AppSettings, item_service: LedgerItemService) -> APIRouter:
    """Create item router exposing create, list, detail, update and delete APIs.

    Args:
        settings: Runtime settings used for pagination defaults.
        item_service: Ledger item use-case service.

    Returns:
        APIRouter: Router exposing `/api/items` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if item_service is None:
        raise ValueError("item_service must not be None")

    router = APIRouter(prefix="/api/items", tags=["items"])

    @router.post("")
    def api_item_create(payload: LedgerItemPayload) -> JSONResponse:
        """Create one ledger item.

        Args:
            payload: Item request body.

        Returns:
            JSONResponse: Created item payload with HTTP 201.
        """

        try:
            created_item = item_service.ledger_item_create(payload.to_draft())
        except ItemValidationError as error:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_ITEM", str(error))
        return JSONResponse(content=api_serialize_ledger_item(created_item), status_code=status.HTTP_201_CREATED)

    @router.get("")
    def api_item_list(
        date_from: str | None = Query(default=None, alias="from"),
        date_to: str | None = Query(default=None, alias="to"),
        limit: int = Query(default=settings.api_default_limit, ge=1),
        offset: int = Query(default=0, ge=0),
    ) -> JSONResponse:
        """List ledger items with optional inclusive date filters.

        Args:
            date_from: Optional RFC 3339 lower bound.
            date_to: Optional RFC 3339 upper bound.
            limit: Max rows to return.
            offset: Rows to skip.

        Returns:
            JSONResponse: Item list envelope payload.
        """

        try:
            parsed_from = None if date_from is None else domain_parse_timestamp_utc(date_from)
        except ValueError:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_DATE", "invalid 'from' date format")
        try:
            parsed_to = None if date_to is None else domain_parse_timestamp_utc(date_to)
        except ValueError:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_DATE", "invalid 'to' date format")

        applied_limit = min(limit, settings.api_max_limit)
        try:
            items = item_service.ledger_item_list(
                date_from=parsed_from,
                date_to=parsed_to,
                limit=applied_limit,
                offset=offset,
            )
        except InvalidRangeError as error:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_RANGE", str(error))

        payload = {
            "items": [api_serialize_ledger_item(item) for item in items],
            "page": {
                "limit": limit,
                "applied_limit": applied_limit,
                "offset": offset,
                "returned": len(items),
            },
            "filters": {
                "from": None if parsed_from is None else parsed_from.isoformat(),
                "to": None if parsed_to is None else parsed_to.isoformat(),
            },
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/{item_id}")
    def api_item_detail(item_id: int) -> JSONResponse:
        """Return one ledger item.

        Args:
            item_id: Item identifier.

        Returns:
            JSONResponse: Item payload or not-found error envelope.
        """

        try:
            item = item_service.ledger_item_get(item_id)
        except ItemNotFoundError as error:
            return api_error_response(status.HTTP_404_NOT_FOUND, "ITEM_NOT_FOUND", str(error))
        return JSONResponse(content=api_serialize_ledger_item(item), status_code=status.HTTP_200_OK)

    @router.put("/{item_id}")
    def api_item_update(item_id: int, payload: LedgerItemPayload) -> JSONResponse:
        """Replace writable fields of one ledger item.

        Args:
            item_id: Item identifier.
            payload: Item request body.

        Returns:
            JSONResponse: Updated item payload or error envelope.
        """

        try:
            updated_item = item_service.ledger_item_update(item_id, payload.to_draft())
        except ItemValidationError as error:
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_ITEM", str(error))
        except ItemNotFoundError as error:
            return api_error_response(status.HTTP_404_NOT_FOUND, "ITEM_NOT_FOUND", str(error))
        return JSONResponse(content=api_serialize_ledger_item(updated_item), status_code=status.HTTP_200_OK)

    @router.delete("/{item_id}")
    def api_item_delete(item_id: int) -> Response:
        """Delete one ledger item.

        Args:
            item_id: Item identifier.

        Returns:
            Response: Empty HTTP 204 response or not-found error envelope.
        """

        try:
            item_service.ledger_item_delete(item_id)
        except ItemNotFoundError as error:
            return api_error_response(status.HTTP_404_NOT_FOUND, "ITEM_NOT_FOUND", str(error))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


__all__ = ["api_create_items_router"]
