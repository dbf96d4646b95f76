"""FastAPI application factory for the finance tracker service."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import AppSettings
from app.db import DatabaseHealthPort
from app.ledger import LedgerItemService

from .routers import api_create_analytics_router, api_create_health_router, api_create_items_router
from .serializers import api_error_response


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    item_service: LedgerItemService,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        db_health_service: Database health service used by health endpoints.
        item_service: Ledger item service used by item and analytics endpoints.

    Returns:
        FastAPI: Application with routers, CORS middleware and error handlers.
    """

    application = FastAPI(title="Finance Tracker")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials="*" not in settings.cors_allowed_origins,
    )

    @application.exception_handler(RequestValidationError)
    async def api_request_validation_error(_request: Request, error: RequestValidationError) -> JSONResponse:
        """Map request validation failures to the shared HTTP 400 error envelope.

        Args:
            _request: Incoming request.
            error: FastAPI validation error.

        Returns:
            JSONResponse: Error envelope keyed by the failing request location.
        """

        validation_errors = error.errors()
        first_error = validation_errors[0] if validation_errors else {}
        location = tuple(first_error.get("loc", ()))
        field_path = ".".join(str(part) for part in location[1:])
        message = f"{field_path}: {first_error.get('msg', 'invalid value')}" if field_path else "invalid request"
        if location[:1] == ("path",):
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_ID", message)
        if location[:1] == ("query",):
            return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_QUERY", message)
        return api_error_response(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST_BODY", message)

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_items_router(settings=settings, item_service=item_service))
    application.include_router(api_create_analytics_router(item_service=item_service))

    if settings.static_directory is not None:
        application.mount("/", StaticFiles(directory=settings.static_directory, html=True), name="static")
    else:

        @application.get("/", tags=["foundation"])
        def foundation_index() -> dict[str, str]:
            """Return service metadata for bootstrap verification.

            Returns:
                dict[str, str]: Service name, status and environment label.
            """

            return {
                "service": "finance-tracker",
                "status": "ready",
                "environment": settings.environment_name,
            }

    return application
