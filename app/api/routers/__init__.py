"""API router package for endpoint composition."""

from .analytics import api_create_analytics_router
from .health import api_create_health_router
from .items import api_create_items_router

__all__ = ["api_create_analytics_router", "api_create_health_router", "api_create_items_router"]
