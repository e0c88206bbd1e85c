"""API routes."""

from candlefeed.web.routes.health_routes import router as health_router
from candlefeed.web.routes.stock_routes import router as stock_router

__all__ = ["health_router", "stock_router"]
