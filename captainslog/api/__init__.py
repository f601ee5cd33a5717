"""API routes."""

from captainslog.api.alerts import router as alerts_router

__all__ = ["alerts_router"]
