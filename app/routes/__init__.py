"""API route modules for FastAPI endpoints."""

from app.routes.bugs import router as bugs_router

__all__ = ["bugs_router"]
