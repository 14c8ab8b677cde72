from fastapi import FastAPI

from .activity_logs import router as activity_logs_router
from .health import router as health_router
from .notifications import router as notifications_router
from .reminders import router as reminders_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(notifications_router)
    app.include_router(reminders_router)
    app.include_router(activity_logs_router)
