from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from projecthub.config import get_settings
from projecthub.infrastructure.database import engine, initialize_database
from projecthub.interfaces.api.middleware import ActivityLogMiddleware
from projecthub.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app(activity_session_factory: Callable[[], Session] | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="ProjectHub API", lifespan=lifespan)

    app.add_middleware(ActivityLogMiddleware, session_factory=activity_session_factory)
    # The SPA authenticates with credentials, so origins must be explicit.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app
