from fastapi import FastAPI

from .logs import router as logs_router
from .pages import router as pages_router
from .references import router as references_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(users_router)
    app.include_router(references_router)
    app.include_router(logs_router)
    app.include_router(pages_router)
