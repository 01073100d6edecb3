from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from backoffice.config import get_settings
from backoffice.infrastructure.database import initialize_database, engine
from backoffice.interfaces.api.errors import register_exception_handlers
from backoffice.interfaces.api.routes import register_routes
from backoffice.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the back-office FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title="User administration back-office", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
