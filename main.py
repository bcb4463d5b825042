import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from synergysphere.config import get_settings
from synergysphere.infrastructure.database import engine, initialize_database
from synergysphere.interfaces.api.errors import register_error_handlers
from synergysphere.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup and release pooled connections on shutdown."""

    initialize_database()
    logger.info("Database initialised")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the SynergySphere FastAPI application."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title="SynergySphere", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()
