# invoicing/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from invoicing.api.health import router as health_router
from invoicing.config import Settings
from invoicing.db.engine import create_db_engine

logger = logging.getLogger(__name__)


def create_app(settings: Settings, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API around an explicit settings value and one shared engine.

    An engine passed in stays the caller's to dispose.
    """
    owns_engine = engine is None
    if owns_engine:
        engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if owns_engine:
            logger.info("Disposing database engine")
            engine.dispose()

    docs_url = None if settings.is_production else "/docs"

    app = FastAPI(
        title="Invoicing API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    app.state.settings = settings
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.APP_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix=settings.base_path)

    logger.info(
        "App created (env=%s, base_path=%r, origin=%s)",
        settings.NODE_ENV,
        settings.base_path,
        settings.APP_ORIGIN,
    )
    return app
