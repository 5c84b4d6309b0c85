"""PulseOps API application"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from pulseops.api.api_v1.api import api_router
from pulseops.api.contract import API_PREFIX
from pulseops.core.config import settings
from pulseops.core.errors import register_exception_handlers
from pulseops.core.logging import setup_logging
from pulseops.db.init_db import init_db
from pulseops.db.seed import seed_database
from pulseops.db.session import get_db_session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")

    init_db()
    if settings.SEED_DEMO_DATA:
        with get_db_session() as db:
            seed_database(db)

    logger.info(f"API running on http://{settings.HOST}:{settings.PORT}{API_PREFIX}")
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Dashboards, panels, alerts and integrations for PulseOps",
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        logger.debug(f"{request.method} {request.url.path} - {response.status_code} ({duration:.2f}ms)")
        return response

    register_exception_handlers(app)
    app.include_router(api_router, prefix=API_PREFIX)
    return app


app = create_app()
