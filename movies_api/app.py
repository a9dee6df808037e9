import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from movies_api.api import routes_health, routes_movie
from movies_api.core.config import Settings, get_settings
from movies_api.core.logging_setup import setup_logging
from movies_api.db import session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up %s (%s)", app.title, app.state.settings.ENV)
    if app.state.settings.CREATE_TABLES:
        await session.init_db(app.state.engine)
    yield
    logger.info("Shutting down")
    await app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # get_settings() fails when DATABASE_URL is missing, nothing to serve without it
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.engine = session.create_engine(settings)
    app.state.session_factory = session.create_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.info("%s %s -> %s (%d ms)", request.method, request.url.path, response.status_code, latency_ms)
        return response

    app.include_router(routes_health.router)

    app.include_router(
        routes_movie.router,
        prefix=settings.API_PREFIX
    )

    @app.get("/")
    async def root():
        return {"message": "Movies API is running"}
    return app
