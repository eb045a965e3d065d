import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from jobly.api.v1.router import api_v1_router
from jobly.core.config import get_settings
from jobly.core.database import create_pool, create_tables
from jobly.core.exceptions import JoblyError
from jobly.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    settings = get_settings()
    app.state.db_pool = await create_pool(settings)
    if settings.create_tables:
        async with app.state.db_pool.acquire() as connection:
            await create_tables(connection)
    yield
    # Shutdown
    await app.state.db_pool.close()


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.include_router(api_v1_router, prefix="/api/v1")
    return app
