import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.concurrency import run_in_threadpool

from persons_api.core.config import Settings, get_settings
from persons_api.core.logging import configure_logging
from persons_api.db.create_tables import create_all
from persons_api.routers import persons as persons_router
from persons_api.services.person_service import PersonService
from persons_api.services.seeding import run_csv_import

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("persons_api.requests")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers for a JSON-only API."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'none'; frame-ancestors 'none'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        request_logger.info(
            "%s %s -> %d (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """Create tables and run the CSV seeding before serving requests."""
        await run_in_threadpool(create_all)
        if settings.seed_on_startup:
            await run_in_threadpool(run_csv_import, settings.csv_path)
        else:
            logger.info("CSV seeding disabled (SEED_ON_STARTUP=false).")
        yield

    return lifespan


def create_app(settings: Optional[Settings] = None, person_service: Optional[PersonService] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn persons_api.app:create_app --factory``)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Persons API", lifespan=_build_lifespan(settings))
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    app.add_middleware(RequestLoggingMiddleware)
    app.state.settings = settings
    app.state.person_service = person_service or PersonService()
    app.include_router(persons_router.router)
    return app
