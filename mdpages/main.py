import asyncio
import logging
from contextlib import asynccontextmanager
from aiohttp import ClientError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect

from mdpages.common.exceptions import (
    ClientDisconnectedException,
    KnownException,
    PageStoreException,
    PayloadTooLargeException,
    ResourceNotFoundException,
    client_disconnected_handler,
    http_exception_handler,
    internal_error_response,
    known_exception_handler,
    page_store_exception_handler,
    payload_too_large_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    upstream_connection_exception_handler,
    upstream_timeout_handler,
)
from mdpages.common.http_session import create_http_session
from mdpages.common.opentelemetry import instrument_app
from mdpages.config import Settings, get_settings
from mdpages.healthcheck.router import router as health_router
from mdpages.home.router import router as home_router
from mdpages.pages.router import router as pages_router
from mdpages.remote.router import router as remote_router
from mdpages.store.backend import get_page_store_backend

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.http_session = create_http_session(
            user_agent=settings.USER_AGENT,
            timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
        )
        app.state.page_store = get_page_store_backend(app.state.http_session, settings)
        logger.info(f"Using '{settings.PAGE_STORE_BACKEND}' page store backend")
        yield
        await app.state.http_session.close()
        if app.state.tracer_provider is not None:
            app.state.tracer_provider.shutdown()

    app = FastAPI(
        title=settings.API_NAME,
        summary=settings.API_SUMMARY,
        lifespan=lifespan,
        responses={**internal_error_response},
        version=settings.MDPAGES_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    app.state.tracer_provider = None
    if settings.OTEL_ENABLED:
        app.state.tracer_provider = instrument_app(app, settings)

    if settings.CORS_ENABLED:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
    app.exception_handler(KnownException)(known_exception_handler)
    app.exception_handler(PayloadTooLargeException)(payload_too_large_handler)
    app.exception_handler(PageStoreException)(page_store_exception_handler)
    app.exception_handler(ClientError)(upstream_connection_exception_handler)
    app.exception_handler(asyncio.TimeoutError)(upstream_timeout_handler)
    app.exception_handler(ClientDisconnectedException)(client_disconnected_handler)
    app.exception_handler(ClientDisconnect)(client_disconnected_handler)
    app.exception_handler(Exception)(unexpected_exception_handler)

    app.include_router(home_router)
    app.include_router(health_router)
    app.include_router(pages_router)
    app.include_router(remote_router)

    return app


app = create_app()
