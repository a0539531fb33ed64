"""FastAPI application serving a single media file with byte-range support."""

from __future__ import annotations

from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routes import media, system
from config import Settings, settings
from core.errors import ResourceUnavailableError
from core.utils.logger import bind_request, clear_request, logger, setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    config: Settings = app.state.settings
    logger.info(f"startup: serving {config.media_path} at {config.route}")
    if not config.media_path.is_file():
        logger.warning(f"Media file {config.media_path} does not exist yet")

    yield

    logger.info("shutdown")


def create_app(config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or settings
    setup_logger(config)

    app = FastAPI(
        title="Media Range Server",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = config

    app.add_api_route(
        config.route,
        media.stream_media,
        methods=["GET"],
        response_model=None,
        name="stream_media",
    )
    app.include_router(system.router)

    @app.exception_handler(ResourceUnavailableError)
    async def resource_unavailable_handler(
        request: Request, exc: ResourceUnavailableError
    ) -> JSONResponse:
        logger.error(f"{exc} ({exc.original_error})")
        if exc.is_missing:
            return JSONResponse(status_code=404, content={"detail": "File not found"})
        return JSONResponse(
            status_code=500, content={"detail": "Media file unavailable"}
        )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid4().hex
        bind_request(request_id)
        try:
            logger.debug(
                f"{request.method} {request.url.path} "
                f"range={request.headers.get('range')!r}"
            )
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            clear_request()

    return app


app = create_app()
