"""Skill Exchange - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .errors import ConfigurationError
from .logging_config import setup_logging
from .repositories import Storage, build_storage
from .routers import connections_router, skills_router

logger = logging.getLogger("skill_exchange")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings: Settings = app.state.settings
    logger.info(f"🚀 Starting {settings.service_name} v{settings.service_version}")

    if app.state.storage is None:
        try:
            app.state.storage = build_storage(settings)
        except ConfigurationError as e:
            logger.critical(str(e))
            raise

    storage: Storage = app.state.storage
    await storage.connect()
    logger.info(f"✅ Storage ready ({storage.name})")

    yield

    # Shutdown
    await storage.disconnect()
    logger.info("👋 Storage closed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 with per-field violations."""
    errors = [
        {
            "path": list(err["loc"][1:]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid input data", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render unexpected failures as 500 ``{"message": ...}``."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[Storage] = None,
) -> FastAPI:
    """Build the application.

    ``storage`` is injected as-is; when omitted, the backing configured in
    ``settings`` is built during startup.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Skill Exchange",
        description="Post what you can teach, find who can teach you.",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(skills_router, prefix="/api")
    app.include_router(connections_router, prefix="/api")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "docs": "/docs",
        }

    @app.get("/health")
    async def health(request: Request) -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "storage": request.app.state.storage.name}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "skill_exchange.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
