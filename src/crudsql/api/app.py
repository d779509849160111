"""FastAPI application factory for crudsql."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crudsql import __version__
from crudsql.api.deps import init_pipeline
from crudsql.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from crudsql.api.routers import dialects, statements
from crudsql.api.schemas import HealthResponse
from crudsql.compiler.errors import CompileError
from crudsql.compiler.pipeline import CompilationPipeline
from crudsql.dialect.registry import UnsupportedDialectError
from crudsql.response.envelope import error_envelope, format_error
from crudsql.settings import Settings

logger = logging.getLogger("crudsql.api")


async def _compile_error_handler(request: Request, exc: CompileError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.code)
    return JSONResponse(status_code=400, content=error_envelope(exc).model_dump())


async def _dialect_error_handler(request: Request, exc: UnsupportedDialectError) -> JSONResponse:
    envelope = format_error(exc.code, str(exc), details={"available": exc.available})
    return JSONResponse(status_code=400, content=envelope.model_dump())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="crudsql",
        description="Compiles CRUD request descriptors into SQL statements.",
        version=__version__,
    )
    app.state.settings = settings
    init_pipeline(
        CompilationPipeline(validate=settings.validate_sql),
        default_dialect=settings.default_dialect,
    )

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.add_exception_handler(CompileError, _compile_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UnsupportedDialectError, _dialect_error_handler)  # type: ignore[arg-type]

    app.include_router(statements.router, prefix="/compile", tags=["compile"])
    app.include_router(dialects.router, prefix="/dialects", tags=["dialects"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "crudsql API Server v%s starting (host=%s, port=%d, dialect=%s)",
        __version__, settings.api_server_host, settings.effective_port, settings.default_dialect,
    )

    uvicorn.run(
        "crudsql.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
