"""
Case API: FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn case_api.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                     FastAPI App                      │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │         │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘         │
    │                                                      │
    │  Routes:                                             │
    │  ┌──────────────────────────┐ ┌─────────────┐        │
    │  │ /case/... (CRUD, search) │ │ GET /health │        │
    │  └──────────────────────────┘ └─────────────┘        │
    │                                                      │
    │  Exception Handlers:                                 │
    │  ┌────────────────────────────────────────────────┐  │
    │  │ ValidationError→400 │ DatabaseError→500 │ *→500│  │
    │  └────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listen address
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from case_api import __version__
from case_api.config import settings
from case_api.database import dispose_engine
from case_api.exceptions import CaseApiError, DatabaseError, ValidationError
from case_api.middleware.logging import RequestLoggingMiddleware
from case_api.middleware.request_id import RequestIDMiddleware, request_id_var
from case_api.routes import cases, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Case API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Case API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a consistent JSON body.

    Handler hierarchy:
        ValidationError         → 400 (service-level rule, e.g. missing title)
        RequestValidationError  → 400 (unparseable body, non-integer id)
        DatabaseError           → 500
        CaseApiError (base)     → 500
        Exception (fallback)    → 500

    Not-found is never an error in this API, so there is no 404 handler.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = exc.errors()
        logger.warning("[%s] Malformed request: %d error(s)", rid, len(errors))
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "The request could not be parsed",
                "details": {
                    "errors": [
                        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
                        for err in errors
                    ]
                },
                "request_id": rid,
            },
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(CaseApiError)
    async def handle_case_api_error(request: Request, exc: CaseApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace is logged server-side only, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Case API",
        description="Create, fetch, delete and search case records.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(cases.router)
    app.include_router(health.router)

    return app


app = create_app()
