"""
Journal Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the store clients from settings,
       registers middleware, exception handlers and routers, and returns a
       configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn journal.main:app), and
       by the test suite with its own Settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────┐ ┌──────────────┐  │
    │  │   Req ID     │→│   Logging   │→│ GZip / CORS  │  │
    │  └──────────────┘ └─────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /api/categories  /api/entries  /api/comments       │
    │  /api/media       /uploads      /health             │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Store→500    │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

State owned by the app (app.state):
    database:      Database store client (engine + session factory)
    file_service:  FileService bound to the upload directory
    settings:      the Settings the app was built from
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from journal import __version__
from journal.config import Settings, settings as default_settings
from journal.database import Database
from journal.exceptions import JournalError
from journal.middleware.logging import RequestLoggingMiddleware
from journal.middleware.request_id import RequestIDMiddleware, request_id_var
from journal.routes import categories, comments, entries, health, media, uploads
from journal.services.file_service import FileService

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Identifiant invalide"
INVALID_DATA_MESSAGE = "Données invalides"
INTERNAL_ERROR_MESSAGE = "Erreur interne du serveur"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: 2026-01-01T12:00:00 [INFO] journal.access: GET /api/entries 200 ...

    Called once from the lifespan, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Ensure the upload directory exists
        3. Create tables when AUTO_CREATE_TABLES is set (dev only)

    Shutdown:
        1. Dispose the database engine (close all pooled connections)
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("Journal Backend %s starting up...", __version__)

    file_service: FileService = app.state.file_service
    file_service.upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Upload directory: %s", file_service.upload_dir)

    database: Database = app.state.database
    if app_settings.auto_create_tables:
        await database.create_all()

    logger.info("Server ready at http://%s:%d", app_settings.host, app_settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Journal Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_message(exc: RequestValidationError) -> str:
    """
    Pick the French message for a request that failed FastAPI validation.

    Path parameters that are not integers → "Identifiant invalide".
    Field validators raise ValueError with their own French message.
    Anything else (malformed JSON, wrong types) → "Données invalides".
    """
    errors = exc.errors()
    for err in errors:
        loc = err.get("loc") or ()
        if loc and loc[0] == "path":
            return INVALID_ID_MESSAGE
    for err in errors:
        if err.get("type") == "value_error":
            cause = (err.get("ctx") or {}).get("error")
            if cause is not None:
                return str(cause)
    return INVALID_DATA_MESSAGE


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request
        JournalError subclasses → exc.status_code (400 / 404 / 500)
        Exception (fallback)    → 500 Internal Server Error

    Every error body is `{"message": "<French text>"}`. Internal details
    (SQL, file paths, stack traces) are logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = _validation_message(exc)
        logger.warning("[%s] Invalid request %s %s: %s", rid, request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(JournalError)
    async def handle_journal_error(request: Request, exc: JournalError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app from. Defaults to the
                      process-wide settings read from the environment.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title="Journal API",
        description=(
            "Personal journal backend: entries grouped by category, "
            "with comments and uploaded media attached to each entry."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Store Clients ─────────────────────────────────────────────────────
    app.state.settings = app_settings
    app.state.database = Database.from_settings(app_settings)
    app.state.file_service = FileService(
        upload_dir=app_settings.upload_dir,
        max_file_size=app_settings.max_file_size,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(entries.router)
    app.include_router(comments.router)
    app.include_router(media.router)
    app.include_router(uploads.router)
    app.include_router(health.router)

    return app


# uvicorn expects `journal.main:app` to be importable
app = create_app()
