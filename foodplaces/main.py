"""
Food Places API: FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(store=...) returns a configured FastAPI
       instance. The store is an explicit argument; when omitted, the
       lifespan builds one from settings.
Who:   uvicorn (`uvicorn foodplaces.main:app`), the `food-places-api`
       console script, and the tests (`create_app(store=fake)`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌──────┐     │
    │  │ Req ID   │→│  Logging    │→│ GZip │→│ CORS │     │
    │  └──────────┘ └─────────────┘ └──────┘ └──────┘     │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌───────────────────────┐ │
    │  │ /api/food-places...  │ │ GET /  GET /health    │ │
    │  └──────────────────────┘ └───────────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌───────────────────────────────────────────────┐  │
    │  │ Validation→400 │ NotFound→404 │ Store→500     │  │
    │  └───────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, check settings, build store (if none was
              injected), run store.initialize()
    Shutdown: store.close() (pool disposal / HTTP client close)
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

from foodplaces import __version__
from foodplaces.config import Settings, settings as default_settings
from foodplaces.exceptions import NotFoundError, StoreError, ValidationError
from foodplaces.middleware.logging import RequestLoggingMiddleware
from foodplaces.middleware.request_id import RequestIDMiddleware, request_id_var
from foodplaces.routes import food_places, health
from foodplaces.stores import FoodPlaceStore, build_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure root logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container runtimes collect it)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that log every request/query at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:
        1. Setup logging
        2. Validate store settings (logged, not fatal; store calls will then
           fail as 500s with the store's message)
        3. Build the store unless one was injected
        4. store.initialize()

    Shutdown:
        1. store.close()
    """
    cfg: Settings = app.state.settings

    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("Food Places API %s starting up...", __version__)

    try:
        cfg.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    if getattr(app.state, "store", None) is None:
        app.state.store = build_store(cfg)
    store: FoodPlaceStore = app.state.store
    await store.initialize()

    logger.info("Server ready at http://%s:%d", cfg.host, cfg.port)
    logger.info("=" * 60)

    yield

    logger.info("Food Places API shutting down...")
    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "request_id": request_id_var.get("")},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and `{"error": ...}` bodies.

    Handler hierarchy:
        ValidationError         → 400
        RequestValidationError  → 400 (unparseable body / path)
        NotFoundError           → 404
        StoreError              → 500, store message passed through
        Exception (fallback)    → 500, generic message
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        parts = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
            parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
        message = "Invalid request: " + "; ".join(parts) if parts else "Invalid request"
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return _error_response(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(
            "[%s] Store error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the log only."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "An unexpected error occurred")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[FoodPlaceStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:        Store to serve from. When None, the lifespan builds
                      one from `app_settings` at startup.
        app_settings: Defaults to the module-level settings singleton.

    Returns: Fully configured FastAPI instance.
    """
    cfg = app_settings or default_settings

    app = FastAPI(
        title="Food Places API",
        description="CRUD API for food places (restaurants, cafes, stalls).",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.store = store
    app.state.strict_delete = cfg.strict_delete

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    origins = cfg.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
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
    app.include_router(health.router)
    app.include_router(food_places.router)

    return app


def run() -> None:
    """Console entry point: serve `app` with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "foodplaces.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `foodplaces.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
