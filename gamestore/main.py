"""FastAPI application factory. No business logic; only wiring, middleware and error rendering."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from gamestore.api import router as api_router
from gamestore.core.config import Settings, get_settings
from gamestore.core.database import create_db_engine, create_session_factory
from gamestore.core.errors import AppError

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and path/query params are client errors (400)."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"Invalid {where}: {first.get('msg')}" if where else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application for the given settings (defaults to env/.env).

    Run with: uvicorn --factory gamestore.main:create_app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Gamestore API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    if settings.FRONTEND_DIR is not None:
        # Mounted last so API routes take precedence.
        app.mount("/", StaticFiles(directory=settings.FRONTEND_DIR, html=True), name="frontend")
    else:

        @app.get("/")
        def root() -> dict[str, str]:
            """Root route; minimal payload for discovery."""
            return {"message": "Gamestore API"}

    logger.info(
        "Gamestore API configured: env=%s prefix=%s admin_only_catalog_writes=%s",
        settings.APP_ENV,
        settings.API_PREFIX,
        settings.ADMIN_ONLY_CATALOG_WRITES,
    )
    return app
