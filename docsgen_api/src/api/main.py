from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from uuid import uuid4

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    InvalidReferenceError,
)
from src.core.logging import configure_logging, correlation_id_var
from src.core.settings import REQUIRED_SETTINGS, AppSettings, get_app_settings
from src.db.run_migrations import main as run_alembic
from src.db.seed import seed_all
from src.db.session import dispose_engine
from src.schemas.common import ErrorInfo, ErrorResponse, HealthResponse, ValidationIssue

# Routers
from src.api.routes.auth import router as auth_router
from src.api.routes.curriculum import router as curriculum_router
from src.api.routes.staff import router as staff_router
from src.api.routes.structure import router as structure_router

settings = get_app_settings()

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

openapi_tags = [
    {"name": "Health", "description": "Liveness check."},
    {"name": "Auth", "description": "Administrator login. Every other route needs the issued bearer token."},
    {"name": "Structure", "description": "Knowledge branches and the specialties within them."},
    {
        "name": "Teachers",
        "description": "Teaching staff, program guarantors and heads of scientific-methodical commissions.",
    },
    {"name": "Curriculum", "description": "Subjects, their syllabi and the teaching load."},
]


async def prepare_database(app_settings: AppSettings) -> None:
    """
    Bring the schema up to date and optionally load demo data.

    Failures are logged and swallowed so the API still starts when the
    database is briefly unavailable.
    """
    if app_settings.RUN_MIGRATIONS_ON_STARTUP:
        try:
            logger.info("Applying migrations up to head")
            # env.py runs its own event loop
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
        except Exception:
            logger.exception("Migrations failed")

    if app_settings.AUTO_SEED:
        try:
            await seed_all()
        except Exception:
            logger.exception("Seeding failed")


@asynccontextmanager
async def lifespan(application: FastAPI):
    app_settings = get_app_settings()
    # refuse to serve without a signing secret and admin credentials
    app_settings.require(*REQUIRED_SETTINGS)
    await prepare_database(app_settings)
    yield
    await dispose_engine()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
    lifespan=lifespan,
)

cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
if "*" in settings.CORS_ORIGINS and cors_allow_credentials:
    logger.warning("Ignoring CORS_ALLOW_CREDENTIALS: browsers reject credentials for wildcard origins")
    cors_allow_credentials = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=cors_allow_credentials,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
    expose_headers=[CORRELATION_HEADER],
)


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    """
    Tag the request with a correlation id and log its outcome.

    The id comes from X-Correlation-ID (or X-Request-ID) when the caller sends
    one and is returned in the X-Correlation-ID response header.
    """
    corr = request.headers.get(CORRELATION_HEADER) or request.headers.get("X-Request-ID") or uuid4().hex
    token = correlation_id_var.set(corr)
    request.state.correlation_id = corr
    started = time.perf_counter()
    try:
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
    finally:
        correlation_id_var.reset(token)

    response.headers[CORRELATION_HEADER] = corr
    return response


def _error(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(request.state, "correlation_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Covers routing 404/405 as well as HTTPException raised by handlers."""
    if isinstance(exc.detail, str):
        message, details = exc.detail, None
    else:
        message, details = "HTTP error", exc.detail
    return _error(request, exc.status_code, "http_error", message, details, headers=exc.headers)


def validation_issues(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic errors to loc/msg/type; ``ctx`` may hold exception objects."""
    return [
        ValidationIssue(loc=list(err["loc"]), msg=err["msg"], type=err["type"]).model_dump()
        for err in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error(request, 422, "validation_error", "Request validation failed", validation_issues(exc))


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    return _error(
        request,
        404,
        "not_found",
        str(exc),
        {"entity": exc.entity_type.__name__, "id": exc.entity_id},
    )


@app.exception_handler(InvalidReferenceError)
async def invalid_reference_handler(request: Request, exc: InvalidReferenceError):
    """A payload points at a record that does not exist."""
    return _error(
        request,
        400,
        "invalid_reference",
        str(exc),
        {"field": exc.field, "entity": exc.entity_type.__name__, "id": exc.entity_id},
    )


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return _error(request, 401, "authentication_error", str(exc), headers={"WWW-Authenticate": "Bearer"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log the traceback and return a generic 500 without internals."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(request, 500, "internal_error", "An unexpected error occurred")


api = APIRouter(prefix="/api")


# PUBLIC_INTERFACE
@api.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    tags=["Health"],
)
def health_check() -> HealthResponse:
    """Report that the process is up, with its version and environment label."""
    return HealthResponse(version=settings.APP_VERSION, environment=settings.ENVIRONMENT)


api.include_router(auth_router)
api.include_router(structure_router)
api.include_router(staff_router)
api.include_router(curriculum_router)

app.include_router(api)


# PUBLIC_INTERFACE
def mount_spa(application: FastAPI, static_dir: str | None) -> bool:
    """
    Serve a built single page application for every non-API path.

    Files that exist under ``static_dir`` are served as-is; any other path
    falls back to ``index.html``. Returns False when there is nothing to serve.
    """
    if not static_dir:
        return False
    root = Path(static_dir).resolve()
    index = root / "index.html"
    if not index.is_file():
        return False

    @application.get("/{full_path:path}", include_in_schema=False)
    async def spa_fallback(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not Found")
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and root in candidate.parents:
            return FileResponse(candidate)
        return FileResponse(index)

    return True


if mount_spa(app, settings.STATIC_DIR):
    logger.info("Serving single page application from %s", settings.STATIC_DIR)
