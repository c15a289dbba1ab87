import logging
from typing import Any, Dict

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from tasknote.api.routes import router as task_notes_router
from tasknote.config import settings
from tasknote.db import get_db

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Health", "description": "Service health and readiness endpoints."},
    {"name": "TaskNotes", "description": "CRUD operations for task notes."},
]

app = FastAPI(
    title="Task Note API",
    description="CRUD API for task notes with relational persistence.",
    version="1.0.0",
    openapi_tags=openapi_tags,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_origin_regex=settings.allowed_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report shape validation failures as 400 with the pydantic error details."""
    logger.info("Rejected %s %s: %d validation error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return JSON for unexpected errors (storage unavailable, coding errors)."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


@app.on_event("startup")
def _startup_migrate() -> None:
    """
    Apply pending migrations when TASKNOTE_MIGRATE_ON_STARTUP is set.

    Failure does not stop startup: the service still binds its port and
    /health/db reports the database state.
    """
    if not settings.migrate_on_startup:
        return
    # Imported lazily so serving without startup migration never loads alembic.
    from tasknote.migrate import run_migrations

    try:
        run_migrations(settings.database_url)
    except Exception:
        logger.exception("Database migration failed during startup.")


app.include_router(task_notes_router)


# PUBLIC_INTERFACE
@app.get("/", tags=["Health"], summary="Health check", description="Returns a simple health payload.")
def health_check() -> Dict[str, str]:
    """Health check endpoint used by monitoring."""
    return {"message": "Healthy"}


# PUBLIC_INTERFACE
@app.get(
    "/health/db",
    tags=["Health"],
    summary="Database health check",
    description=(
        "Verifies database connectivity by running SELECT 1. "
        "Returns status=up when the query succeeds, otherwise status=down with error details."
    ),
)
def health_check_db(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Database readiness endpoint."""
    try:
        value = db.execute(text("SELECT 1")).scalar_one()
        return {"status": "up", "query": "SELECT 1", "result": int(value)}
    except Exception as exc:
        logger.warning("Database health check failed: %s", exc)
        return {"status": "down", "error": str(exc)}
