"""FastAPI application with lifespan, error mapping and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from study_buddy.api.auth import router as auth_router
from study_buddy.api.deps import Services
from study_buddy.api.exports import router as exports_router
from study_buddy.api.levels import router as levels_router
from study_buddy.api.notes import router as notes_router
from study_buddy.config import get_settings
from study_buddy.errors import (
    AuthenticationError,
    GenerationError,
    NotFoundError,
    PersistenceError,
    StudyNotesError,
    ValidationError,
)
from study_buddy.llm.client import create_gemini_client
from study_buddy.logging_config import configure_logging
from study_buddy.storage import NoteStore, create_supabase_client

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[StudyNotesError], int]] = [
    (ValidationError, 422),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (GenerationError, 502),
    (PersistenceError, 503),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and build shared clients on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    supabase = await create_supabase_client(settings)
    app.state.services = Services(
        settings=settings,
        gemini=create_gemini_client(settings),
        supabase=supabase,
        store=NoteStore(supabase, settings.notes_table, settings.history_limit),
    )
    yield


app = FastAPI(
    title="Study Buddy",
    lifespan=lifespan,
)
app.include_router(auth_router)
app.include_router(levels_router)
app.include_router(notes_router)
app.include_router(exports_router)


@app.exception_handler(StudyNotesError)
async def study_notes_error_handler(request: Request, exc: StudyNotesError) -> JSONResponse:
    """Map domain errors to HTTP status codes with a readable message."""
    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type)),
        500,
    )
    if status_code >= 500:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "study-buddy",
        "version": "0.1.0",
    }
