"""Notes endpoints: generate, history, fetch, reader view and export."""

import logging

from fastapi import APIRouter, Depends, Query, Response

from study_buddy.api.deps import Services, get_services, get_user_id
from study_buddy.api.responses import ExportFormat, export_response
from study_buddy.errors import PersistenceError
from study_buddy.llm.generator import generate_notes
from study_buddy.models.domain import AcademicDomain
from study_buddy.models.notes import CamelModel, GeneratedNotes
from study_buddy.models.records import NoteRecord
from study_buddy.views import HistoryPanel, NotesView, build_history_panel, build_notes_view, parse_reveal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


class GenerateRequest(CamelModel):
    topics: str
    domain: AcademicDomain
    sub_level: str | None = None


class GenerateResponse(CamelModel):
    id: str | None = None  # None when the history save failed
    notes: GeneratedNotes


@router.post("", response_model=GenerateResponse)
async def create_notes(
    body: GenerateRequest,
    services: Services = Depends(get_services),
    user_id: str | None = Depends(get_user_id),
) -> GenerateResponse:
    """Generate notes for comma-separated topics and record them in history."""
    outcome = await generate_notes(
        services.gemini,
        services.store,
        body.topics,
        body.domain,
        body.sub_level,
        user_id,
        max_attempts=services.settings.generation_max_attempts,
    )
    return GenerateResponse(id=outcome.record_id, notes=outcome.notes)


@router.get("/history", response_model=HistoryPanel)
async def history(
    services: Services = Depends(get_services),
    user_id: str | None = Depends(get_user_id),
) -> HistoryPanel:
    """Recent notes for the caller; an unreadable store yields an empty list."""
    try:
        records = await services.store.list_recent(user_id)
    except PersistenceError:
        logger.warning("History unavailable, returning empty list", exc_info=True)
        records = []
    return build_history_panel(records, signed_in=user_id is not None)


@router.get("/{record_id}", response_model=NoteRecord)
async def get_note(record_id: str, services: Services = Depends(get_services)) -> NoteRecord:
    return await services.store.get_by_id(record_id)


@router.get("/{record_id}/view", response_model=NotesView)
async def view_note(
    record_id: str,
    reveal: list[str] = Query(default=[]),
    services: Services = Depends(get_services),
) -> NotesView:
    """Reader view; pass reveal=<chapter>-<question> for each open solution."""
    record = await services.store.get_by_id(record_id)
    return build_notes_view(record.content, parse_reveal(reveal))


@router.get("/{record_id}/export/{fmt}")
async def export_note(
    record_id: str,
    fmt: ExportFormat,
    services: Services = Depends(get_services),
) -> Response:
    record = await services.store.get_by_id(record_id)
    return await export_response(record.content, fmt)
