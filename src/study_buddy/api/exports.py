"""Export endpoint for notes held by the client (e.g. unsaved results)."""

from fastapi import APIRouter, Response

from study_buddy.api.responses import ExportFormat, export_response
from study_buddy.models.notes import GeneratedNotes

router = APIRouter(prefix="/exports", tags=["exports"])


@router.post("/{fmt}")
async def export_notes(fmt: ExportFormat, notes: GeneratedNotes) -> Response:
    """Render posted notes as a text or PDF download."""
    return await export_response(notes, fmt)
