"""Download responses for exported notes."""

import asyncio
from enum import Enum
from urllib.parse import quote

from fastapi import Response

from study_buddy.export import export_filename, export_text, render_pdf
from study_buddy.models.notes import GeneratedNotes


class ExportFormat(str, Enum):
    TXT = "txt"
    PDF = "pdf"


async def export_response(notes: GeneratedNotes, fmt: ExportFormat) -> Response:
    """Render notes in the requested format as an attachment download.

    reportlab layout is synchronous and CPU-bound, so the PDF is rendered in
    asyncio.to_thread() to keep the event loop free.
    """
    if fmt == ExportFormat.PDF:
        body, media_type = await asyncio.to_thread(render_pdf, notes), "application/pdf"
    else:
        body, media_type = export_text(notes), "text/plain; charset=utf-8"

    filename = export_filename(notes, fmt.value)
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
