"""Stored history row."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from study_buddy.models.notes import GeneratedNotes


class NoteRecord(BaseModel):
    """A persisted generation result. Rows are immutable once stored."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    user_id: str | None = None
    domain: str  # Composite label, e.g. "College - Semester 3"
    topics: str  # Raw comma-separated input as typed
    content: GeneratedNotes
    created_at: datetime
