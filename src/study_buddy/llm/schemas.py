"""Expected shape of the raw Gemini response text."""

from pydantic import BaseModel

from study_buddy.models.notes import TopicNote


class NotesResponse(BaseModel):
    """Top-level JSON object the prompt asks the model to return."""

    notes: list[TopicNote]
