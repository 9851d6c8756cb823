"""Deterministic download filenames."""

import re

from study_buddy.models.notes import GeneratedNotes

_WHITESPACE = re.compile(r"\s+")


def export_filename(notes: GeneratedNotes, extension: str) -> str:
    """Return e.g. "Study_Notes_Binary_Search.pdf" named after the first topic."""
    first = notes.topics[0] if notes.topics else "Notes"
    return f"Study_Notes_{_WHITESPACE.sub('_', first)}.{extension}"
