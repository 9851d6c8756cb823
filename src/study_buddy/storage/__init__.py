"""History persistence on Supabase."""

from study_buddy.storage.client import create_supabase_client
from study_buddy.storage.repository import NoteStore, build_record

__all__ = [
    "create_supabase_client",
    "NoteStore",
    "build_record",
]
