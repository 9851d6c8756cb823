"""History store on a Supabase table.

Rows are `{id, user_id, domain, topics, content, created_at}`; `id` and
`created_at` are assigned by the database. Rows are only ever inserted.
Owner scoping: a user id lists that user's rows, no user id lists rows with a
NULL user_id (the shared anonymous history), never a mix of the two.
"""

import logging

import httpx
from pydantic import ValidationError as SchemaValidationError
from supabase import AsyncClient, PostgrestAPIError

from study_buddy.errors import NotFoundError, PersistenceError
from study_buddy.models.domain import storage_label
from study_buddy.models.notes import GeneratedNotes
from study_buddy.models.records import NoteRecord

logger = logging.getLogger(__name__)

_STORE_ERRORS = (PostgrestAPIError, httpx.HTTPError)

# Postgres invalid_text_representation, e.g. a malformed uuid in the id filter
_INVALID_TEXT_REPRESENTATION = "22P02"


def build_record(notes: GeneratedNotes, raw_topics: str, owner_id: str | None = None) -> dict:
    """Build the insert row for a generation result.

    `topics` keeps the raw input string; `domain` is the composite label
    ("College - Semester 3"). `user_id` is omitted for anonymous users.
    """
    row = {
        "domain": storage_label(notes.domain, notes.sub_level),
        "topics": raw_topics,
        "content": notes.to_storage(),
    }
    if owner_id:
        row["user_id"] = owner_id
    return row


def _to_record(row: dict) -> NoteRecord:
    try:
        return NoteRecord.model_validate(row)
    except SchemaValidationError as exc:
        raise PersistenceError(f"Stored row {row.get('id')} is malformed") from exc


class NoteStore:
    """Insert, list and fetch generation results."""

    def __init__(self, client: AsyncClient, table: str = "notes", history_limit: int = 10):
        self._client = client
        self._table = table
        self._history_limit = history_limit

    async def save(self, row: dict) -> NoteRecord:
        """Insert one row and return it with its server-assigned id and timestamp.

        Raises:
            PersistenceError: If the insert fails or returns no row.
        """
        try:
            response = await self._client.table(self._table).insert(row).execute()
        except _STORE_ERRORS as exc:
            raise PersistenceError(f"Failed to save notes: {exc}") from exc

        if not response.data:
            raise PersistenceError("Insert returned no row")

        record = _to_record(response.data[0])
        logger.info("Saved notes %s (%s)", record.id, record.domain)
        return record

    async def list_recent(self, owner_id: str | None = None) -> list[NoteRecord]:
        """Return the most recent rows for an owner, newest first.

        Raises:
            PersistenceError: On transport or query failure.
        """
        query = (
            self._client.table(self._table)
            .select("*")
            .order("created_at", desc=True)
            .limit(self._history_limit)
        )
        if owner_id:
            query = query.eq("user_id", owner_id)
        else:
            query = query.is_("user_id", "null")

        try:
            response = await query.execute()
        except _STORE_ERRORS as exc:
            raise PersistenceError(f"Failed to fetch history: {exc}") from exc

        return [_to_record(row) for row in response.data or []]

    async def get_by_id(self, record_id: str) -> NoteRecord:
        """Fetch one row by id.

        Raises:
            NotFoundError: If no row has this id (or the id is malformed).
            PersistenceError: On transport or query failure.
        """
        query = self._client.table(self._table).select("*").eq("id", record_id).limit(1)
        try:
            response = await query.execute()
        except PostgrestAPIError as exc:
            if exc.code == _INVALID_TEXT_REPRESENTATION:
                raise NotFoundError(f"No notes with id {record_id}") from exc
            raise PersistenceError(f"Failed to fetch notes {record_id}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise PersistenceError(f"Failed to fetch notes {record_id}: {exc}") from exc

        if not response.data:
            raise NotFoundError(f"No notes with id {record_id}")
        return _to_record(response.data[0])
