"""Shared test fixtures: sample notes, fake Supabase, fake Gemini, API client."""

import json
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from study_buddy.api.deps import Services, get_services
from study_buddy.app import app
from study_buddy.config import Settings
from study_buddy.models.domain import AcademicDomain
from study_buddy.models.notes import GeneratedNotes
from study_buddy.storage.repository import NoteStore

_BASE_TIME = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_note_payload(prefix: str = "ch1") -> dict:
    """A complete TopicNote in wire (camelCase) form with unique, greppable strings."""
    return {
        "title": f"{prefix} title",
        "introduction": f"{prefix} introduction text",
        "sections": [
            {"heading": f"{prefix} heading A", "content": f"{prefix} section content A"},
            {"heading": f"{prefix} heading B", "content": f"{prefix} section content B"},
        ],
        "definitions": [
            {"term": f"{prefix} term A", "definition": f"{prefix} meaning A"},
            {"term": f"{prefix} term B", "definition": f"{prefix} meaning B"},
        ],
        "examples": [
            {
                "title": f"{prefix} example A",
                "code": f"print('{prefix} code A')",
                "explanation": f"{prefix} explanation A",
            },
            {"title": f"{prefix} example B", "explanation": f"{prefix} explanation B"},
        ],
        "diagramDescription": f"{prefix} diagram text",
        "summary": f"{prefix} summary text",
        "practiceQuestions": [
            {
                "question": f"{prefix} question mcq",
                "type": "mcq",
                "options": [f"{prefix} option A", f"{prefix} option B"],
                "correctAnswer": f"{prefix} option B",
                "solution": f"{prefix} solution mcq",
            },
            {
                "question": f"{prefix} question coding",
                "type": "coding",
                "starterCode": f"def {prefix}_starter(): pass",
                "solution": f"def {prefix}_solved(): return 1",
            },
            {"question": f"{prefix} question short", "type": "short"},
        ],
    }


class FakeQuery:
    """In-memory stand-in for a postgrest request builder."""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self.table = table
        self.filters: list[tuple[str, str, object]] = []
        self.ordering: tuple[str, bool] | None = None
        self.row_limit: int | None = None
        self.inserted: dict | None = None

    def select(self, columns: str = "*") -> "FakeQuery":
        return self

    def insert(self, row: dict) -> "FakeQuery":
        self.inserted = row
        return self

    def eq(self, column: str, value: object) -> "FakeQuery":
        self.filters.append(("eq", column, value))
        return self

    def is_(self, column: str, value: str) -> "FakeQuery":
        self.filters.append(("is", column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.ordering = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.row_limit = size
        return self

    def _matches(self, row: dict) -> bool:
        for op, column, value in self.filters:
            if op == "eq" and row.get(column) != value:
                return False
            if op == "is" and value == "null" and row.get(column) is not None:
                return False
        return True

    async def execute(self) -> SimpleNamespace:
        self._db.executed.append(self)
        if self._db.error is not None:
            raise self._db.error

        if self.inserted is not None:
            row = self._db.add_row(**self.inserted)
            return SimpleNamespace(data=[row])

        rows = [row for row in self._db.rows if self._matches(row)]
        if self.ordering:
            column, desc = self.ordering
            rows.sort(key=lambda row: row[column], reverse=desc)
        if self.row_limit is not None:
            rows = rows[: self.row_limit]
        return SimpleNamespace(data=rows)


class FakeSupabase:
    """Enough of supabase.AsyncClient for the store and identity code."""

    def __init__(self):
        self.rows: list[dict] = []
        self.executed: list[FakeQuery] = []
        self.error: Exception | None = None
        self.auth = MagicMock()
        self.auth.get_user = AsyncMock(return_value=None)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def add_row(self, **fields) -> dict:
        """Insert a row the way the database would, assigning id and created_at."""
        row = {
            "id": str(uuid4()),
            "user_id": None,
            "created_at": (_BASE_TIME + timedelta(minutes=len(self.rows))).isoformat(),
        }
        row.update(fields)
        self.rows.append(row)
        return row


def make_gemini(text: str | None) -> MagicMock:
    """Gemini client whose generate_content answers with the given raw text."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(text=text, usage_metadata=None)
    )
    return client


@pytest.fixture
def note_payload() -> dict:
    return make_note_payload("ch1")


@pytest.fixture
def generated_notes() -> GeneratedNotes:
    """Two chapters of College (Semester 3) notes."""
    return GeneratedNotes(
        domain=AcademicDomain.COLLEGE,
        sub_level="Semester 3",
        topics=["Binary Search", "Graph Theory"],
        notes=[make_note_payload("ch1"), make_note_payload("ch2")],
    )


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def store(fake_db: FakeSupabase) -> NoteStore:
    return NoteStore(fake_db, table="notes", history_limit=10)


@pytest.fixture
def fake_gemini() -> MagicMock:
    return make_gemini(json.dumps({"notes": [make_note_payload("ch1")]}))


@pytest.fixture
def services(fake_db: FakeSupabase, store: NoteStore, fake_gemini: MagicMock) -> Services:
    settings = Settings(_env_file=None, supabase_url="http://supabase.test", supabase_key="key")
    return Services(settings=settings, gemini=fake_gemini, supabase=fake_db, store=store)


@pytest.fixture
def client(services: Services):
    """TestClient with the lifespan-built services replaced by fakes."""
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def note_factory():
    """Callable building TopicNote payloads: note_factory("ch2")."""
    return make_note_payload


@pytest.fixture
def gemini_factory():
    """Callable building fake Gemini clients: gemini_factory(raw_text)."""
    return make_gemini
