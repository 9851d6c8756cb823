"""Reader view models: accordion chapters with per-question solution reveal,
and the history panel.

Solution visibility is a set of "<chapter>-<question>" keys (0-based) that the
client holds and sends back; toggle_solution() is the only state transition.
"""

from datetime import datetime

from study_buddy.models.domain import level_label
from study_buddy.models.notes import (
    CamelModel,
    Definition,
    Example,
    GeneratedNotes,
    PracticeQuestion,
    QuestionType,
    Section,
    TopicNote,
)
from study_buddy.models.records import NoteRecord

NO_SOLUTION_TEXT = "Solution details not provided in the generated content."


def solution_key(chapter: int, question: int) -> str:
    return f"{chapter}-{question}"


def toggle_solution(revealed: frozenset[str], chapter: int, question: int) -> frozenset[str]:
    """Flip one question's solution visibility."""
    key = solution_key(chapter, question)
    return revealed - {key} if key in revealed else revealed | {key}


def parse_reveal(values: list[str]) -> frozenset[str]:
    """Keep only well-formed "<int>-<int>" keys, normalized."""
    keys = set()
    for value in values:
        chapter, sep, question = value.partition("-")
        if sep and chapter.isdigit() and question.isdigit():
            keys.add(solution_key(int(chapter), int(question)))
    return frozenset(keys)


class SolutionView(CamelModel):
    correct_option: str | None = None  # MCQ only
    text: str
    is_code: bool = False


class QuestionView(CamelModel):
    number: int
    key: str
    question: str
    type: QuestionType
    options: list[str] | None = None  # MCQ only
    starter_code: str | None = None  # Coding only
    solution_visible: bool = False
    solution: SolutionView | None = None


class ChapterView(CamelModel):
    title: str
    introduction: str
    definitions: list[Definition]
    sections: list[Section]
    examples: list[Example]
    diagram_description: str | None = None
    summary: str
    questions: list[QuestionView]


class NotesView(CamelModel):
    heading: str
    subtitle: str
    chapters: list[ChapterView]


class HistoryItem(CamelModel):
    id: str
    topics: str
    domain: str
    created_at: datetime


class HistoryPanel(CamelModel):
    heading: str
    items: list[HistoryItem]


def _question_view(chapter: int, index: int, q: PracticeQuestion, revealed: frozenset[str]) -> QuestionView:
    key = solution_key(chapter, index)
    visible = key in revealed
    solution = None
    if visible:
        solution = SolutionView(
            correct_option=q.correct_answer if q.type == QuestionType.MCQ else None,
            text=q.solution or NO_SOLUTION_TEXT,
            is_code=q.type == QuestionType.CODING and bool(q.solution),
        )
    return QuestionView(
        number=index + 1,
        key=key,
        question=q.question,
        type=q.type,
        options=q.options if q.type == QuestionType.MCQ else None,
        starter_code=q.starter_code if q.type == QuestionType.CODING else None,
        solution_visible=visible,
        solution=solution,
    )


def _chapter_view(chapter: int, note: TopicNote, revealed: frozenset[str]) -> ChapterView:
    return ChapterView(
        title=note.title,
        introduction=note.introduction,
        definitions=note.definitions,
        sections=note.sections,
        examples=note.examples,
        diagram_description=note.diagram_description,
        summary=note.summary,
        questions=[
            _question_view(chapter, i, q, revealed)
            for i, q in enumerate(note.practice_questions)
        ],
    )


def build_notes_view(notes: GeneratedNotes, revealed: frozenset[str] = frozenset()) -> NotesView:
    """Build the reader view with solutions shown only for revealed keys."""
    return NotesView(
        heading="Generated Notes",
        subtitle=f"{level_label(notes.domain, notes.sub_level)} Level • {len(notes.notes)} Topics",
        chapters=[_chapter_view(i, note, revealed) for i, note in enumerate(notes.notes)],
    )


def build_history_panel(records: list[NoteRecord], signed_in: bool) -> HistoryPanel:
    """History list headed for the signed-in user or the shared anonymous list."""
    return HistoryPanel(
        heading="Your Recent Notes" if signed_in else "Community Recent Notes",
        items=[
            HistoryItem(id=r.id, topics=r.topics, domain=r.domain, created_at=r.created_at)
            for r in records
        ],
    )
