"""Generated note models: one TopicNote per chapter, GeneratedNotes per request.

Field aliases are camelCase so the serialized shape matches the JSON contract
given to the model and the blob kept in the store.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from study_buddy.models.domain import AcademicDomain


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuestionType(str, Enum):
    """Practice question kinds."""

    SHORT = "short"
    LONG = "long"
    MCQ = "mcq"
    NUMERICAL = "numerical"
    CODING = "coding"


class Section(CamelModel):
    heading: str
    content: str


class Definition(CamelModel):
    term: str
    definition: str


class Example(CamelModel):
    title: str
    code: str | None = None
    explanation: str


class PracticeQuestion(CamelModel):
    """A practice question.

    options/correct_answer are meaningful for MCQs and starter_code for coding
    questions, but nothing enforces it.
    """

    question: str
    type: QuestionType
    options: list[str] | None = None
    correct_answer: str | None = None
    starter_code: str | None = None
    solution: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: object) -> object:
        """Case-insensitive; labels outside the enum (e.g. "analytical") read as short."""
        if isinstance(value, QuestionType):
            return value
        normalized = str(value).strip().lower()
        try:
            return QuestionType(normalized)
        except ValueError:
            return QuestionType.SHORT


class TopicNote(CamelModel):
    """One generated chapter."""

    title: str
    introduction: str
    sections: list[Section] = Field(default_factory=list)
    definitions: list[Definition] = Field(default_factory=list)
    examples: list[Example] = Field(default_factory=list)
    diagram_description: str | None = None
    summary: str
    practice_questions: list[PracticeQuestion] = Field(default_factory=list)


class GeneratedNotes(CamelModel):
    """Result of one generation request."""

    domain: AcademicDomain
    sub_level: str | None = None
    topics: list[str]
    notes: list[TopicNote]

    def to_storage(self) -> dict:
        """Serialize to the camelCase JSON blob kept in the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
