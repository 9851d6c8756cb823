"""Data models and enums for study notes."""

from study_buddy.models.domain import (
    DOMAIN_PROFILES,
    AcademicDomain,
    DomainProfile,
    level_label,
    storage_label,
)
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

__all__ = [
    "AcademicDomain",
    "DomainProfile",
    "DOMAIN_PROFILES",
    "level_label",
    "storage_label",
    "CamelModel",
    "Definition",
    "Example",
    "GeneratedNotes",
    "PracticeQuestion",
    "QuestionType",
    "Section",
    "TopicNote",
    "NoteRecord",
]
