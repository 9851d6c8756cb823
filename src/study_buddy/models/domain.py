"""Academic domain enum with per-domain metadata.

The same metadata drives the input form (sub-level selector) and the prompt
builder (framing text), so the three-way branch lives in one table.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DomainProfile:
    """Form and prompt metadata for one academic domain."""

    sub_level_label: str  # Selector label, e.g. "Class"
    sub_levels: tuple[str, ...]
    default_sub_level: str
    framing: str  # Prompt guidance; {sub_level} is filled in by the prompt builder
    sub_level_fallback: str  # Used in framing when no sub-level was chosen


class AcademicDomain(str, Enum):
    """Coarse academic context that shapes prompt framing."""

    SCHOOL = "School"
    COLLEGE = "College"
    COMPETITIVE_EXAM = "Competitive Exam"

    @property
    def profile(self) -> DomainProfile:
        return DOMAIN_PROFILES[self]


DOMAIN_PROFILES: dict[AcademicDomain, DomainProfile] = {
    AcademicDomain.SCHOOL: DomainProfile(
        sub_level_label="Class",
        sub_levels=tuple(f"Class {n}" for n in range(6, 13)),
        default_sub_level="Class 10",
        framing=(
            "Focus on clarity, foundational principles, and engaging pedagogical tone. "
            "Tailor depth to {sub_level}."
        ),
        sub_level_fallback="the specified grade",
    ),
    AcademicDomain.COLLEGE: DomainProfile(
        sub_level_label="Semester",
        sub_levels=tuple(f"Semester {n}" for n in range(1, 9)),
        default_sub_level="Semester 1",
        framing=(
            "Focus on technical depth, theoretical frameworks, formal analysis, "
            "and advanced problem-solving techniques. Tailor to {sub_level}."
        ),
        sub_level_fallback="university level",
    ),
    AcademicDomain.COMPETITIVE_EXAM: DomainProfile(
        sub_level_label="Exam",
        sub_levels=(
            "NEET", "JEE-Mains", "JEE-Advanced", "GATE", "UPSC", "CAT", "CLAT",
            "GRE", "GMAT", "SAT", "IELTS", "TOEFL", "NDA", "CDS", "SSC CGL",
        ),
        default_sub_level="NEET",
        framing=(
            "Focus on high-yield concepts, exam-specific patterns, shortcuts "
            "(if applicable), and rigorous problem-solving typical of {sub_level}."
        ),
        sub_level_fallback="competitive exams",
    ),
}


def level_label(domain: AcademicDomain, sub_level: str | None = None) -> str:
    """Human-readable level, e.g. "College (Semester 3)"."""
    return f"{domain.value} ({sub_level})" if sub_level else domain.value


def storage_label(domain: AcademicDomain, sub_level: str | None = None) -> str:
    """Denormalized domain label stored alongside each history row."""
    return f"{domain.value} - {sub_level}" if sub_level else domain.value
