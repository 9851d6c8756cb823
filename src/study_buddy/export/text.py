"""Plain-text export of generated notes."""

from study_buddy.models.domain import level_label
from study_buddy.models.notes import GeneratedNotes, PracticeQuestion, TopicNote

HEADER_RULE = "=" * 40
CHAPTER_RULE = "-" * 40


def option_letter(index: int) -> str:
    """A, B, C ... for MCQ options."""
    return chr(ord("A") + index)


def _question_lines(number: int, question: PracticeQuestion) -> list[str]:
    lines = [f"{number}. [{question.type.value.upper()}] {question.question}"]
    for i, option in enumerate(question.options or []):
        lines.append(f"   {option_letter(i)}) {option}")
    if question.correct_answer:
        lines.append(f"   Correct Answer: {question.correct_answer}")
    if question.starter_code:
        lines.append("   Starter Code:")
        lines.append(question.starter_code)
    if question.solution:
        lines.append("   Solution:")
        lines.append(question.solution)
    lines.append("")
    return lines


def _chapter_lines(number: int, note: TopicNote) -> list[str]:
    lines = [f"CHAPTER {number}: {note.title.upper()}", ""]
    lines += ["INTRODUCTION", note.introduction, ""]

    lines.append("KEY DEFINITIONS")
    lines += [f"- {d.term}: {d.definition}" for d in note.definitions]
    lines.append("")

    for section in note.sections:
        lines += [section.heading.upper(), section.content, ""]

    lines.append("EXAMPLES & EXPLANATIONS")
    for i, example in enumerate(note.examples, start=1):
        lines.append(f"Example {i}: {example.title}")
        if example.code:
            lines += ["CODE:", example.code, ""]
        lines += [f"EXPLANATION: {example.explanation}", ""]

    if note.diagram_description:
        lines += ["DIAGRAM DESCRIPTION", note.diagram_description, ""]

    lines += ["SUMMARY", note.summary, ""]

    lines.append("PRACTICE QUESTIONS")
    for i, question in enumerate(note.practice_questions, start=1):
        lines += _question_lines(i, question)

    lines += ["", CHAPTER_RULE, ""]
    return lines


def render_text(notes: GeneratedNotes) -> str:
    """Render notes as a flat chapter-by-chapter text document."""
    lines = [
        f"STUDY NOTES - {level_label(notes.domain, notes.sub_level).upper()} LEVEL",
        f"Topics: {', '.join(notes.topics)}",
        "",
        HEADER_RULE,
        "",
    ]
    for i, note in enumerate(notes.notes, start=1):
        lines += _chapter_lines(i, note)
    return "\n".join(lines) + "\n"


def export_text(notes: GeneratedNotes) -> bytes:
    """UTF-8 bytes of the text export."""
    return render_text(notes).encode("utf-8")
