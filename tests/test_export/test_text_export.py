"""Tests for the plain-text exporter."""

from study_buddy.export.naming import export_filename
from study_buddy.export.text import CHAPTER_RULE, export_text, render_text


def _referenced_strings(note) -> list[str]:
    """Every example, definition, question and section string of a chapter."""
    strings = []
    for d in note.definitions:
        strings += [f"{d.term}: {d.definition}"]
    for s in note.sections:
        strings += [s.heading.upper(), s.content]
    for e in note.examples:
        strings += [e.title, e.explanation] + ([e.code] if e.code else [])
    for q in note.practice_questions:
        strings += [q.question]
        strings += [f"{chr(65 + i)}) {option}" for i, option in enumerate(q.options or [])]
        strings += [s for s in (q.starter_code, q.solution) if s]
    return strings


def test_header(generated_notes):
    lines = render_text(generated_notes).splitlines()
    assert lines[0] == "STUDY NOTES - COLLEGE (SEMESTER 3) LEVEL"
    assert lines[1] == "Topics: Binary Search, Graph Theory"


def test_every_item_exactly_once(generated_notes):
    text = render_text(generated_notes)
    for note in generated_notes.notes:
        for expected in _referenced_strings(note):
            assert text.count(expected) == 1, expected


def test_items_in_input_order(generated_notes):
    text = render_text(generated_notes)
    positions = [
        text.index(s)
        for note in generated_notes.notes
        for s in [note.title.upper(), note.sections[0].content, note.sections[1].content]
    ]
    assert positions == sorted(positions)


def test_chapter_section_order(generated_notes):
    """Title, introduction, definitions, sections, examples, diagram, summary, questions."""
    text = render_text(generated_notes)
    markers = [
        "CHAPTER 1: CH1 TITLE",
        "INTRODUCTION",
        "KEY DEFINITIONS",
        "CH1 HEADING A",
        "EXAMPLES & EXPLANATIONS",
        "DIAGRAM DESCRIPTION",
        "SUMMARY",
        "PRACTICE QUESTIONS",
        "CHAPTER 2: CH2 TITLE",
    ]
    positions = [text.index(m) for m in markers]
    assert positions == sorted(positions)


def test_question_formatting(generated_notes):
    text = render_text(generated_notes)
    assert "1. [MCQ] ch1 question mcq" in text
    assert "   A) ch1 option A" in text
    assert "   B) ch1 option B" in text
    assert "   Correct Answer: ch1 option B" in text
    assert "2. [CODING] ch1 question coding" in text
    assert "   Starter Code:\ndef ch1_starter(): pass" in text
    assert "   Solution:\ndef ch1_solved(): return 1" in text
    assert "3. [SHORT] ch1 question short" in text


def test_example_formatting(generated_notes):
    text = render_text(generated_notes)
    assert "Example 1: ch1 example A\nCODE:\nprint('ch1 code A')" in text
    assert "Example 2: ch1 example B\nEXPLANATION: ch1 explanation B" in text


def test_optional_diagram_omitted(generated_notes):
    for note in generated_notes.notes:
        note.diagram_description = None
    assert "DIAGRAM DESCRIPTION" not in render_text(generated_notes)


def test_separator_per_chapter(generated_notes):
    assert render_text(generated_notes).count(CHAPTER_RULE) == 2


def test_deterministic(generated_notes):
    assert render_text(generated_notes) == render_text(generated_notes)


def test_export_text_utf8(generated_notes):
    generated_notes.notes[0].summary = "Résumé — ∑"
    assert "Résumé — ∑".encode("utf-8") in export_text(generated_notes)


def test_export_filename(generated_notes):
    generated_notes.topics[0] = "Binary   Search\tTrees"
    assert export_filename(generated_notes, "txt") == "Study_Notes_Binary_Search_Trees.txt"
    assert export_filename(generated_notes, "pdf").endswith(".pdf")
