"""Paginated PDF export using reportlab.

Layout and drawing are separate: layout_document() wraps every piece of text
to the content width with reportlab font metrics and assigns it a page and a
baseline; render_pdf() only draws the result. Page breaks come from
place_block(), a pure function of the running vertical offset.
"""

from dataclasses import dataclass
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from study_buddy.export.text import option_letter
from study_buddy.models.domain import level_label
from study_buddy.models.notes import GeneratedNotes, PracticeQuestion, TopicNote

PRODUCT_NAME = "STUDY BUDDY"

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN = 20 * mm
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN
CONTENT_HEIGHT = PAGE_HEIGHT - 2 * MARGIN
LEADING = 1.4  # line height as a multiple of font size
BLOCK_SPACING = 5 * mm
INDENT = 6 * mm

CODE_FONT = "Courier"

# The built-in Type 1 fonts only carry WinAnsi glyphs
PDF_ENCODING = "cp1252"


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float

    @property
    def line_height(self) -> float:
        return self.size * LEADING


CHAPTER = TextStyle("Helvetica-Bold", 18)
HEADING = TextStyle("Helvetica-Bold", 14)
SUBHEADING = TextStyle("Helvetica-Bold", 11)
LABEL = TextStyle("Helvetica-Bold", 10)
BODY = TextStyle("Helvetica", 11)
SMALL = TextStyle("Helvetica", 10)
OPTION = TextStyle("Helvetica", 9)
CODE = TextStyle(CODE_FONT, 9)

TITLE = TextStyle("Helvetica-Bold", 22)
TITLE_LEVEL = TextStyle("Helvetica-Bold", 16)
TITLE_TOPICS = TextStyle("Helvetica", 12)


@dataclass(frozen=True)
class PlacedLine:
    """One line of text positioned on a page (reportlab coordinates, origin bottom-left)."""

    text: str
    font: str
    size: float
    x: float
    y: float
    centered: bool = False


Page = list[PlacedLine]


def place_block(offset: float, block_height: float, page_height: float) -> tuple[float, bool]:
    """Decide where a block of the given height goes.

    Args:
        offset: Vertical space already used on the current page.
        block_height: Height of the block to place.
        page_height: Usable height of a page.

    Returns:
        (new_offset, page_break). When the block would run past page_height a
        new page is started and the block sits at its top, so new_offset equals
        block_height. A block never breaks onto a new page from an empty one.
    """
    if offset > 0 and offset + block_height > page_height:
        return block_height, True
    return offset + block_height, False


def _hard_wrap(line: str, style: TextStyle, width: float) -> list[str]:
    """Character wrap for monospaced code, keeping indentation."""
    per_line = max(1, int(width // stringWidth("M", style.font, style.size)))
    line = line.expandtabs(4)
    return [line[i : i + per_line] for i in range(0, len(line), per_line)] or [""]


def pdf_safe(text: str) -> str:
    """Replace characters the built-in fonts cannot draw (e.g. "≤", "π") with "?"."""
    return text.encode(PDF_ENCODING, errors="replace").decode(PDF_ENCODING)


def _split_wide(line: str, style: TextStyle, width: float) -> list[str]:
    """Break a line with a single unbreakable run (URL, formula) at the width."""
    if stringWidth(line, style.font, style.size) <= width:
        return [line]
    pieces: list[str] = []
    current = ""
    for char in line:
        if current and stringWidth(current + char, style.font, style.size) > width:
            pieces.append(current)
            current = char
        else:
            current += char
    pieces.append(current)
    return pieces


def wrap_text(text: str, style: TextStyle, width: float) -> list[str]:
    """Wrap text to width, honoring explicit newlines."""
    lines: list[str] = []
    for raw in pdf_safe(text).split("\n"):
        if style.font == CODE_FONT:
            lines.extend(_hard_wrap(raw, style, width))
            continue
        for line in simpleSplit(raw, style.font, style.size, width) or [""]:
            lines.extend(_split_wide(line, style, width))
    return lines


class _Layout:
    """Accumulates positioned lines page by page."""

    def __init__(self):
        self.pages: list[Page] = [[]]
        self.offset = 0.0

    def new_page(self) -> None:
        if self.pages[-1]:
            self.pages.append([])
        self.offset = 0.0

    def centered(self, text: str, style: TextStyle, top: float) -> None:
        """Center wrapped text on the current page, first baseline `top` below the page edge."""
        for i, line in enumerate(wrap_text(text, style, CONTENT_WIDTH)):
            y = PAGE_HEIGHT - top - i * style.line_height
            self.pages[-1].append(
                PlacedLine(line, style.font, style.size, PAGE_WIDTH / 2, y, centered=True)
            )

    def add(self, text: str, style: TextStyle, indent: float = 0.0) -> None:
        """Add a block of wrapped text, breaking pages as needed."""
        lines = wrap_text(text, style, CONTENT_WIDTH - indent)
        height = len(lines) * style.line_height
        if height <= CONTENT_HEIGHT:
            self._place(lines, style, indent)
        else:
            # Taller than a page: place line by line
            for line in lines:
                self._place([line], style, indent)
        self.offset += BLOCK_SPACING

    def _place(self, lines: list[str], style: TextStyle, indent: float) -> None:
        height = len(lines) * style.line_height
        self.offset, page_break = place_block(self.offset, height, CONTENT_HEIGHT)
        if page_break:
            self.pages.append([])
        top = self.offset - height
        for i, line in enumerate(lines):
            y = PAGE_HEIGHT - MARGIN - top - i * style.line_height - style.size
            self.pages[-1].append(PlacedLine(line, style.font, style.size, MARGIN + indent, y))


def _add_question(layout: _Layout, number: int, question: PracticeQuestion) -> None:
    layout.add(f"{number}. [{question.type.value.upper()}] {question.question}", SMALL)
    for i, option in enumerate(question.options or []):
        layout.add(f"{option_letter(i)}) {option}", OPTION, indent=INDENT)
    if question.correct_answer:
        layout.add(f"Correct Answer: {question.correct_answer}", OPTION, indent=INDENT)
    if question.starter_code:
        layout.add("Starter Code:", LABEL, indent=INDENT)
        layout.add(question.starter_code, CODE, indent=INDENT)
    if question.solution:
        layout.add("Solution:", LABEL, indent=INDENT)
        layout.add(question.solution, SMALL, indent=INDENT)


def _add_chapter(layout: _Layout, number: int, note: TopicNote) -> None:
    layout.add(f"Chapter {number}: {note.title}", CHAPTER)
    layout.add("Introduction", HEADING)
    layout.add(note.introduction, BODY)

    layout.add("Key Definitions", HEADING)
    for definition in note.definitions:
        layout.add(f"{definition.term}: {definition.definition}", SMALL)

    for section in note.sections:
        layout.add(section.heading, HEADING)
        layout.add(section.content, BODY)

    layout.add("Examples & Explanations", HEADING)
    for i, example in enumerate(note.examples, start=1):
        layout.add(f"Example {i}: {example.title}", SUBHEADING)
        if example.code:
            layout.add("Code:", LABEL)
            layout.add(example.code, CODE)
        layout.add("Explanation:", LABEL)
        layout.add(example.explanation, SMALL)

    if note.diagram_description:
        layout.add("Diagram Description", HEADING)
        layout.add(note.diagram_description, SMALL)

    layout.add("Summary", HEADING)
    layout.add(note.summary, BODY)

    layout.add("Practice Questions", HEADING)
    for i, question in enumerate(note.practice_questions, start=1):
        _add_question(layout, i, question)


def layout_document(notes: GeneratedNotes) -> list[Page]:
    """Lay out the title page and one chapter per following page run."""
    layout = _Layout()

    layout.centered(PRODUCT_NAME, TITLE, top=100 * mm)
    level = level_label(notes.domain, notes.sub_level).upper()
    layout.centered(f"{level} LEVEL NOTES", TITLE_LEVEL, top=115 * mm)
    layout.centered(f"Topics: {', '.join(notes.topics)}", TITLE_TOPICS, top=130 * mm)

    for i, note in enumerate(notes.notes, start=1):
        layout.new_page()
        _add_chapter(layout, i, note)

    return layout.pages


def render_pdf(notes: GeneratedNotes) -> bytes:
    """Render notes to PDF bytes."""
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(f"Study Notes: {', '.join(notes.topics)}")

    for page in layout_document(notes):
        for line in page:
            pdf.setFont(line.font, line.size)
            if line.centered:
                pdf.drawCentredString(line.x, line.y, line.text)
            else:
                pdf.drawString(line.x, line.y, line.text)
        pdf.showPage()

    pdf.save()
    return buffer.getvalue()
