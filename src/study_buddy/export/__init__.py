"""Plain-text and PDF export of generated notes."""

from study_buddy.export.naming import export_filename
from study_buddy.export.pdf import layout_document, place_block, render_pdf
from study_buddy.export.text import export_text, render_text

__all__ = [
    "export_filename",
    "export_text",
    "layout_document",
    "place_block",
    "render_pdf",
    "render_text",
]
