"""Export translated text to txt, pdf or Word-compatible doc files."""

from .formats import FORMATS, export, export_filename, find_pdf_fonts, to_pdf, to_text, to_word_html

__all__ = [
    "FORMATS",
    "export",
    "export_filename",
    "find_pdf_fonts",
    "to_pdf",
    "to_text",
    "to_word_html",
]
