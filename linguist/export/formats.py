"""Export translated text as a download.

Formats:
- txt: UTF-8 plain text
- pdf: line-wrapped pages rendered with fpdf2; no layout fidelity. Non-Latin
  text needs a Unicode TTF font (see PDF_FONTS / PDF_FONT_CANDIDATES).
- doc: HTML with Office namespaces, which Word opens as a document
"""

import html
import logging
from pathlib import Path

from fpdf import FPDF

from linguist.config import PDF_FONT_CANDIDATES, PDF_FONTS, PDF_TEXT_SHAPING
from linguist.errors import ExportError

logger = logging.getLogger(__name__)

FORMATS = ("txt", "pdf", "doc")

# Letter-size page, sizes in mm
MARGIN = 20
FONT_SIZE = 12
LINE_HEIGHT = 6
CORE_FONT = "helvetica"


def to_text(text: str) -> bytes:
    return text.encode("utf-8")


def to_word_html(text: str, title: str = "Translation") -> bytes:
    """Minimal Word-compatible HTML document, one paragraph per line."""
    paragraphs = "\n".join(
        f"<p>{html.escape(line) if line else '&nbsp;'}</p>" for line in text.splitlines()
    )
    document = f"""<html xmlns:o='urn:schemas-microsoft-com:office:office' xmlns:w='urn:schemas-microsoft-com:office:word' xmlns='http://www.w3.org/TR/REC-html40'>
<head><meta charset='utf-8'><title>{html.escape(title)}</title></head>
<body>
{paragraphs}
</body>
</html>
"""
    return document.encode("utf-8")


def find_pdf_fonts() -> list[Path]:
    """Configured fonts if LINGUIST_PDF_FONTS is set, else the installed system candidates."""
    candidates = PDF_FONTS or PDF_FONT_CANDIDATES
    return [Path(p) for p in candidates if Path(p).is_file()]


def _is_latin1(text: str) -> bool:
    try:
        text.encode("latin-1")
    except UnicodeEncodeError:
        return False
    return True


def to_pdf(
    text: str,
    title: str = "Translation",
    fonts: list[str | Path] | None = None,
) -> bytes:
    """
    Render text onto as many pages as needed.

    Args:
        text: Text to render; lines are wrapped to the page width
        title: Document title metadata
        fonts: TTF font files, primary first. None searches the configured
            and system fonts.

    Raises:
        ExportError: If the text is not Latin-1 and no Unicode font is available.
    """
    font_paths = find_pdf_fonts() if fonts is None else [Path(f) for f in fonts]

    pdf = FPDF(format="letter")
    pdf.set_title(title)
    pdf.set_creator("Linguist")
    pdf.set_margins(MARGIN, MARGIN, MARGIN)
    pdf.set_auto_page_break(True, margin=MARGIN)

    if font_paths:
        families = []
        for index, path in enumerate(font_paths):
            family = f"unicode{index}"
            pdf.add_font(family, fname=str(path))
            families.append(family)
        pdf.set_font(families[0], size=FONT_SIZE)
        if len(families) > 1:
            pdf.set_fallback_fonts(families[1:])
        if PDF_TEXT_SHAPING:
            pdf.set_text_shaping(True)
        logger.debug(f"PDF fonts: {[p.name for p in font_paths]}")
    elif _is_latin1(text):
        pdf.set_font(CORE_FONT, size=FONT_SIZE)
    else:
        raise ExportError(
            "PDF export of this text needs a Unicode font. "
            "Set LINGUIST_PDF_FONTS to one or more .ttf files."
        )

    pdf.add_page()
    pdf.multi_cell(0, LINE_HEIGHT, text)
    return bytes(pdf.output())


def export_filename(source_name: str | None, fmt: str) -> str:
    """translated_<stem>.<ext>, e.g. 'translated_notes.pdf'."""
    stem = Path(source_name).stem if source_name else "doc"
    return f"translated_{stem}.{fmt}"


def export(text: str, fmt: str, title: str = "Translation") -> bytes:
    """
    Render text in one of FORMATS.

    Raises:
        ValueError: If fmt is not supported.
        ExportError: If the text cannot be rendered as PDF.
    """
    if fmt == "txt":
        return to_text(text)
    if fmt == "pdf":
        return to_pdf(text, title)
    if fmt == "doc":
        return to_word_html(text, title)
    raise ValueError(f"Unknown export format: {fmt}. Available: {list(FORMATS)}")
