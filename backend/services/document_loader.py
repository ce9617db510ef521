"""Raw text extraction from uploaded candidate documents (PDF, DOCX, text)."""

import io
import logging

import docx
import pdfplumber

from services.errors import ValidationError

logger = logging.getLogger(__name__)

UNSUPPORTED_SUFFIXES = (".doc",)


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_docx_text(docx_bytes: bytes) -> str:
    """Extract paragraph text from a DOCX file."""
    document = docx.Document(io.BytesIO(docx_bytes))
    paragraphs = [p.text for p in document.paragraphs if p.text.strip()]
    return "\n".join(paragraphs).strip()


def extract_plain_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace").strip()


def extract_text(filename: str, content: bytes) -> str:
    """Dispatch on file extension; unknown extensions are read as text.

    Raises ValidationError for unsupported or unreadable files.
    """
    name = (filename or "").lower()
    if name.endswith(UNSUPPORTED_SUFFIXES):
        raise ValidationError("Legacy .doc files are not supported; upload PDF, DOCX or text")

    try:
        if name.endswith(".pdf"):
            return extract_pdf_text(content)
        if name.endswith(".docx"):
            return extract_docx_text(content)
    except Exception as e:
        logger.warning("Could not parse uploaded %s: %s", name or "file", e)
        raise ValidationError(f"Could not parse {name or 'file'}") from e

    return extract_plain_text(content)
