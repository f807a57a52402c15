import codecs
import logging
import asyncio
from enum import Enum
from typing import Optional

import fitz  # PyMuPDF

from quizcraft.core.config import Settings
from quizcraft.errors import UnreadableFile, UnsupportedFileType

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"


class SourceKind(str, Enum):
    pdf = "pdf"
    text = "text"


def detect_source_kind(filename: Optional[str], content_type: Optional[str]) -> SourceKind:
    """
    Decide how an upload will be read, before touching its bytes.
    Only text-like files and PDFs are accepted.
    """
    name = (filename or "").lower()
    mime = (content_type or "").split(";")[0].strip().lower()

    if mime == PDF_MIME or name.endswith(".pdf"):
        return SourceKind.pdf
    if mime.startswith("text/") or name.endswith(".txt"):
        return SourceKind.text
    raise UnsupportedFileType(filename)


async def extract_text(
    file_content: bytes,
    filename: Optional[str],
    content_type: Optional[str],
    settings: Settings,
) -> str:
    """
    Convert an uploaded file into plain text.
    PDF pages are read with PyMuPDF; everything else is decoded as UTF-8.
    Returns "" for a file with no text; callers decide whether that is an error.
    """
    kind = detect_source_kind(filename, content_type)

    # ── Validate file size ────────────────────────────
    max_bytes = settings.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(file_content) > max_bytes:
        raise UnreadableFile(f"File exceeds {settings.MAX_FILE_SIZE_MB}MB limit.")

    if kind is SourceKind.pdf:
        text = await asyncio.to_thread(_extract_from_pdf, file_content, settings.MAX_PDF_PAGES)
    else:
        text = _decode_text(file_content)

    logger.info(f"[EXTRACT] {filename or '<unnamed>'} ({kind.value}) → {len(text)} chars")
    return text


def _extract_from_pdf(data: bytes, max_pages: int) -> str:
    """Read every page in document order, one newline between pages."""
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            if doc.page_count == 0:
                raise UnreadableFile("PDF has no pages.")
            if doc.page_count > max_pages:
                raise UnreadableFile(f"PDF too large (>{max_pages} pages).")
            return "\n".join(page.get_text("text") for page in doc)
    except UnreadableFile:
        raise
    except Exception as e:
        raise UnreadableFile(f"PDF extraction failed: {e}") from e


def _decode_text(data: bytes) -> str:
    try:
        return codecs.decode(data, "utf-8-sig")
    except UnicodeDecodeError as e:
        raise UnreadableFile(f"File is not valid UTF-8 text: {e}") from e
