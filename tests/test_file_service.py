from __future__ import annotations

import asyncio

import pytest

from quizcraft.errors import UnreadableFile, UnsupportedFileType
from quizcraft.services.file_service import SourceKind, detect_source_kind, extract_text

from fixtures import build_pdf


def _extract(settings, content: bytes, filename: str, content_type: str | None) -> str:
    return asyncio.run(extract_text(content, filename, content_type, settings))


@pytest.mark.parametrize(
    "filename, content_type, expected",
    [
        ("notes.pdf", "application/pdf", SourceKind.pdf),
        ("NOTES.PDF", None, SourceKind.pdf),
        ("scan", "application/pdf", SourceKind.pdf),
        ("notes.txt", "text/plain", SourceKind.text),
        ("data.csv", "text/csv", SourceKind.text),
        ("notes.txt", "application/octet-stream", SourceKind.text),
        ("page.html", "text/html; charset=utf-8", SourceKind.text),
    ],
)
def test_detect_source_kind(filename, content_type, expected) -> None:
    assert detect_source_kind(filename, content_type) is expected


@pytest.mark.parametrize(
    "filename, content_type",
    [("photo.png", "image/png"), ("essay.docx", None), (None, None)],
)
def test_unsupported_types_name_allowed_extensions(filename, content_type) -> None:
    with pytest.raises(UnsupportedFileType) as exc:
        detect_source_kind(filename, content_type)
    assert ".txt" in str(exc.value)
    assert ".pdf" in str(exc.value)


def test_text_decoded_verbatim(settings) -> None:
    raw = "  Héllo wörld\r\nsecond line  ".encode("utf-8")
    assert _extract(settings, raw, "notes.txt", "text/plain") == "  Héllo wörld\r\nsecond line  "


def test_text_bom_dropped(settings) -> None:
    assert _extract(settings, b"\xef\xbb\xbfhello", "notes.txt", "text/plain") == "hello"


def test_invalid_utf8_is_unreadable(settings) -> None:
    with pytest.raises(UnreadableFile):
        _extract(settings, b"\xff\xfe\xfa not utf8", "notes.txt", "text/plain")


def test_pdf_pages_joined_in_order(settings) -> None:
    pdf = build_pdf(["First page text", "Second page text", "Third page text"])

    text = _extract(settings, pdf, "notes.pdf", "application/pdf")

    first = text.index("First page text")
    second = text.index("Second page text")
    third = text.index("Third page text")
    assert first < second < third
    assert "\n" in text[first:second]


def test_corrupt_pdf_is_unreadable(settings) -> None:
    with pytest.raises(UnreadableFile):
        _extract(settings, b"this is not a pdf at all", "notes.pdf", "application/pdf")


def test_pdf_page_limit(settings) -> None:
    limited = settings.model_copy(update={"MAX_PDF_PAGES": 1})
    with pytest.raises(UnreadableFile) as exc:
        _extract(limited, build_pdf(["one", "two"]), "notes.pdf", "application/pdf")
    assert "pages" in str(exc.value)


def test_size_limit(settings) -> None:
    limited = settings.model_copy(update={"MAX_FILE_SIZE_MB": 0})
    with pytest.raises(UnreadableFile):
        _extract(limited, b"some text", "notes.txt", "text/plain")


def test_unsupported_type_rejected_before_reading(settings) -> None:
    with pytest.raises(UnsupportedFileType):
        _extract(settings, b"\x89PNG", "photo.png", "image/png")


def test_empty_text_file_yields_empty_string(settings) -> None:
    assert _extract(settings, b"", "empty.txt", "text/plain") == ""
