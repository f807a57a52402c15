"""Shared testing fixtures for the quizcraft test suite."""

from .gemini import FakeGeminiModel  # noqa: F401
from .documents import build_pdf, quiz_payload  # noqa: F401

__all__ = [
    "FakeGeminiModel",
    "build_pdf",
    "quiz_payload",
]
