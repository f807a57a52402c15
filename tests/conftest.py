from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

TESTS_DIR = Path(__file__).resolve().parent
ROOT = TESTS_DIR.parent
for extra in (TESTS_DIR, ROOT):
    path_str = str(extra)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from fixtures import FakeGeminiModel, quiz_payload  # noqa: E402

from quizcraft.core.config import Settings  # noqa: E402
from quizcraft.main import create_app  # noqa: E402
from quizcraft.schemas.quiz import Quiz  # noqa: E402
from quizcraft.services.gemini_service import GeminiQuizClient  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings built in-process, ignoring any local .env file."""

    return Settings(_env_file=None, GOOGLE_API_KEY="test-key")


@pytest.fixture
def fake_model() -> FakeGeminiModel:
    """Access the fake Gemini model to queue responses or inspect calls."""

    return FakeGeminiModel()


@pytest.fixture
def quiz_client(fake_model: FakeGeminiModel) -> GeminiQuizClient:
    return GeminiQuizClient(fake_model, timeout=5)


@pytest.fixture
def api(settings: Settings, quiz_client: GeminiQuizClient) -> TestClient:
    return TestClient(create_app(settings=settings, quiz_client=quiz_client))


@pytest.fixture
def sample_quiz() -> Quiz:
    return Quiz.model_validate(quiz_payload())
