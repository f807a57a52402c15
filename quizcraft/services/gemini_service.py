"""
QuizCraft — Gemini Quiz Client
===============================
One schema-constrained call to Gemini per quiz, then strict parsing of the
JSON it returns.

  - No retries: a provider error surfaces immediately as GenerationFailed
  - Bounded by AI_TIMEOUT_SECONDS
  - Optional integrity checks on every question (STRICT_QUIZ_VALIDATION)
"""

import json
import re
import logging
import asyncio
from typing import Any, Dict, List

import google.generativeai as genai
from pydantic import ValidationError

from quizcraft.core.config import Settings
from quizcraft.errors import ConfigurationError, GenerationFailed, MalformedResponse
from quizcraft.schemas.quiz import Question, QuestionType, Quiz

logger = logging.getLogger(__name__)

GENERATION_TEMPERATURE = 0.7
TF_ANSWERS = ("True", "False")
MCQ_OPTION_COUNT = 4


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLIENT
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class GeminiQuizClient:
    """
    Wraps a ``genai.GenerativeModel``. Anything exposing
    ``generate_content(prompt, generation_config=...)`` with a ``.text``
    result can stand in for the model.
    """

    def __init__(self, model: Any, *, timeout: float = 120, strict: bool = True):
        self._model = model
        self.timeout = timeout
        self.strict = strict

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiQuizClient":
        if not settings.GOOGLE_API_KEY:
            raise ConfigurationError("GOOGLE_API_KEY is not set in environment variables.")

        genai.configure(api_key=settings.GOOGLE_API_KEY, transport="rest")
        model = genai.GenerativeModel(model_name=settings.GEMINI_MODEL)
        logger.info(f"[INIT] ✓ Gemini client ready ({settings.GEMINI_MODEL})")
        return cls(
            model,
            timeout=settings.AI_TIMEOUT_SECONDS,
            strict=settings.STRICT_QUIZ_VALIDATION,
        )

    async def generate(self, prompt_text: str, schema: Dict[str, Any]) -> Quiz:
        """Send the prompt, return the validated quiz."""
        raw = await self._call(prompt_text, schema)
        quiz = parse_quiz_response(raw)

        problems = quiz_problems(quiz)
        if problems:
            summary = "; ".join(problems)
            if self.strict:
                logger.error(f"[GENERATE] ✗ Quiz failed integrity checks: {summary}")
                raise MalformedResponse(f"Quiz failed integrity checks: {summary}")
            logger.warning(f"[GENERATE] Quiz has integrity problems: {summary}")

        return quiz

    async def _call(self, prompt_text: str, schema: Dict[str, Any]) -> str:
        generation_config = {
            "response_mime_type": "application/json",
            "response_schema": schema,
            "temperature": GENERATION_TEMPERATURE,
        }

        def _request() -> str:
            response = self._model.generate_content(
                prompt_text, generation_config=generation_config
            )
            return response.text

        logger.info("Calling Gemini...")
        try:
            raw = await asyncio.wait_for(asyncio.to_thread(_request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise GenerationFailed(f"Gemini call timed out after {self.timeout}s") from e
        except Exception as e:
            logger.error(f"Gemini call failed: {e}")
            raise GenerationFailed(str(e)) from e

        logger.info("✓ Gemini call succeeded")
        return raw


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RESPONSE PARSING
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def parse_quiz_response(raw_text: str) -> Quiz:
    """
    Turn the model's raw text into a Quiz.
    The top level must be an object holding a ``questions`` array.
    """
    cleaned = (raw_text or "").strip()

    # JSON mode should never fence its output, but some models still do
    fence_match = _FENCE_PATTERN.match(cleaned)
    if fence_match:
        cleaned = fence_match.group(1).strip()

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parse failed. Raw text (first 500 chars): {raw_text[:500] if raw_text else ''}")
        raise MalformedResponse(f"AI returned invalid JSON: {e}") from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("questions"), list):
        raise MalformedResponse("Invalid response format")

    try:
        return Quiz.model_validate(parsed)
    except ValidationError as e:
        raise MalformedResponse(f"Invalid question structure: {e.error_count()} error(s)") from e


def quiz_problems(quiz: Quiz) -> List[str]:
    """List every question that breaks the MCQ/TF rules, by 1-based position."""
    problems = []
    for number, question in enumerate(quiz.questions, start=1):
        for issue in _question_problems(question):
            problems.append(f"question {number}: {issue}")
    return problems


def _question_problems(question: Question) -> List[str]:
    issues = []
    options = question.options or []

    if question.type is QuestionType.mcq:
        if len(options) != MCQ_OPTION_COUNT:
            issues.append(f"expected {MCQ_OPTION_COUNT} options, got {len(options)}")
        if len(set(options)) != len(options):
            issues.append("options are not distinct")
        if question.correctAnswer not in options:
            issues.append("correctAnswer does not match any option")
    else:
        if question.correctAnswer not in TF_ANSWERS:
            issues.append(f"correctAnswer must be 'True' or 'False', got {question.correctAnswer!r}")
        if options:
            issues.append("true/false question must not have options")

    return issues
