import logging
from typing import Optional, Union

from quizcraft.core.config import Settings
from quizcraft.errors import InputMissing
from quizcraft.schemas.quiz import Difficulty, Quiz, QuizRequest
from quizcraft.services.file_service import extract_text
from quizcraft.services.gemini_service import GeminiQuizClient
from quizcraft.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

MISSING_SOURCE_MESSAGE = "Source content is missing."
NO_QUESTIONS_MESSAGE = "Please request at least one question."


def build_quiz_request(
    source_text: Optional[str],
    num_mcq: int = 5,
    num_tf: int = 3,
    difficulty: Union[Difficulty, str] = Difficulty.medium,
) -> QuizRequest:
    """Validate user input into a QuizRequest; raises InputMissing before any network call."""
    if not source_text or not source_text.strip():
        raise InputMissing(MISSING_SOURCE_MESSAGE)
    if num_mcq + num_tf < 1:
        raise InputMissing(NO_QUESTIONS_MESSAGE)

    return QuizRequest(
        sourceText=source_text,
        numMCQ=num_mcq,
        numTF=num_tf,
        difficulty=Difficulty(difficulty),
    )


async def resolve_source_text(
    source_text: Optional[str],
    file_content: Optional[bytes],
    filename: Optional[str],
    content_type: Optional[str],
    settings: Settings,
) -> Optional[str]:
    """An uploaded file wins over pasted text."""
    if file_content is not None:
        return await extract_text(file_content, filename, content_type, settings)
    return source_text


async def generate_quiz(request: QuizRequest, client: GeminiQuizClient) -> Quiz:
    prompt, schema = build_prompt(request)
    logger.info(
        f"[GENERATE] Starting: {request.numMCQ} MCQ + {request.numTF} T/F, "
        f"difficulty={request.difficulty.value}, {len(request.sourceText)} chars"
    )
    quiz = await client.generate(prompt, schema)
    logger.info(f"[GENERATE] ✓ {len(quiz.questions)} questions")
    return quiz
