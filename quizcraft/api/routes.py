import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile
from fastapi.responses import JSONResponse, Response

from quizcraft.core.config import Settings
from quizcraft.errors import (
    GenerationFailed,
    InputMissing,
    MalformedResponse,
    UnreadableFile,
    UnsupportedFileType,
)
from quizcraft.presentation import QuizView
from quizcraft.schemas.common import ErrorResponse
from quizcraft.schemas.quiz import Quiz
from quizcraft.services.gemini_service import GeminiQuizClient
from quizcraft.services.quiz_service import (
    build_quiz_request,
    generate_quiz,
    resolve_source_text,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

FILE_ERROR_MESSAGE = "Failed to process the uploaded file."
GENERATION_ERROR_MESSAGE = "Failed to generate quiz. The model may have returned an invalid format."


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_quiz_client(request: Request) -> GeminiQuizClient:
    return request.app.state.quiz_client


def _error(status_code: int, message: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=message, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. GENERATE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post(
    "/generate",
    response_model=Quiz,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_quiz(
    sourceFile: Optional[UploadFile] = File(None),
    sourceText: Optional[str] = Form(None),
    numMCQ: int = Form(5, ge=0, le=20),
    numTF: int = Form(3, ge=0, le=20),
    difficulty: str = Form("Medium"),
    settings: Settings = Depends(get_settings),
    client: GeminiQuizClient = Depends(get_quiz_client),
):
    """Generate a quiz from pasted text or an uploaded .txt / .pdf file."""
    # ── 1. Source text (file wins over pasted text) ──────────────────────────
    try:
        content = await sourceFile.read() if sourceFile is not None else None
        text = await resolve_source_text(
            sourceText,
            content,
            sourceFile.filename if sourceFile is not None else None,
            sourceFile.content_type if sourceFile is not None else None,
            settings,
        )
    except UnsupportedFileType as e:
        return _error(400, str(e))
    except UnreadableFile as e:
        logger.error(f"Error processing file: {e}")
        return _error(500, FILE_ERROR_MESSAGE)

    # ── 2. Validate the request ──────────────────────────────────────────────
    try:
        quiz_request = build_quiz_request(text, numMCQ, numTF, difficulty)
    except InputMissing as e:
        return _error(400, str(e))
    except ValueError:
        return _error(400, f"Unknown difficulty '{difficulty}'. Use Easy, Medium or Hard.")

    # ── 3. Generate ──────────────────────────────────────────────────────────
    try:
        return await generate_quiz(quiz_request, client)
    except GenerationFailed as e:
        logger.error(f"Error generating quiz with Gemini: {e}")
        return _error(500, GENERATION_ERROR_MESSAGE, detail=e.provider_message)
    except MalformedResponse as e:
        logger.error(f"Gemini returned an unusable quiz: {e}")
        return _error(500, GENERATION_ERROR_MESSAGE)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. EXPORT
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@router.post("/export/{fmt}", responses={404: {"model": ErrorResponse}})
async def export_quiz(
    fmt: str,
    quiz: Quiz,
    includeAnswers: Optional[bool] = Query(None),
):
    """Download the quiz as quiz.txt or quiz.json."""
    try:
        export = QuizView(quiz).export(fmt, include_answers=includeAnswers)
    except ValueError as e:
        return _error(404, str(e))

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )

