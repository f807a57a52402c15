"""
QuizCraft — Quiz Generator API
===============================
FastAPI entry point.
  • Application factory: settings and the Gemini client are built explicitly
  • Missing GOOGLE_API_KEY is fatal at startup
  • Global exception handler — never crashes, always returns JSON
  • POST /api/generate — text or .txt/.pdf upload → MCQ + True/False quiz
  • POST /api/export/{fmt} — quiz.txt / quiz.json downloads

Run with:  uvicorn quizcraft.main:create_app --factory
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizcraft.api.routes import router
from quizcraft.core.config import Settings, load_settings
from quizcraft.schemas.common import ErrorResponse, HealthResponse
from quizcraft.services.gemini_service import GeminiQuizClient

SERVICE_NAME = "QuizCraft Quiz Generator"
VERSION = "1.0.0"

LOG_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(
    settings: Optional[Settings] = None,
    quiz_client: Optional[GeminiQuizClient] = None,
) -> FastAPI:
    """Build the API. Raises ConfigurationError when no API key is configured."""
    settings = settings or load_settings()
    configure_logging(settings.LOG_LEVEL)
    quiz_client = quiz_client or GeminiQuizClient.from_settings(settings)

    app = FastAPI(
        title=SERVICE_NAME,
        description=(
            "Paste text or upload a .txt / .pdf file → receive a generated quiz "
            "of multiple-choice and true/false questions."
        ),
        version=VERSION,
    )
    app.state.settings = settings
    app.state.quiz_client = quiz_client

    # ── Global Exception Handler ─────────────────────────────────────────────
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all: every unhandled exception returns a clean JSON envelope."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        body = ErrorResponse(error="An internal server error occurred.")
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Health Check ─────────────────────────────────────────────────────────
    @app.get("/", response_model=HealthResponse, tags=["System"])
    async def health_check():
        return HealthResponse(service=SERVICE_NAME, version=VERSION)

    app.include_router(router, tags=["Quiz"])

    logger.info(f"[INIT] {SERVICE_NAME} v{VERSION} ready")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("quizcraft.main:create_app", factory=True, host="0.0.0.0", port=load_settings().PORT)
