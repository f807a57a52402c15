from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from enum import Enum


class Difficulty(str, Enum):
    easy = "Easy"
    medium = "Medium"
    hard = "Hard"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None


class QuestionType(str, Enum):
    mcq = "MCQ"
    tf = "TF"


# ── Request ──────────────────────────────────────────────────────────────────

class QuizRequest(BaseModel):
    """One user submission: source text plus the requested quiz mix."""
    model_config = ConfigDict(frozen=True)

    sourceText: str = Field(..., description="Educational text to generate the quiz from")
    numMCQ: int = Field(default=5, ge=0, le=20, description="Number of multiple-choice questions")
    numTF: int = Field(default=3, ge=0, le=20, description="Number of true/false questions")
    difficulty: Difficulty = Field(default=Difficulty.medium, description="Desired difficulty level")


# ── Response ─────────────────────────────────────────────────────────────────

class Question(BaseModel):
    """A single quiz item. Options are present only for MCQ."""
    questionText: str
    type: QuestionType
    options: Optional[List[str]] = None
    correctAnswer: str


class Quiz(BaseModel):
    """Full quiz returned to the client, in generator order."""
    questions: List[Question]
