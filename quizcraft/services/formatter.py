import json
from typing import Dict, List, NamedTuple

from quizcraft.schemas.quiz import Question, QuestionType, Quiz


class ExportFormat(NamedTuple):
    filename: str
    media_type: str


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "txt": ExportFormat("quiz.txt", "text/plain"),
    "json": ExportFormat("quiz.json", "application/json"),
}

_TITLE = "AI Generated Quiz"
_SECTIONS = (
    (QuestionType.mcq, "Multiple Choice Questions"),
    (QuestionType.tf, "True/False Questions"),
)


def option_label(index: int) -> str:
    return chr(ord("A") + index)


def _underline(title: str, char: str) -> str:
    return f"{title}\n{char * len(title)}\n\n"


def format_quiz(quiz: Quiz, include_answers: bool = True) -> str:
    """
    Render the quiz as plain text: all MCQ first, then all TF.
    Numbering runs across both groups in rendered order, not generation order.
    """
    parts: List[str] = [_underline(_TITLE, "=")]
    counter = 1

    for qtype, heading in _SECTIONS:
        group = [q for q in quiz.questions if q.type is qtype]
        if not group:
            continue

        parts.append(_underline(heading, "-"))
        for question in group:
            parts.append(_format_question(counter, question, include_answers))
            counter += 1

    return "".join(parts)


def _format_question(number: int, question: Question, include_answers: bool) -> str:
    lines = [f"Q{number}: {question.questionText}\n"]
    if question.type is QuestionType.mcq:
        for i, option in enumerate(question.options or []):
            lines.append(f"  {option_label(i)}. {option}\n")
    if include_answers:
        lines.append(f"\nANSWER: {question.correctAnswer}\n")
    lines.append("\n")
    return "".join(lines)


def serialize_quiz(quiz: Quiz) -> str:
    """Canonical JSON for quiz.json; field order follows the model."""
    return json.dumps(
        quiz.model_dump(mode="json", exclude_none=True),
        indent=2,
        ensure_ascii=False,
    )
