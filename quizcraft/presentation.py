"""
QuizCraft — Presentation Layer
===============================
What the result screen does with a Quiz: question cards, an answer
visibility toggle, copy-to-clipboard text, and downloadable exports.
The toggle only changes rendering; the Quiz itself is never modified.
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional

from quizcraft.schemas.quiz import Question, QuestionType, Quiz
from quizcraft.services.formatter import EXPORT_FORMATS, format_quiz, option_label, serialize_quiz

EMPTY_QUIZ_MESSAGE = "No questions were generated. Try adjusting your source text or prompt."

TYPE_LABELS = {
    QuestionType.mcq: "Multiple Choice",
    QuestionType.tf: "True / False",
}


class ExportFile(NamedTuple):
    filename: str
    media_type: str
    content: str


@dataclass(frozen=True)
class QuestionCard:
    """One question as shown on screen (numbered in generation order)."""
    index: int
    question: Question
    show_answer: bool

    @property
    def type_label(self) -> str:
        return TYPE_LABELS[self.question.type]

    def option_lines(self) -> List[str]:
        lines = []
        for i, option in enumerate(self.question.options or []):
            marker = "✓ " if self.show_answer and option == self.question.correctAnswer else "  "
            lines.append(f"{marker}{option_label(i)}. {option}")
        return lines

    def render(self) -> str:
        lines = [f"{self.index}. {self.question.questionText}  [{self.type_label}]"]
        if self.question.type is QuestionType.mcq:
            lines.extend(self.option_lines())
        elif self.show_answer:
            lines.append(f"✓ Correct Answer: {self.question.correctAnswer}")
        return "\n".join(lines)


class QuizView:
    """Holds the current quiz and the answer-visibility flag."""

    def __init__(self, quiz: Quiz, show_answers: bool = True):
        self.quiz = quiz
        self.show_answers = show_answers

    def toggle_answers(self) -> bool:
        self.show_answers = not self.show_answers
        return self.show_answers

    def cards(self) -> Iterator[QuestionCard]:
        for i, question in enumerate(self.quiz.questions, start=1):
            yield QuestionCard(index=i, question=question, show_answer=self.show_answers)

    def render(self) -> str:
        if not self.quiz.questions:
            return EMPTY_QUIZ_MESSAGE
        return "\n\n".join(card.render() for card in self.cards())

    def copy_text(self) -> str:
        """Clipboard text follows the on-screen toggle."""
        return format_quiz(self.quiz, include_answers=self.show_answers)

    def export(self, fmt: str, include_answers: Optional[bool] = None) -> ExportFile:
        """
        Build a downloadable file. The TXT download includes answers
        regardless of the toggle unless ``include_answers`` says otherwise.
        """
        try:
            spec = EXPORT_FORMATS[fmt]
        except KeyError:
            raise ValueError(
                f"Unknown export format '{fmt}'. Use one of: {', '.join(EXPORT_FORMATS)}"
            ) from None

        if fmt == "json":
            content = serialize_quiz(self.quiz)
        else:
            content = format_quiz(self.quiz, include_answers=True if include_answers is None else include_answers)
        return ExportFile(spec.filename, spec.media_type, content)
