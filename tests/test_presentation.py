from __future__ import annotations

import pytest

from quizcraft.presentation import EMPTY_QUIZ_MESSAGE, QuizView
from quizcraft.schemas.quiz import Quiz


def test_toggle_changes_rendering_not_quiz(sample_quiz: Quiz) -> None:
    before = sample_quiz.model_copy(deep=True)
    view = QuizView(sample_quiz)

    assert "✓ B. Chloroplasts" in view.render()
    assert view.toggle_answers() is False
    hidden = view.render()
    assert "✓" not in hidden
    assert "Correct Answer" not in hidden
    assert sample_quiz == before


def test_cards_number_in_generation_order(sample_quiz: Quiz) -> None:
    cards = list(QuizView(sample_quiz).cards())
    assert [c.index for c in cards] == [1, 2, 3]
    assert [c.type_label for c in cards] == ["Multiple Choice", "True / False", "Multiple Choice"]
    assert cards[1].render().endswith("✓ Correct Answer: True")


def test_copy_text_follows_toggle(sample_quiz: Quiz) -> None:
    view = QuizView(sample_quiz, show_answers=False)
    assert "ANSWER:" not in view.copy_text()
    view.toggle_answers()
    assert view.copy_text().count("ANSWER:") == 3


def test_txt_export_always_has_answers(sample_quiz: Quiz) -> None:
    view = QuizView(sample_quiz, show_answers=False)
    export = view.export("txt")
    assert export.filename == "quiz.txt"
    assert export.media_type == "text/plain"
    assert export.content.count("ANSWER:") == 3


def test_json_export(sample_quiz: Quiz) -> None:
    export = QuizView(sample_quiz).export("json")
    assert export.filename == "quiz.json"
    assert Quiz.model_validate_json(export.content) == sample_quiz


def test_unknown_export_format(sample_quiz: Quiz) -> None:
    with pytest.raises(ValueError) as exc:
        QuizView(sample_quiz).export("docx")
    assert "txt" in str(exc.value)


def test_empty_quiz_message() -> None:
    assert QuizView(Quiz(questions=[])).render() == EMPTY_QUIZ_MESSAGE
