from typing import Any, Dict, Tuple

from quizcraft.schemas.quiz import QuizRequest


# Gemini's OpenAPI-subset schema. Identical for every request.
QUIZ_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "questions": {
            "type": "ARRAY",
            "description": "A list of quiz questions.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "questionText": {"type": "STRING"},
                    "type": {"type": "STRING", "format": "enum", "enum": ["MCQ", "TF"]},
                    "options": {"type": "ARRAY", "items": {"type": "STRING"}},
                    "correctAnswer": {"type": "STRING"},
                },
                "required": ["questionText", "type", "correctAnswer"],
            },
        }
    },
    "required": ["questions"],
}


def build_prompt(request: QuizRequest) -> Tuple[str, Dict[str, Any]]:
    """Return the instruction text for ``request`` and the fixed output schema."""
    prompt = (
        "Based on the following text, please generate a quiz.\n"
        f"The quiz should contain exactly {request.numMCQ} multiple-choice questions "
        f"and {request.numTF} true/false questions.\n"
        f"The difficulty of the questions should be: {request.difficulty.value}.\n"
        "For multiple-choice questions, provide exactly 4 distinct options, with exactly one "
        "being correct. The 'correctAnswer' must be an exact match to one of the options.\n"
        "For true/false questions, the 'correctAnswer' must be exactly \"True\" or \"False\", "
        "and the 'options' field must be omitted.\n"
        "\n"
        "Source Text:\n"
        "---\n"
        f"{request.sourceText}\n"
        "---\n"
    )
    return prompt, QUIZ_RESPONSE_SCHEMA
