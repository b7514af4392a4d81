"""
Quiz de preferencias del usuario.
"""

from neighborfit.quiz.questions import (
    QUIZ_QUESTIONS,
    QuizQuestion,
    build_preferences,
    get_question_by_id,
    get_question_by_preference,
    get_quiz_length,
    get_quiz_progress,
    validate_quiz_completeness,
)

__all__ = [
    "QUIZ_QUESTIONS",
    "QuizQuestion",
    "build_preferences",
    "get_question_by_id",
    "get_question_by_preference",
    "get_quiz_length",
    "get_quiz_progress",
    "validate_quiz_completeness",
]
