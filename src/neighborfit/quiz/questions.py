"""
Quiz de estilo de vida.

Una pregunta por factor, todas con la misma escala de importancia 1-5.
Las respuestas se convierten en UserPreferences para el motor de matching.
"""

from typing import Mapping, Optional

from pydantic import BaseModel, Field

from neighborfit.config import (
    DEFAULT_IMPORTANCE,
    IMPORTANCE_LABELS,
    LIFESTYLE_FACTORS,
    MAX_IMPORTANCE,
    MIN_IMPORTANCE,
)
from neighborfit.models import ImportanceVector, UserPreferences


class QuizOption(BaseModel):
    """Opción de respuesta."""

    value: int = Field(ge=1, le=5)
    label: str


class QuizQuestion(BaseModel):
    """Pregunta del quiz mapeada a un factor."""

    id: str
    question: str
    description: Optional[str] = None
    options: list[QuizOption]
    preference: str = Field(..., description="Columna <factor>_importance")

    @property
    def factor(self) -> str:
        return self.preference.removesuffix("_importance")


def _question(question_id: str, factor: str, question: str, description: str) -> QuizQuestion:
    return QuizQuestion(
        id=question_id,
        question=question,
        description=description,
        options=[
            QuizOption(value=value, label=label)
            for value, label in IMPORTANCE_LABELS.items()
        ],
        preference=f"{factor}_importance",
    )


# Orden pensado para el flujo del usuario: seguridad, costos, transporte,
# estilo de vida, familia/comunidad, trabajo y estudio.
QUIZ_QUESTIONS = [
    _question(
        "safety", "safety",
        "How important is neighborhood safety to you?",
        "This includes crime rates, street lighting, and general feeling of security.",
    ),
    _question(
        "affordability", "affordability",
        "How important is affordability to you?",
        "This includes rent, property prices, and general cost of living.",
    ),
    _question(
        "connectivity", "connectivity",
        "How important is overall connectivity to you?",
        "This includes road networks, traffic conditions, and ease of commuting.",
    ),
    _question(
        "metro", "metro_access",
        "How important is metro/local train access to you?",
        "This measures proximity to metro stations and local train networks.",
    ),
    _question(
        "food", "food_culture",
        "How important is food culture and dining options?",
        "This includes street food, restaurants, cafes, and local cuisine variety.",
    ),
    _question(
        "nightlife", "nightlife",
        "How important is nightlife and entertainment to you?",
        "This includes pubs, clubs, late-night eateries, and entertainment venues.",
    ),
    _question(
        "family", "family_friendly",
        "How important are family-friendly amenities to you?",
        "This includes schools, parks, playgrounds, and child-friendly facilities.",
    ),
    _question(
        "cultural_diversity", "cultural_diversity",
        "How important is cultural diversity to you?",
        "This includes festivals, cultural events, and community diversity.",
    ),
    _question(
        "green_spaces", "green_spaces",
        "How important are green spaces and parks to you?",
        "This includes parks, gardens, and access to nature within the city.",
    ),
    _question(
        "job_opportunities", "job_opportunities",
        "How important is proximity to job opportunities?",
        "This measures the availability of jobs and business districts nearby.",
    ),
    _question(
        "healthcare", "healthcare",
        "How important is access to healthcare facilities?",
        "This includes hospitals, clinics, and medical services availability.",
    ),
    _question(
        "education", "education",
        "How important is access to educational institutions?",
        "This includes schools, colleges, and educational facilities nearby.",
    ),
    _question(
        "shopping", "shopping",
        "How important is access to shopping and markets?",
        "This includes malls, local markets, and shopping convenience.",
    ),
]


def get_question_by_id(question_id: str) -> Optional[QuizQuestion]:
    """Busca una pregunta por su ID."""
    return next((q for q in QUIZ_QUESTIONS if q.id == question_id), None)


def get_question_by_preference(preference: str) -> Optional[QuizQuestion]:
    """Busca una pregunta por la columna de preferencia que completa."""
    return next((q for q in QUIZ_QUESTIONS if q.preference == preference), None)


def validate_quiz_completeness() -> bool:
    """True si cada factor tiene su pregunta."""
    covered = {q.preference for q in QUIZ_QUESTIONS}
    return all(f"{factor}_importance" in covered for factor in LIFESTYLE_FACTORS)


def get_quiz_length() -> int:
    return len(QUIZ_QUESTIONS)


def get_quiz_progress(current_index: int) -> int:
    """Progreso en porcentaje para la pregunta actual (índice base 0)."""
    return round((current_index + 1) / len(QUIZ_QUESTIONS) * 100)


def build_preferences(user_id: str, answers: Mapping[str, int]) -> UserPreferences:
    """
    Convierte las respuestas del quiz en UserPreferences.

    Args:
        user_id: UUID del usuario
        answers: Respuestas por columna (ej: {"safety_importance": 5})

    Returns:
        UserPreferences; los factores sin responder quedan en 3

    Raises:
        ValueError: Si alguna respuesta está fuera de 1-5 o no corresponde
            a ninguna pregunta
    """
    unknown = set(answers) - {q.preference for q in QUIZ_QUESTIONS}
    if unknown:
        raise ValueError(f"Respuestas sin pregunta asociada: {sorted(unknown)}")

    importance = {}
    for question in QUIZ_QUESTIONS:
        value = answers.get(question.preference)
        if value is None:
            value = DEFAULT_IMPORTANCE
        if not MIN_IMPORTANCE <= value <= MAX_IMPORTANCE:
            raise ValueError(
                f"Respuesta inválida para {question.preference}: {value} "
                f"(esperado {MIN_IMPORTANCE}-{MAX_IMPORTANCE})"
            )
        importance[question.factor] = value

    return UserPreferences(user_id=user_id, importance=ImportanceVector(**importance))
