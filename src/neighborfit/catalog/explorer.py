"""
Exploración del catálogo de barrios.

Búsqueda, filtros por ciudad/estado y ordenamiento para listar barrios
sin necesidad de haber hecho el quiz.
"""

from typing import Iterable, Optional

from neighborfit.config import MAX_ATTRIBUTE_SCORE
from neighborfit.models import Neighborhood

ALL = "all"

# Factores que la mayoría de los usuarios prioriza al elegir barrio
OVERALL_FACTORS = [
    "safety",
    "job_opportunities",
    "affordability",
    "connectivity",
    "food_culture",
]

SORT_OPTIONS = ["name", "city", "safety", "affordability", "job_opportunities", "overall"]


def display_rating(score: float, max_score: float = MAX_ATTRIBUTE_SCORE) -> float:
    """Convierte un puntaje 0-10 a la escala de estrellas 1-5."""
    if score <= 0:
        return 1.0
    if score >= max_score:
        return 5.0
    return round(1 + (score / max_score) * 4, 1)


def overall_rating(neighborhood: Neighborhood) -> float:
    """Rating general (1-5) como promedio de los factores principales."""
    ratings = [
        display_rating(getattr(neighborhood.scores, factor))
        for factor in OVERALL_FACTORS
    ]
    return sum(ratings) / len(ratings)


def list_cities(neighborhoods: Iterable[Neighborhood]) -> list[str]:
    return sorted({n.city for n in neighborhoods})


def list_states(neighborhoods: Iterable[Neighborhood]) -> list[str]:
    return sorted({n.state for n in neighborhoods})


def _sort_key(sort_by: str):
    if sort_by == "city":
        return lambda n: n.city.lower(), False
    if sort_by in ("safety", "affordability", "job_opportunities"):
        return lambda n: getattr(n.scores, sort_by), True
    if sort_by == "overall":
        return overall_rating, True
    return lambda n: n.name.lower(), False


def filter_neighborhoods(
    neighborhoods: Iterable[Neighborhood],
    search: str = "",
    city: Optional[str] = ALL,
    state: Optional[str] = ALL,
    sort_by: str = "name",
) -> list[Neighborhood]:
    """
    Filtra y ordena el catálogo.

    Args:
        neighborhoods: Catálogo completo
        search: Texto libre, se busca en nombre, ciudad y estado
        city: Ciudad exacta ("all" o None = todas)
        state: Estado exacto ("all" o None = todos)
        sort_by: Uno de SORT_OPTIONS; un valor desconocido ordena por nombre

    Returns:
        Nueva lista filtrada y ordenada
    """
    term = (search or "").strip().lower()

    filtered = []
    for n in neighborhoods:
        if term and not any(term in text.lower() for text in (n.name, n.city, n.state)):
            continue
        if city not in (None, ALL) and n.city != city:
            continue
        if state not in (None, ALL) and n.state != state:
            continue
        filtered.append(n)

    key, descending = _sort_key(sort_by)
    filtered.sort(key=key, reverse=descending)
    return filtered
