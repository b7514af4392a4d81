"""
Cálculo del match usuario-barrio.

Pipeline (sin I/O, sin estado compartido):
- Normalización: puntajes 0-10 y pesos 1-5 a escala 0-1
- Agregación: promedio ponderado por la importancia del usuario
- Porcentaje: transformación afín a [base, base + variable] (40-95 por defecto)
- Ranking: orden descendente + boost al top y jitter acotado

El porcentaje es una decisión de presentación: el piso evita mostrar un
barrio como "reprobado" y el techo deja margen para el boost sin pasar
del 100%. No es una probabilidad.
"""

import random
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from neighborfit.config import MAX_ATTRIBUTE_SCORE, MAX_IMPORTANCE
from neighborfit.models import (
    AttributeVector,
    ImportanceVector,
    MatchResult,
    Neighborhood,
)


@dataclass(frozen=True)
class ScoringConfig:
    """Constantes de la curva de scoring."""

    base_score: float = 40.0
    variable_score: float = 55.0
    boost_ranks: int = 10
    boost_step: float = 2.0
    jitter_amplitude: float = 1.0
    decimals: int = 1

    @property
    def max_score(self) -> float:
        return self.base_score + self.variable_score

    @classmethod
    def from_settings(cls, settings) -> "ScoringConfig":
        """Construye la configuración desde Settings."""
        return cls(
            base_score=settings.score_base,
            variable_score=settings.score_variable,
            boost_ranks=settings.score_boost_ranks,
            boost_step=settings.score_boost_step,
            jitter_amplitude=settings.score_jitter_amplitude,
            decimals=settings.score_decimals,
        )

    def deterministic(self) -> "ScoringConfig":
        """Misma curva sin jitter."""
        return replace(self, jitter_amplitude=0.0)


DEFAULT_CONFIG = ScoringConfig()


def normalize_attribute(value: float) -> float:
    """Puntaje de barrio (0-10) a [0, 1]."""
    return max(0.0, min(value / MAX_ATTRIBUTE_SCORE, 1.0))


def normalize_importance(value: int) -> float:
    """Peso del usuario (1-5) a [0.2, 1]."""
    return value / MAX_IMPORTANCE


def weighted_match(scores: AttributeVector, importance: ImportanceVector) -> float:
    """
    Promedio ponderado de los puntajes normalizados.

    Los factores que más le importan al usuario pesan más. El resultado
    es invariante a escalar todos los pesos por igual.

    Returns:
        Match normalizado entre 0.0 y 1.0
    """
    weights = [normalize_importance(w) for w in importance.as_list()]
    values = [normalize_attribute(s) for s in scores.as_list()]

    total_weight = sum(weights)
    if total_weight == 0:
        return 0.0

    total_weighted_score = sum(s * w for s, w in zip(values, weights))
    return total_weighted_score / total_weight


def to_percentage(normalized: float, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """Lleva el match normalizado al rango visible [base, base + variable]."""
    return config.base_score + normalized * config.variable_score


def rank_boost(rank: int, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """Boost por posición: 20, 18, ..., 2 para el top 10; 0 para el resto."""
    if rank < config.boost_ranks:
        return (config.boost_ranks - rank) * config.boost_step
    return 0.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def enhance_ranked(
    results: list[MatchResult],
    config: ScoringConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> list[MatchResult]:
    """
    Aplica boost por ranking y jitter a resultados ya ordenados.

    Args:
        results: MatchResult ordenados por raw_score descendente
        config: Curva de scoring
        rng: Fuente aleatoria para el jitter (requerida si amplitude > 0)

    Returns:
        Nuevos MatchResult con match_score final y rank asignado
    """
    if config.jitter_amplitude > 0 and rng is None:
        rng = random.Random()

    enhanced = []
    for rank, result in enumerate(results):
        score = result.raw_score

        boost = rank_boost(rank, config)
        if boost:
            score = min(score + boost, config.max_score)

        if config.jitter_amplitude > 0:
            score += rng.uniform(-config.jitter_amplitude, config.jitter_amplitude)

        score = _clamp(score, config.base_score, config.max_score)

        enhanced.append(
            replace(result, match_score=round(score, config.decimals), rank=rank)
        )

    return enhanced


def compute_matches(
    user_id: str,
    importance: ImportanceVector,
    neighborhoods: Iterable[Neighborhood],
    config: Optional[ScoringConfig] = None,
    rng: Optional[random.Random] = None,
) -> list[MatchResult]:
    """
    Calcula el ranking completo de barrios para un usuario.

    Args:
        user_id: UUID del usuario
        importance: Pesos del usuario
        neighborhoods: Catálogo de barrios
        config: Curva de scoring (default: 40/55, top 10, +/-1)
        rng: Fuente aleatoria inyectable para el jitter

    Returns:
        Lista de MatchResult ordenada por raw_score descendente.
        Catálogo vacío devuelve lista vacía.
    """
    config = config or DEFAULT_CONFIG

    results = []
    for neighborhood in neighborhoods:
        raw = to_percentage(weighted_match(neighborhood.scores, importance), config)
        raw = _clamp(raw, config.base_score, config.max_score)
        results.append(
            MatchResult(
                user_id=user_id,
                neighborhood_id=neighborhood.id,
                raw_score=raw,
                match_score=raw,
            )
        )

    # sort estable: empates conservan el orden del catálogo
    results.sort(key=lambda r: r.raw_score, reverse=True)

    return enhance_ranked(results, config, rng)
