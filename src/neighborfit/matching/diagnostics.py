"""
Verificación de la distribución de scores guardados.

Chequea que los resultados persistidos respeten el rango visible y que el
promedio quede en una zona "saludable" para el usuario.
"""

from dataclasses import dataclass
from typing import Iterable

from neighborfit.matching.scoring import DEFAULT_CONFIG, ScoringConfig

HEALTHY_AVERAGE_RANGE = (60.0, 80.0)


@dataclass
class ScoreDistribution:
    """Resumen de una muestra de match_score."""

    total: int
    min_score: float
    max_score: float
    average: float
    in_range: int
    below_range: int
    above_range: int

    @property
    def in_range_ratio(self) -> float:
        return self.in_range / self.total if self.total else 0.0

    @property
    def all_in_range(self) -> bool:
        return self.total > 0 and self.in_range == self.total

    @property
    def healthy_average(self) -> bool:
        low, high = HEALTHY_AVERAGE_RANGE
        return self.total > 0 and low <= self.average <= high


def analyze_scores(
    scores: Iterable[float],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ScoreDistribution:
    """
    Analiza una muestra de scores contra el rango [base, base + variable].

    Una muestra vacía devuelve un resumen con total=0.
    """
    values = list(scores)
    if not values:
        return ScoreDistribution(0, 0.0, 0.0, 0.0, 0, 0, 0)

    low, high = config.base_score, config.max_score
    below = sum(1 for s in values if s < low)
    above = sum(1 for s in values if s > high)

    return ScoreDistribution(
        total=len(values),
        min_score=min(values),
        max_score=max(values),
        average=sum(values) / len(values),
        in_range=len(values) - below - above,
        below_range=below,
        above_range=above,
    )
