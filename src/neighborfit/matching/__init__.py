"""
Motor de matching.

Combina el promedio ponderado de factores de estilo de vida con una curva
de presentación (piso, techo, boost por ranking y jitter).
"""

from neighborfit.matching.scoring import ScoringConfig, compute_matches
from neighborfit.matching.engine import MatchingEngine, MatchRun

__all__ = [
    "ScoringConfig",
    "compute_matches",
    "MatchingEngine",
    "MatchRun",
]
