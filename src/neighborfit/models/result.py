"""
Resultado de matching

Un registro por par (usuario, barrio). Cada corrida reemplaza por
completo los resultados anteriores del usuario.
"""

from dataclasses import dataclass


@dataclass
class MatchResult:
    """Resultado de matching para un barrio."""

    user_id: str
    neighborhood_id: int
    raw_score: float  # Porcentaje antes del boost/jitter, 40.0 a 95.0
    match_score: float  # Score final mostrado al usuario
    rank: int = 0  # Posición (0 = mejor) según raw_score

    def to_db_dict(self) -> dict:
        """Fila para la tabla 'user_results'."""
        return {
            "user_id": self.user_id,
            "neighborhood_id": self.neighborhood_id,
            "match_score": self.match_score,
        }
