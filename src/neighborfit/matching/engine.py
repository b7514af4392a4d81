"""
Motor de matching entre usuarios y barrios.

Orquesta el cálculo puro (scoring) con los repositorios de Supabase:
- Lee las preferencias del usuario y el catálogo
- Calcula el ranking completo
- Reemplaza los resultados previos del usuario
"""

import random
import traceback
from dataclasses import dataclass, field
from typing import Iterable, Optional

import structlog

from neighborfit.config import get_settings
from neighborfit.database import (
    NeighborhoodRepository,
    PreferencesRepository,
    ResultRepository,
)
from neighborfit.matching.scoring import ScoringConfig, compute_matches
from neighborfit.models import ImportanceVector, MatchResult, Neighborhood, UserPreferences

logger = structlog.get_logger()

STATUS_OK = "ok"
STATUS_MISSING_PREFERENCES = "missing_preferences"
STATUS_EMPTY_CATALOG = "empty_catalog"

_STATUS_MESSAGES = {
    STATUS_OK: "Matches updated",
    STATUS_MISSING_PREFERENCES: "Take the quiz first to get personalized neighborhood recommendations.",
    STATUS_EMPTY_CATALOG: "No matches available.",
}


@dataclass
class MatchRun:
    """Resultado de una corrida de matching para un usuario."""

    user_id: str
    status: str
    results: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def message(self) -> str:
        """Mensaje para mostrar al usuario."""
        return _STATUS_MESSAGES[self.status]


class MatchingEngine:
    """
    Motor de matching por promedio ponderado.

    Flujo por usuario:
    1. Obtener preferencias (sin quiz -> no hay matches)
    2. Obtener catálogo (vacío -> no hay matches)
    3. Calcular scores, ordenar, aplicar boost + jitter
    4. Reemplazar resultados previos
    """

    def __init__(
        self,
        preferences_repo: Optional[PreferencesRepository] = None,
        neighborhood_repo: Optional[NeighborhoodRepository] = None,
        result_repo: Optional[ResultRepository] = None,
        config: Optional[ScoringConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        if config is None or rng is None:
            settings = get_settings()
            config = config or ScoringConfig.from_settings(settings)
            rng = rng or random.Random(settings.scoring_seed)

        self.config = config
        self.rng = rng
        self.preferences_repo = preferences_repo or PreferencesRepository()
        self.neighborhood_repo = neighborhood_repo or NeighborhoodRepository()
        self.result_repo = result_repo or ResultRepository()

    def compute_matches(
        self,
        user_id: str,
        importance: ImportanceVector,
        neighborhoods: Iterable[Neighborhood],
    ) -> list[MatchResult]:
        """Calcula el ranking sin tocar la base de datos."""
        return compute_matches(
            user_id,
            importance,
            neighborhoods,
            config=self.config,
            rng=self.rng,
        )

    def calculate_and_save_matches(self, user_id: str) -> MatchRun:
        """
        Recalcula y guarda los matches de un usuario.

        Args:
            user_id: UUID del usuario

        Returns:
            MatchRun con el estado y los registros guardados

        Raises:
            ResultPersistenceError: Si no se pudieron guardar los resultados
        """
        preferences = self.preferences_repo.get(user_id)
        if not preferences:
            logger.warning("Usuario sin preferencias", user_id=user_id)
            return MatchRun(user_id=user_id, status=STATUS_MISSING_PREFERENCES)

        neighborhoods = self.neighborhood_repo.list_all()
        if not neighborhoods:
            logger.warning("Catálogo de barrios vacío", user_id=user_id)
            return MatchRun(user_id=user_id, status=STATUS_EMPTY_CATALOG)

        matches = self.compute_matches(user_id, preferences.importance, neighborhoods)
        saved = self.result_repo.replace_all(user_id, matches)

        scores = [m.match_score for m in matches]
        logger.info(
            "Matches calculados",
            user_id=user_id,
            total=len(matches),
            min_score=min(scores),
            max_score=max(scores),
        )

        return MatchRun(user_id=user_id, status=STATUS_OK, results=saved)

    def save_preferences_and_match(self, preferences: UserPreferences) -> MatchRun:
        """Guarda las respuestas del quiz y recalcula los matches."""
        self.preferences_repo.put(preferences)
        return self.calculate_and_save_matches(preferences.user_id)

    def get_user_matches(self, user_id: str) -> list[dict]:
        """Matches guardados de un usuario con los datos del barrio."""
        return self.result_repo.get_user_matches(user_id)

    def recalculate_all(self) -> dict:
        """
        Recalcula los matches de todos los usuarios con preferencias.

        Un error en un usuario no corta el ciclo.

        Returns:
            Estadísticas del procesamiento
        """
        stats = {
            "users_processed": 0,
            "matches_saved": 0,
            "skipped": 0,
            "errors": 0,
        }

        user_ids = self.preferences_repo.list_user_ids()
        if not user_ids:
            logger.info("No hay usuarios con preferencias")
            return stats

        logger.info("Recalculando matches", users=len(user_ids))

        for user_id in user_ids:
            try:
                run = self.calculate_and_save_matches(user_id)
            except Exception as e:
                logger.error(
                    "Error recalculando usuario",
                    user_id=user_id,
                    error=str(e),
                    traceback=traceback.format_exc(),
                )
                stats["errors"] += 1
                continue

            stats["users_processed"] += 1
            if run.ok:
                stats["matches_saved"] += len(run.results)
            else:
                stats["skipped"] += 1

        logger.info("Recálculo completado", **stats)
        return stats
