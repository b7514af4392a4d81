"""
Repositorios para operaciones CRUD en Supabase.

Cada repositorio maneja una tabla/entidad específica.
"""

from datetime import datetime
from typing import Optional

import structlog
from postgrest.exceptions import APIError

from neighborfit.database.supabase_client import get_supabase_client, SupabaseClient
from neighborfit.models import MatchResult, Neighborhood, UserPreferences

logger = structlog.get_logger()


class ResultPersistenceError(Exception):
    """No se pudieron guardar los resultados de matching."""

    def __init__(self, user_id: str, message: str = "Could not save results"):
        super().__init__(f"{message} (user_id={user_id})")
        self.user_id = user_id


class BaseRepository:
    """Clase base para repositorios."""

    def __init__(self, client: Optional[SupabaseClient] = None):
        self._client = client or get_supabase_client()

    @property
    def client(self) -> SupabaseClient:
        return self._client


class NeighborhoodRepository(BaseRepository):
    """Repositorio para el catálogo de barrios."""

    TABLE = "neighborhoods"

    def list_all(self) -> list[Neighborhood]:
        """Obtiene todo el catálogo ordenado por nombre."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .order("name")
            .execute()
        )
        neighborhoods = [Neighborhood.from_db_row(row) for row in response.data]
        logger.debug("Barrios obtenidos", total=len(neighborhoods))
        return neighborhoods

    def get_by_id(self, neighborhood_id: int) -> Optional[Neighborhood]:
        """Obtiene un barrio por su ID."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("id", neighborhood_id)
            .limit(1)
            .execute()
        )
        return Neighborhood.from_db_row(response.data[0]) if response.data else None


class PreferencesRepository(BaseRepository):
    """Repositorio para las respuestas del quiz (una fila por usuario)."""

    TABLE = "user_preferences"

    def get(self, user_id: str) -> Optional[UserPreferences]:
        """Obtiene las preferencias de un usuario, o None si no hizo el quiz."""
        response = (
            self.client.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        return UserPreferences.from_db_row(response.data[0]) if response.data else None

    def put(self, preferences: UserPreferences) -> UserPreferences:
        """Inserta o actualiza las preferencias basado en user_id."""
        data = preferences.to_db_dict()
        data["updated_at"] = datetime.utcnow().isoformat()
        response = (
            self.client.table(self.TABLE)
            .upsert(data, on_conflict="user_id")
            .execute()
        )
        logger.info("Preferencias guardadas", user_id=preferences.user_id)
        if not response.data:
            return preferences
        return UserPreferences.from_db_row(response.data[0])

    def list_user_ids(self) -> list[str]:
        """IDs de todos los usuarios que completaron el quiz."""
        response = self.client.table(self.TABLE).select("user_id").execute()
        return [row["user_id"] for row in response.data]


class ResultRepository(BaseRepository):
    """Repositorio para los resultados de matching."""

    TABLE = "user_results"

    def delete_for_user(self, user_id: str) -> None:
        """Borra todos los resultados previos de un usuario."""
        self.client.table(self.TABLE).delete().eq("user_id", user_id).execute()

    def replace_all(self, user_id: str, results: list[MatchResult]) -> list[dict]:
        """
        Reemplaza los resultados de un usuario por los de una nueva corrida.

        Borra los previos y hace upsert por (user_id, neighborhood_id). Si el
        upsert falla se intenta un insert plano antes de darse por vencido.

        Returns:
            Registros guardados

        Raises:
            ResultPersistenceError: Si fallan tanto el upsert como el insert
        """
        self.delete_for_user(user_id)

        if not results:
            return []

        rows = [result.to_db_dict() for result in results]

        try:
            response = (
                self.client.table(self.TABLE)
                .upsert(rows, on_conflict="user_id,neighborhood_id")
                .execute()
            )
        except APIError as e:
            logger.warning(
                "Upsert de resultados falló, reintentando con insert",
                user_id=user_id,
                error=e.message,
            )
            try:
                response = self.client.table(self.TABLE).insert(rows).execute()
            except APIError as fallback_error:
                logger.error(
                    "Error guardando resultados",
                    user_id=user_id,
                    error=fallback_error.message,
                )
                raise ResultPersistenceError(user_id) from fallback_error

        logger.info("Resultados guardados", user_id=user_id, total=len(rows))
        return response.data

    def get_user_matches(self, user_id: str) -> list[dict]:
        """Resultados de un usuario con los datos del barrio, mejor primero."""
        response = (
            self.client.table(self.TABLE)
            .select("*, neighborhood:neighborhoods(*)")
            .eq("user_id", user_id)
            .order("match_score", desc=True)
            .execute()
        )
        return response.data

    def get_recent(self, limit: int = 50) -> list[dict]:
        """Obtiene los resultados más recientes de todos los usuarios."""
        response = (
            self.client.table(self.TABLE)
            .select("user_id, neighborhood_id, match_score, created_at")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return response.data
