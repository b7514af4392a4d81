"""
Modelo de Preferencias del Usuario

Define la importancia (1 a 5) que el usuario asigna a cada uno de los
13 factores de estilo de vida, tal como sale del quiz.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from neighborfit.config import LIFESTYLE_FACTORS


class ImportanceVector(BaseModel):
    """
    Pesos declarados por el usuario.

    1 = Not important ... 5 = Extremely important.
    """

    model_config = ConfigDict(frozen=True)

    safety: int = Field(ge=1, le=5)
    affordability: int = Field(ge=1, le=5)
    connectivity: int = Field(ge=1, le=5)
    metro_access: int = Field(ge=1, le=5)
    food_culture: int = Field(ge=1, le=5)
    nightlife: int = Field(ge=1, le=5)
    family_friendly: int = Field(ge=1, le=5)
    cultural_diversity: int = Field(ge=1, le=5)
    green_spaces: int = Field(ge=1, le=5)
    job_opportunities: int = Field(ge=1, le=5)
    healthcare: int = Field(ge=1, le=5)
    education: int = Field(ge=1, le=5)
    shopping: int = Field(ge=1, le=5)

    def as_list(self) -> list[int]:
        """Valores en el orden canónico de LIFESTYLE_FACTORS."""
        return [getattr(self, factor) for factor in LIFESTYLE_FACTORS]

    @classmethod
    def uniform(cls, value: int) -> "ImportanceVector":
        """Vector con el mismo peso en todos los factores."""
        return cls(**{factor: value for factor in LIFESTYLE_FACTORS})


class UserPreferences(BaseModel):
    """
    Preferencias guardadas de un usuario.

    Se mapea a la tabla 'user_preferences' (una fila por usuario) con
    columnas planas <factor>_importance.
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(None, description="ID generado por Supabase")
    user_id: str = Field(..., description="UUID del usuario en Supabase Auth")
    importance: ImportanceVector

    created_at: Optional[str] = None
    updated_at: str = Field(
        default_factory=lambda: datetime.utcnow().isoformat(),
        description="Última actualización",
    )

    @classmethod
    def from_db_row(cls, row: dict) -> "UserPreferences":
        """Construye el modelo desde una fila de 'user_preferences'."""
        importance = ImportanceVector(
            **{factor: row.get(f"{factor}_importance") for factor in LIFESTYLE_FACTORS}
        )
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            importance=importance,
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at") or datetime.utcnow().isoformat(),
        )

    def to_db_dict(self) -> dict:
        """
        Convierte a diccionario plano para inserción en Supabase.

        updated_at lo asigna el repositorio al guardar.
        """
        data = {"user_id": self.user_id}
        for factor in LIFESTYLE_FACTORS:
            data[f"{factor}_importance"] = getattr(self.importance, factor)
        return data
