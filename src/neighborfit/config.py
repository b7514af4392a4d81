"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py -> neighborfit/ -> src/ -> raíz del proyecto (donde está el .env)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Supabase
    supabase_url: str = Field(..., description="URL del proyecto Supabase")
    supabase_key: str = Field(..., description="Anon key de Supabase")
    supabase_service_key: Optional[str] = Field(
        None, description="Service role key para operaciones admin"
    )

    # Scoring (curva de presentación del match)
    score_base: float = Field(40.0, ge=0, le=100, description="Piso del match (%)")
    score_variable: float = Field(
        55.0, ge=0, le=100, description="Rango variable sobre el piso (%)"
    )
    score_boost_ranks: int = Field(
        10, ge=0, description="Cantidad de posiciones top que reciben boost"
    )
    score_boost_step: float = Field(
        2.0, ge=0, description="Puntos de boost por posición (top 1 = ranks * step)"
    )
    score_jitter_amplitude: float = Field(
        1.0, ge=0, description="Amplitud de la variación aleatoria (+/-)"
    )
    score_decimals: int = Field(1, ge=0, le=4, description="Decimales del score final")
    scoring_seed: Optional[int] = Field(
        None, description="Semilla del jitter (None = no determinístico)"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema

# Orden canónico de los factores. Define las columnas <factor>_score en
# neighborhoods y <factor>_importance en user_preferences.
LIFESTYLE_FACTORS = [
    "safety",
    "affordability",
    "connectivity",
    "metro_access",
    "food_culture",
    "nightlife",
    "family_friendly",
    "cultural_diversity",
    "green_spaces",
    "job_opportunities",
    "healthcare",
    "education",
    "shopping",
]

IMPORTANCE_LABELS = {
    1: "Not important",
    2: "Slightly important",
    3: "Moderately important",
    4: "Very important",
    5: "Extremely important",
}

MIN_IMPORTANCE = 1
MAX_IMPORTANCE = 5
DEFAULT_IMPORTANCE = 3

MAX_ATTRIBUTE_SCORE = 10.0
