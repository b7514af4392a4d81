"""
Catálogo de barrios

Modelo de un barrio con sus 13 puntajes de estilo de vida (escala 0-10)
y metadatos de presentación que no intervienen en el matching.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from neighborfit.config import LIFESTYLE_FACTORS


class AttributeVector(BaseModel):
    """
    Puntajes medidos de un barrio, de 0 a 10 por factor.

    Es un valor de solo lectura durante una corrida de matching.
    """

    model_config = ConfigDict(frozen=True)

    safety: float = Field(ge=0, le=10, description="Estadísticas de delito y policía")
    affordability: float = Field(ge=0, le=10, description="Precios y costo de vida")
    connectivity: float = Field(ge=0, le=10, description="Rutas y tránsito")
    metro_access: float = Field(ge=0, le=10, description="Acceso a metro y tren local")
    food_culture: float = Field(ge=0, le=10, description="Oferta gastronómica")
    nightlife: float = Field(ge=0, le=10, description="Vida nocturna y entretenimiento")
    family_friendly: float = Field(ge=0, le=10, description="Servicios para familias")
    cultural_diversity: float = Field(ge=0, le=10, description="Diversidad cultural")
    green_spaces: float = Field(ge=0, le=10, description="Parques y espacios verdes")
    job_opportunities: float = Field(ge=0, le=10, description="Oportunidades laborales")
    healthcare: float = Field(ge=0, le=10, description="Hospitales y clínicas")
    education: float = Field(ge=0, le=10, description="Escuelas y universidades")
    shopping: float = Field(ge=0, le=10, description="Comercios y mercados")

    def as_list(self) -> list[float]:
        """Valores en el orden canónico de LIFESTYLE_FACTORS."""
        return [getattr(self, factor) for factor in LIFESTYLE_FACTORS]


class Neighborhood(BaseModel):
    """
    Barrio del catálogo.

    Se mapea a la tabla 'neighborhoods' en Supabase, donde los puntajes
    viven como columnas planas <factor>_score.
    """

    model_config = ConfigDict(from_attributes=True)

    # Identificación
    id: int = Field(..., description="ID numérico generado por Supabase")
    name: str = Field(..., description="Nombre del barrio")
    city: str = Field(..., description="Ciudad")
    state: str = Field(..., description="Estado/Provincia")
    pincode: Optional[str] = Field(None, description="Código postal")

    # Puntajes de estilo de vida
    scores: AttributeVector

    # Estadísticas oficiales (opcionales)
    population_density: Optional[float] = Field(None, description="Habitantes por km²")
    literacy_rate: Optional[float] = Field(None, description="Tasa de alfabetización (%)")
    avg_income: Optional[float] = Field(None, description="Ingreso mensual promedio")
    air_quality_index: Optional[float] = Field(None, description="AQI")

    # Metadatos
    description: Optional[str] = None
    image_url: Optional[str] = None
    data_sources: Optional[str] = Field(None, description="Fuentes de los puntajes")
    created_at: Optional[str] = None

    @classmethod
    def from_db_row(cls, row: dict) -> "Neighborhood":
        """Construye el modelo desde una fila de la tabla 'neighborhoods'."""
        data = {
            key: value
            for key, value in row.items()
            if not key.endswith("_score")
        }
        data["scores"] = AttributeVector(
            **{factor: row.get(f"{factor}_score") for factor in LIFESTYLE_FACTORS}
        )
        return cls.model_validate(data)

    def to_db_dict(self) -> dict:
        """Convierte a diccionario plano para inserción en Supabase."""
        data = self.model_dump(exclude={"scores"})
        for factor in LIFESTYLE_FACTORS:
            data[f"{factor}_score"] = getattr(self.scores, factor)
        return data
