"""
Modelos de datos del sistema.

- Catálogo: Neighborhood + AttributeVector (puntajes 0-10)
- Usuario: UserPreferences + ImportanceVector (pesos 1-5)
- Salida: MatchResult
"""

from neighborfit.models.neighborhood import AttributeVector, Neighborhood
from neighborfit.models.preferences import ImportanceVector, UserPreferences
from neighborfit.models.result import MatchResult

__all__ = [
    # Catálogo
    "AttributeVector",
    "Neighborhood",
    # Usuario
    "ImportanceVector",
    "UserPreferences",
    # Salida
    "MatchResult",
]
