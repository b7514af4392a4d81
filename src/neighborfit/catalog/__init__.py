"""
Catálogo de barrios: búsqueda, filtros y ratings de presentación.
"""

from neighborfit.catalog.explorer import (
    SORT_OPTIONS,
    display_rating,
    filter_neighborhoods,
    list_cities,
    list_states,
    overall_rating,
)

__all__ = [
    "SORT_OPTIONS",
    "display_rating",
    "filter_neighborhoods",
    "list_cities",
    "list_states",
    "overall_rating",
]
