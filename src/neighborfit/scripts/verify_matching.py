"""
Script para verificar la distribución de los scores guardados.

Toma los resultados más recientes y chequea que estén en el rango visible
(40-95 por defecto) con un promedio razonable.

Uso:
    python -m neighborfit.scripts.verify_matching --limit 50
"""

import argparse
import sys

import structlog

from neighborfit.config import get_settings
from neighborfit.database import ResultRepository
from neighborfit.matching.diagnostics import HEALTHY_AVERAGE_RANGE, analyze_scores
from neighborfit.matching.scoring import ScoringConfig
from neighborfit.scripts import configure_logging

logger = structlog.get_logger()


def _print_user_samples(results: list[dict], users: int = 3, top: int = 5):
    seen = []
    for row in results:
        if row["user_id"] not in seen:
            seen.append(row["user_id"])

    print("\n=== MUESTRA POR USUARIO ===")
    for user_id in seen[:users]:
        user_rows = [r for r in results if r["user_id"] == user_id]
        print(f"\nUsuario {user_id[:8]}... ({len(user_rows)} matches):")
        for i, row in enumerate(user_rows[:top], start=1):
            print(f"  {i}. Barrio {row['neighborhood_id']}: {row['match_score']}%")


def verify(limit: int = 50) -> int:
    """Analiza los últimos resultados y devuelve el exit code."""
    settings = get_settings()
    config = ScoringConfig.from_settings(settings)

    results = ResultRepository().get_recent(limit=limit)
    if not results:
        logger.warning("No hay resultados guardados. Hacé el quiz primero.")
        return 1

    dist = analyze_scores((r["match_score"] for r in results), config)

    print("\n=== DISTRIBUCIÓN DE SCORES ===")
    print(f"Total: {dist.total}")
    print(f"Rango: {dist.min_score}% - {dist.max_score}%")
    print(f"Promedio: {dist.average:.1f}%")
    print(
        f"En rango ({config.base_score:g}-{config.max_score:g}%): "
        f"{dist.in_range} ({dist.in_range_ratio * 100:.1f}%)"
    )
    print(f"Debajo del rango: {dist.below_range}")
    print(f"Encima del rango: {dist.above_range}")

    _print_user_samples(results)

    if not dist.healthy_average:
        low, high = HEALTHY_AVERAGE_RANGE
        logger.warning(
            "Promedio fuera del rango saludable",
            average=round(dist.average, 1),
            expected=f"{low:g}-{high:g}",
        )

    if dist.all_in_range:
        logger.info("Verificación OK: todos los scores en rango")
        return 0

    logger.error(
        "Verificación fallida: scores fuera de rango",
        below=dist.below_range,
        above=dist.above_range,
    )
    return 1


def main():
    parser = argparse.ArgumentParser(
        description="Verifica la distribución de los match_score guardados"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=50,
        help="Cantidad de resultados recientes a analizar",
    )
    args = parser.parse_args()

    configure_logging(get_settings().log_level)

    try:
        sys.exit(verify(limit=args.limit))
    except KeyboardInterrupt:
        logger.info("Verificación interrumpida por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en verificación", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
