"""
Script para recalcular los matches guardados.

Sin argumentos recalcula todos los usuarios que completaron el quiz
(por ejemplo después de ajustar la curva de scoring o el catálogo).

Uso:
    python -m neighborfit.scripts.run_matching
    python -m neighborfit.scripts.run_matching --user-id <uuid>
"""

import argparse
import sys
from typing import Optional

import structlog

from neighborfit.config import get_settings
from neighborfit.database import ResultPersistenceError
from neighborfit.matching import MatchingEngine
from neighborfit.scripts import configure_logging

logger = structlog.get_logger()


def run_matching(user_id: Optional[str] = None) -> int:
    """Ejecuta el recálculo y devuelve el exit code."""
    engine = MatchingEngine()

    if user_id:
        try:
            run = engine.calculate_and_save_matches(user_id)
        except ResultPersistenceError as e:
            logger.error("No se pudieron guardar los resultados", user_id=user_id, error=str(e))
            return 1

        if not run.ok:
            logger.warning(run.message, user_id=user_id, status=run.status)
            return 1

        logger.info("Matching completado", user_id=user_id, matches=len(run.results))
        return 0

    stats = engine.recalculate_all()

    logger.info(
        "Matching completado",
        users=stats.get("users_processed", 0),
        matches=stats.get("matches_saved", 0),
        skipped=stats.get("skipped", 0),
    )
    return 0 if stats.get("errors", 0) == 0 else 1


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(description="Recalcula los matches de barrios")
    parser.add_argument(
        "--user-id",
        default=None,
        help="UUID de un usuario puntual (por defecto: todos)",
    )
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    logger.info("Iniciando recálculo de matches...")

    try:
        sys.exit(run_matching(args.user_id))
    except KeyboardInterrupt:
        logger.info("Matching interrumpido por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en matching", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
