"""
➡️ But : Configurer les logs de l'application (une seule fois, au démarrage).

setup_logging() : handler console + format commun, niveau pris dans settings.LOG_LEVEL.

log_requests : middleware HTTP qui trace chaque appel /api sous la forme
"GET /api/brands 200 in 3ms".

🔹 Avantages :

Chaque module utilise simplement logging.getLogger(__name__).

Les erreurs 500 sont tracées côté serveur avec la stack complète.
"""

import logging
import sys
import time

from fastapi import Request

from mobile_price.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
MAX_LINE_LENGTH = 80

logger = logging.getLogger("mobile_price.http")


def setup_logging(level: str | None = None) -> None:
    """Configure le logger racine du package (idempotent)."""
    root = logging.getLogger("mobile_price")
    root.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(getattr(h, "_mobile_price", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mobile_price = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    root.propagate = False


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration = int((time.perf_counter() - start) * 1000)
        line = f"{request.method} {path} {response.status_code} in {duration}ms"
        if len(line) > MAX_LINE_LENGTH:
            line = line[: MAX_LINE_LENGTH - 1] + "…"
        logger.info(line)
    return response
