"""
➡️ But : Configurer la base (SQLite / Postgres) et gérer les sessions de base de données.

engine : connexion à la base (DATABASE_URL, par défaut sqlite:///mobile_price.db).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Optional

from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from mobile_price.db.models.brands import Brand  # noqa: F401
from mobile_price.db.models.mobiles import Mobile  # noqa: F401
from mobile_price.db.models.users import User  # noqa: F401

from mobile_price.core.config import settings

logger = logging.getLogger(__name__)


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    # lower() natif de SQLite : ASCII seulement (recherche "Éclair" ≠ "éclair")
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: Optional[str] = None, **kwargs: Any) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev" and settings.SQL_ECHO),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )
    if is_sqlite:
        event.listen(engine, "connect", _register_sqlite_functions)
    return engine

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    target = bind or engine
    logger.info("Creating tables on %s", target.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(target)


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
