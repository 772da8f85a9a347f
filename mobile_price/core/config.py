"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, stockage, DB, logs…)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from mobile_price.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test) et entre stockages (memory / database).
"""

from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Mobile-Price"
    ENV: str = "dev"  # dev | prod | test
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # Stockage
    # -----------------------------
    # memory   : maps en mémoire remplies avec les fixtures (dev)
    # database : SQLModel sur DATABASE_URL (SQLite par défaut, Postgres en prod)
    STORAGE_BACKEND: Literal["memory", "database"] = "memory"

    SQLITE_PATH: str = "mobile_price.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    # -----------------------------
    # Fixtures / catalogue
    # -----------------------------
    SEED_PATH: str = "mobile_price/db/seed_data.yaml"
    SEED_ON_STARTUP: bool = False  # uniquement pour le backend database
    FEATURED_LIMIT: int = 8

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


# Instance globale importable partout
settings = Settings()
