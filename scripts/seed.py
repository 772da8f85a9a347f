"""Remplit la base (backend database) avec les fixtures YAML : python -m scripts.seed"""

from sqlmodel import Session

from mobile_price.core.config import settings
from mobile_price.core.log_config import setup_logging
from mobile_price.db.seed import seed_database
from mobile_price.db.session import engine, init_db


def run_seed():
    setup_logging()
    init_db()
    with Session(engine) as session:
        counts = seed_database(session, settings.SEED_PATH)
    print(f"Seed terminé : {counts}")


if __name__ == "__main__":
    run_seed()
