import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from mobile_price.db.repositories.brands import BrandRepository
from mobile_price.db.repositories.memory import (
    MemoryBrandRepository, MemoryMobileRepository, MemoryStore, MemoryUserRepository,
)
from mobile_price.db.repositories.mobiles import MobileRepository
from mobile_price.db.repositories.users import UserRepository
from mobile_price.features.brands.schemas import BrandCreateIn
from mobile_price.features.mobiles.schemas import MobileCreateIn

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).with_name("seed_data.yaml")


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed
# -----------------------------
def seed_catalog(*, brand_repo, mobile_repo, user_repo, data: Dict[str, Any]) -> Dict[str, int]:
    """
    Insère users / brands / mobiles du YAML via les repositories (mémoire ou SQLModel).
    Idempotent : un enregistrement dont l'id ou le slug existe déjà est ignoré.
    Chaque fiche est validée avec les schémas d'entrée de l'API.
    """
    counts = {"users": 0, "brands": 0, "mobiles": 0}

    users_yaml: List[Dict[str, Any]] = data.get("users", [])
    for u in users_yaml:
        if user_repo.exists(u["id"]) or user_repo.exists_username(u["username"]):
            continue
        user_repo.create(id=u["id"], username=u["username"], password=u["password"], commit=False)
        counts["users"] += 1

    brands_yaml: List[Dict[str, Any]] = data.get("brands", [])
    for b in brands_yaml:
        payload = BrandCreateIn.model_validate({k: v for k, v in b.items() if k != "id"})
        if brand_repo.exists(b["id"]) or brand_repo.exists_slug(payload.slug):
            continue
        brand_repo.create(id=b["id"], commit=False, **payload.model_dump())
        counts["brands"] += 1

    mobiles_yaml: List[Dict[str, Any]] = data.get("mobiles", [])
    for m in mobiles_yaml:
        payload = MobileCreateIn.model_validate({k: v for k, v in m.items() if k != "id"})
        if mobile_repo.exists(m["id"]) or mobile_repo.exists_slug(payload.brand, payload.slug):
            continue
        mobile_repo.create(id=m["id"], commit=False, **payload.model_dump())
        counts["mobiles"] += 1

    # une seule transaction : les trois repositories partagent la session
    mobile_repo.commit()

    logger.info(
        "Seed: %d users, %d brands, %d mobiles inserted",
        counts["users"], counts["brands"], counts["mobiles"],
    )
    return counts


def seed_memory_store(store: MemoryStore, seed_path: str | Path = DEFAULT_SEED_PATH) -> Dict[str, int]:
    """Remplit le MemoryStore (backend memory) avec les fixtures YAML."""
    return seed_catalog(
        brand_repo=MemoryBrandRepository(store),
        mobile_repo=MemoryMobileRepository(store),
        user_repo=MemoryUserRepository(store),
        data=load_seed_yaml(seed_path),
    )


def seed_database(session: Session, seed_path: str | Path = DEFAULT_SEED_PATH) -> Dict[str, int]:
    """Insère les fixtures YAML en base (backend database), via une session ouverte."""
    return seed_catalog(
        brand_repo=BrandRepository(session),
        mobile_repo=MobileRepository(session),
        user_repo=UserRepository(session),
        data=load_seed_yaml(seed_path),
    )
