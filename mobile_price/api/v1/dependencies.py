"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_brand_repository() : repository mémoire ou SQLModel selon settings.STORAGE_BACKEND.

get_mobile_service() : crée un MobileService à partir du repository choisi.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à surcharger dans les tests (app.dependency_overrides).
"""

from typing import List

from fastapi import Depends, Query
from sqlmodel import Session

from mobile_price.core.config import settings
from mobile_price.db.session import get_session

from mobile_price.db.repositories.memory import (
    MemoryStore,
    MemoryBrandRepository,
    MemoryMobileRepository,
)
from mobile_price.db.repositories.brands import BrandRepository
from mobile_price.db.repositories.mobiles import MobileRepository

from mobile_price.features.brands.services import BrandRepo, BrandService
from mobile_price.features.mobiles.services import MobileRepo, MobileService
from mobile_price.features.viewer.services import ViewerService
from mobile_price.features.compare.services import CompareService
from mobile_price.features.imports.services import ImportService

# Catalogue en mémoire, partagé par toutes les requêtes du process (rempli au démarrage)
memory_store = MemoryStore()


def mobile_refs(
    mobile: List[str] = Query(
        ...,
        description="Références 'brand/slug' des mobiles à comparer (2 à 3)",
        examples=[["apple/iphone-16-pro", "google/pixel-9-pro"]],
    ),
) -> List[str]:
    return mobile


# -----------------------------
# Storage
# -----------------------------
def get_storage_backend() -> str:
    return settings.STORAGE_BACKEND


def get_memory_store() -> MemoryStore:
    return memory_store


# -----------------------------
# Repositories
# -----------------------------
def get_brand_repository(
    backend: str = Depends(get_storage_backend),
    store: MemoryStore = Depends(get_memory_store),
    session: Session = Depends(get_session),
) -> BrandRepo:
    if backend == "database":
        return BrandRepository(session)
    return MemoryBrandRepository(store)


def get_mobile_repository(
    backend: str = Depends(get_storage_backend),
    store: MemoryStore = Depends(get_memory_store),
    session: Session = Depends(get_session),
) -> MobileRepo:
    if backend == "database":
        return MobileRepository(session)
    return MemoryMobileRepository(store)


# -----------------------------
# Services
# -----------------------------
def get_brand_service(
    brand_repo: BrandRepo = Depends(get_brand_repository),
) -> BrandService:
    return BrandService(repo=brand_repo)


def get_mobile_service(
    mobile_repo: MobileRepo = Depends(get_mobile_repository),
) -> MobileService:
    return MobileService(repo=mobile_repo, featured_limit=settings.FEATURED_LIMIT)


def get_viewer_service(
    mobile_svc: MobileService = Depends(get_mobile_service),
) -> ViewerService:
    return ViewerService(mobile_svc=mobile_svc)


def get_compare_service(
    mobile_svc: MobileService = Depends(get_mobile_service),
) -> CompareService:
    return CompareService(mobile_svc=mobile_svc)


def get_import_service(
    brand_repo: BrandRepo = Depends(get_brand_repository),
    mobile_repo: MobileRepo = Depends(get_mobile_repository),
) -> ImportService:
    return ImportService(brand_repo=brand_repo, mobile_repo=mobile_repo)
