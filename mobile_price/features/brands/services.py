"""
➡️ But : Contenir la logique métier des marques : orchestrer le repo, appliquer les règles, gérer les erreurs.

BrandService : unicité du slug, 404 si la marque n'existe pas.

Lève les exceptions HTTP (HTTPException) pour informer proprement le client.

🔹 Avantages :

Code métier découplé du web et du stockage (mémoire ou SQLModel).

Test unitaire possible sans passer par FastAPI.
"""

import logging
from typing import Sequence, Union

from fastapi import HTTPException, status

from mobile_price.db.models.base import utcnow
from mobile_price.db.models.brands import Brand
from mobile_price.db.repositories.brands import BrandRepository
from mobile_price.db.repositories.memory import MemoryBrandRepository
from mobile_price.features.brands.schemas import BrandCreateIn, BrandUpdateIn

logger = logging.getLogger(__name__)

BrandRepo = Union[BrandRepository, MemoryBrandRepository]


class BrandService:
    def __init__(self, repo: BrandRepo):
        self.repo = repo

    # -------- Reads --------

    def list_all(self) -> Sequence[Brand]:
        return self.repo.list(offset=0, limit=None)

    def get_by_slug(self, slug: str) -> Brand:
        brand = self.repo.get_by_slug(slug)
        if not brand:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
        return brand

    def get(self, brand_id: str) -> Brand:
        brand = self.repo.get(brand_id)
        if not brand:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
        return brand

    # -------- Writes --------

    def create(self, payload: BrandCreateIn) -> Brand:
        if self.repo.exists_slug(payload.slug):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Brand slug already exists")
        brand = self.repo.create(**payload.model_dump())
        logger.info("Brand created: %s (%s)", brand.slug, brand.id)
        return brand

    def update(self, brand_id: str, payload: BrandUpdateIn) -> Brand:
        brand = self.get(brand_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "slug" in changes and self.repo.exists_slug(changes["slug"], exclude_id=brand.id):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Brand slug already exists")
        changes["updated_at"] = utcnow()
        return self.repo.update(brand, **changes)

    def delete(self, brand_id: str) -> None:
        # une 2e suppression du même id renvoie 404
        brand = self.get(brand_id)
        self.repo.delete(brand)
        logger.info("Brand deleted: %s (%s)", brand.slug, brand_id)
