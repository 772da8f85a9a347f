import logging
from typing import Optional, Sequence, Union

from fastapi import HTTPException, status

from mobile_price.db.models.base import utcnow
from mobile_price.db.models.mobiles import Mobile
from mobile_price.db.repositories.mobiles import MobileRepository
from mobile_price.db.repositories.memory import MemoryMobileRepository
from mobile_price.features.mobiles.schemas import MobileCreateIn, MobileUpdateIn

logger = logging.getLogger(__name__)

MobileRepo = Union[MobileRepository, MemoryMobileRepository]


class MobileService:
    """
    Logique métier du catalogue de mobiles.
    - Lecture publique : filtres marque / mis en avant / recherche.
    - Admin : CRUD par id, unicité (brand, slug).
    """

    def __init__(self, repo: MobileRepo, *, featured_limit: int = 8):
        self.repo = repo
        self.featured_limit = featured_limit

    # -------- Reads --------

    def list(
        self,
        *,
        brand: Optional[str] = None,
        featured: Optional[bool] = None,
        search: Optional[str] = None,
    ) -> Sequence[Mobile]:
        """
        Un seul filtre est appliqué, par ordre de priorité :
        brand > featured=true > search > (aucun) tout le catalogue.
        """
        if brand:
            return self.repo.list_by_brand(brand)
        if featured:
            return self.repo.list_featured(limit=self.featured_limit)
        if search:
            return self.repo.search(search)
        return self.repo.list(offset=0, limit=None)

    def get_by_slug(self, brand: str, slug: str) -> Mobile:
        mobile = self.repo.get_by_slug(brand, slug)
        if not mobile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mobile not found")
        return mobile

    def get(self, mobile_id: str) -> Mobile:
        mobile = self.repo.get(mobile_id)
        if not mobile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mobile not found")
        return mobile

    # -------- Writes --------

    def create(self, payload: MobileCreateIn) -> Mobile:
        if self.repo.exists_slug(payload.brand, payload.slug):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Mobile slug already exists for this brand")
        mobile = self.repo.create(**payload.model_dump())
        logger.info("Mobile created: %s/%s (%s)", mobile.brand, mobile.slug, mobile.id)
        return mobile

    def update(self, mobile_id: str, payload: MobileUpdateIn) -> Mobile:
        mobile = self.get(mobile_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        # unicité vérifiée sur le couple final (brand, slug)
        if "brand" in changes or "slug" in changes:
            brand = changes.get("brand", mobile.brand)
            slug = changes.get("slug", mobile.slug)
            if self.repo.exists_slug(brand, slug, exclude_id=mobile.id):
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Mobile slug already exists for this brand")

        changes["updated_at"] = utcnow()
        return self.repo.update(mobile, **changes)

    def delete(self, mobile_id: str) -> None:
        mobile = self.get(mobile_id)
        self.repo.delete(mobile)
        logger.info("Mobile deleted: %s/%s (%s)", mobile.brand, mobile.slug, mobile_id)
