# mobile_price/db/repositories/brands.py
from typing import Optional
from sqlmodel import select, func

from mobile_price.db.repositories.base import BaseRepository
from mobile_price.db.models.brands import Brand


class BrandRepository(BaseRepository[Brand]):
    """CRUD Brands + requêtes par slug."""
    model = Brand

    def get_by_slug(self, slug: str) -> Optional[Brand]:
        """Retourne une marque par son slug."""
        stmt = select(self.model).where(self.model.slug == slug)
        return self.session.exec(stmt).first()

    def exists_slug(self, slug: str, *, exclude_id: Optional[str] = None) -> bool:
        """Vérifie l'existence d'un slug (en ignorant éventuellement la marque exclude_id)."""
        stmt = select(func.count(self.model.id)).where(self.model.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.session.exec(stmt).one() > 0
