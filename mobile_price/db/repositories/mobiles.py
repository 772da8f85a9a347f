# mobile_price/db/repositories/mobiles.py
from typing import Optional, Sequence
from sqlmodel import select, or_, func

from mobile_price.db.repositories.base import BaseRepository
from mobile_price.db.models.mobiles import Mobile


class MobileRepository(BaseRepository[Mobile]):
    """CRUD Mobiles + filtres du catalogue (marque, mis en avant, recherche)."""
    model = Mobile

    # ---------- GETTERS SPÉCIFIQUES ----------

    def get_by_slug(self, brand: str, slug: str) -> Optional[Mobile]:
        """Retourne un mobile par (slug de marque, slug)."""
        stmt = select(self.model).where(self.model.brand == brand, self.model.slug == slug)
        return self.session.exec(stmt).first()

    # ---------- LISTES / RECHERCHE ----------

    def list_by_brand(self, brand: str) -> Sequence[Mobile]:
        stmt = (
            select(self.model)
            .where(self.model.brand == brand)
            .order_by(self.model.created_at)
        )
        return self.session.exec(stmt).all()

    def list_featured(self, limit: int = 8) -> Sequence[Mobile]:
        """Les `limit` premiers mobiles du catalogue."""
        return self.list(offset=0, limit=limit)

    def search(self, q: str) -> Sequence[Mobile]:
        """Recherche insensible à la casse (sous-chaîne) sur name / brand / model."""
        term = q.lower()
        stmt = (
            select(self.model)
            .where(
                or_(
                    func.lower(self.model.name).contains(term, autoescape=True),
                    func.lower(self.model.brand).contains(term, autoescape=True),
                    func.lower(self.model.model).contains(term, autoescape=True),
                )
            )
            .order_by(self.model.created_at)
        )
        return self.session.exec(stmt).all()

    # ---------- EXISTENCE ----------

    def exists_slug(self, brand: str, slug: str, *, exclude_id: Optional[str] = None) -> bool:
        """Vérifie l'unicité de (brand, slug)."""
        stmt = select(func.count(self.model.id)).where(
            self.model.brand == brand, self.model.slug == slug
        )
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        return self.session.exec(stmt).one() > 0
