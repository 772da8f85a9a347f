"""
➡️ But : Stockage "fixtures" en mémoire, sans base de données (mode dev).

MemoryStore : maps process-wide (brands / mobiles / users) indexées par id, dans l'ordre d'insertion.

Memory*Repository : mêmes méthodes que les repositories SQLModel (get, list, create, update, delete,
get_by_slug, search…). Les services ne voient pas la différence.

🔹 Avantages :

L'API tourne sans Postgres, avec un catalogue d'exemple.

Les tests peuvent viser les deux backends avec les mêmes assertions.
"""

from typing import Any, Dict, Generic, Optional, Sequence, Type

from mobile_price.db.models.brands import Brand
from mobile_price.db.models.mobiles import Mobile
from mobile_price.db.models.users import User
from mobile_price.db.repositories.base import ModelT


class MemoryStore:
    """Conteneur des maps en mémoire, partagé par toutes les requêtes du process."""

    def __init__(self) -> None:
        self.brands: Dict[str, Brand] = {}
        self.mobiles: Dict[str, Mobile] = {}
        self.users: Dict[str, User] = {}

    def clear(self) -> None:
        self.brands.clear()
        self.mobiles.clear()
        self.users.clear()


class MemoryRepository(Generic[ModelT]):
    """
    Équivalent mémoire de BaseRepository.
    Les paramètres `commit` sont acceptés pour garder la même signature (sans effet ici).
    """

    model: Type[ModelT]

    def __init__(self, items: Dict[str, ModelT]):
        self.items = items

    # ---------- READ ----------

    def list(self, offset: int = 0, limit: Optional[int] = 100) -> Sequence[ModelT]:
        values = list(self.items.values())
        end = None if limit is None else offset + limit
        return values[offset:end]

    def count(self) -> int:
        return len(self.items)

    def get(self, id_: Any) -> Optional[ModelT]:
        return self.items.get(id_)

    def exists(self, id_: Any) -> bool:
        return id_ in self.items

    # ---------- CREATE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        entity = self.model(**fields)
        self.items[entity.id] = entity
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        for key, value in changes.items():
            setattr(entity, key, value)
        self.items[entity.id] = entity
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        self.items.pop(entity.id, None)

    def commit(self) -> None:
        pass


class MemoryBrandRepository(MemoryRepository[Brand]):
    model = Brand

    def __init__(self, store: MemoryStore):
        super().__init__(store.brands)

    def get_by_slug(self, slug: str) -> Optional[Brand]:
        return next((b for b in self.items.values() if b.slug == slug), None)

    def exists_slug(self, slug: str, *, exclude_id: Optional[str] = None) -> bool:
        return any(b.slug == slug and b.id != exclude_id for b in self.items.values())


class MemoryMobileRepository(MemoryRepository[Mobile]):
    model = Mobile

    def __init__(self, store: MemoryStore):
        super().__init__(store.mobiles)

    def get_by_slug(self, brand: str, slug: str) -> Optional[Mobile]:
        return next(
            (m for m in self.items.values() if m.brand == brand and m.slug == slug),
            None,
        )

    def list_by_brand(self, brand: str) -> Sequence[Mobile]:
        return [m for m in self.items.values() if m.brand == brand]

    def list_featured(self, limit: int = 8) -> Sequence[Mobile]:
        return self.list(offset=0, limit=limit)

    def search(self, q: str) -> Sequence[Mobile]:
        term = q.lower()
        return [
            m for m in self.items.values()
            if term in m.name.lower() or term in m.brand.lower() or term in m.model.lower()
        ]

    def exists_slug(self, brand: str, slug: str, *, exclude_id: Optional[str] = None) -> bool:
        return any(
            m.brand == brand and m.slug == slug and m.id != exclude_id
            for m in self.items.values()
        )


class MemoryUserRepository(MemoryRepository[User]):
    model = User

    def __init__(self, store: MemoryStore):
        super().__init__(store.users)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.items.values() if u.username == username), None)

    def exists_username(self, username: str) -> bool:
        return any(u.username == username for u in self.items.values())

