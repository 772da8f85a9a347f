# mobile_price/db/repositories/users.py
from typing import Optional
from sqlmodel import select, func

from mobile_price.db.repositories.base import BaseRepository
from mobile_price.db.models.users import User


class UserRepository(BaseRepository[User]):
    """Comptes du catalogue (fixtures uniquement, pas de route d'authentification)."""
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(self.model).where(self.model.username == username)
        return self.session.exec(stmt).first()

    def exists_username(self, username: str) -> bool:
        stmt = select(func.count(self.model.id)).where(self.model.username == username)
        return self.session.exec(stmt).one() > 0
