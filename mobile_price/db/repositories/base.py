from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select, func

# Type générique pour le modèle (Brand, Mobile, User)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repository SQLModel générique du catalogue.

    👉 Aucune logique métier : lecture, écriture, suppression d'une table.
    👉 Les repositories concrets définissent `model = Brand | Mobile | User`.
    👉 Les repositories mémoire (memory.py) exposent exactement les mêmes méthodes,
       les services ne dépendent donc pas du backend de stockage.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list(self, offset: int = 0, limit: Optional[int] = 100) -> Sequence[ModelT]:
        """Enregistrements dans l'ordre d'insertion ; limit=None → tout le reste de la table."""
        statement = select(self.model).order_by(self.model.created_at).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        return self.session.exec(statement).all()

    def count(self) -> int:
        return self.session.exec(select(func.count(self.model.id))).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Enregistrement par id, ou None."""
        return self.session.get(self.model, id_)

    def exists(self, id_: Any) -> bool:
        return self.get(id_) is not None

    # ---------- WRITE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        """
        Insère un enregistrement.
        commit=False : simple flush, le service valide le lot avec commit().
        """
        entity = self.model(**fields)
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """Applique `changes` champ par champ (les colonnes JSON sont remplacées entières)."""
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        self.session.delete(entity)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    def commit(self) -> None:
        self.session.commit()

    def _persist(self, entity: ModelT, commit: bool) -> None:
        if commit:
            self.session.commit()
            self.session.refresh(entity)
        else:
            self.session.flush()
