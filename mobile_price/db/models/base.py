"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlmodel import SQLModel, Field


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    """Horodatage UTC avec fuseau (les colonnes datetime refusent les valeurs naïves)."""
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    # identifiants texte (uuid) : les fixtures utilisent des ids lisibles ("brand-1")
    id: str = Field(default_factory=new_id, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
