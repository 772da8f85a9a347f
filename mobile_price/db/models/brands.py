from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB


class Brand(BaseModelDB, table=True):
    """Fabricants (Samsung, Apple…). Les mobiles y sont rattachés par le slug."""

    name: str = Field(index=True, description="Nom affiché de la marque")
    slug: str = Field(index=True, unique=True, description="Identifiant d'URL (ex: 'apple')")
    logo: Optional[str] = Field(default=None, description="Logo court (lettre ou emoji)")
    # chaîne d'affichage, pas un compteur calculé
    phone_count: Optional[str] = Field(default=None, description="Nombre de téléphones affiché")
    description: Optional[str] = Field(default=None, description="Description de la marque")
