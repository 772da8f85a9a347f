from typing import Any, Dict, List, Optional

from sqlalchemy import Column, JSON, UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class Mobile(BaseModelDB, table=True):
    """
    Fiche téléphone : specs courtes, catégories de specs détaillées, dimensions.

    brand = slug de la marque (simple correspondance de chaîne, pas de FK).
    Les sous-structures (short_specs, specifications…) sont stockées en JSON.
    """

    __table_args__ = (UniqueConstraint("brand", "slug", name="uq_mobile_brand_slug"),)

    slug: str = Field(index=True, description="Slug unique au sein de la marque")
    name: str = Field(index=True, description="Nom commercial")
    brand: str = Field(index=True, description="Slug de la marque")
    model: str = Field(description="Référence du modèle")

    image_url: str = Field(description="Image principale")
    imagekit_path: Optional[str] = Field(default=None)
    release_date: str = Field(description="Date de sortie (YYYY-MM-DD)")
    # prix d'affichage libre ("₨ 449,999"), jamais numérique
    price: Optional[str] = Field(default=None)

    short_specs: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    carousel_images: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    specifications: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    dimensions: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    build_materials: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
