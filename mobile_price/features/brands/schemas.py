"""
➡️ But : Définir les formats d’entrée/sortie de l’API pour les marques (couche validation).

BrandCreateIn → corps de requête POST /admin/brands

BrandUpdateIn → corps PUT /admin/brands/{id} (mise à jour partielle)

BrandOut → réponse de l’API
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


# ---------- IN / UPDATE ----------

class BrandCreateIn(BaseModel):
    name: str = Field(..., min_length=1, examples=["Samsung"])
    slug: str = Field(..., pattern=SLUG_PATTERN, examples=["samsung"])
    logo: Optional[str] = Field(None, examples=["S"])
    phone_count: Optional[str] = Field(None, examples=["142"])
    description: Optional[str] = Field(None, examples=["South Korean multinational electronics company"])


class BrandUpdateIn(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, pattern=SLUG_PATTERN)
    logo: Optional[str] = None
    phone_count: Optional[str] = None
    description: Optional[str] = None


# ---------- OUT ----------

class BrandOut(BaseModel):
    id: str
    name: str
    slug: str
    logo: Optional[str] = None
    phone_count: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
