from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField

from mobile_price.features.brands.schemas import SLUG_PATTERN


# ---------- SOUS-STRUCTURES ----------

class ShortSpecs(BaseModel):
    ram: str
    storage: str
    camera: str
    battery: Optional[str] = None
    display: Optional[str] = None
    processor: Optional[str] = None


class SpecItem(BaseModel):
    feature: str
    value: str


class SpecCategory(BaseModel):
    category: str = PydField(..., examples=["Display"])
    specs: List[SpecItem] = PydField(default_factory=list)


class Dimensions(BaseModel):
    height: str
    width: str
    thickness: str
    weight: str


class BuildMaterials(BaseModel):
    frame: str
    back: str
    protection: str


# ---------- IN / UPDATE ----------

class MobileCreateIn(BaseModel):
    slug: str = PydField(..., pattern=SLUG_PATTERN, examples=["galaxy-s24-ultra"])
    name: str = PydField(..., min_length=1, examples=["Galaxy S24 Ultra"])
    brand: str = PydField(..., pattern=SLUG_PATTERN, description="Slug de la marque", examples=["samsung"])
    model: str = PydField(..., min_length=1, examples=["S24 Ultra"])
    image_url: str
    imagekit_path: Optional[str] = None
    release_date: str = PydField(..., examples=["2024-01-01"])
    price: Optional[str] = PydField(None, examples=["₨ 449,999"])
    short_specs: ShortSpecs
    carousel_images: List[str] = PydField(default_factory=list)
    specifications: List[SpecCategory] = PydField(default_factory=list)
    dimensions: Optional[Dimensions] = None
    build_materials: Optional[BuildMaterials] = None


class MobileUpdateIn(BaseModel):
    slug: Optional[str] = PydField(None, pattern=SLUG_PATTERN)
    name: Optional[str] = PydField(None, min_length=1)
    brand: Optional[str] = PydField(None, pattern=SLUG_PATTERN)
    model: Optional[str] = PydField(None, min_length=1)
    image_url: Optional[str] = None
    imagekit_path: Optional[str] = None
    release_date: Optional[str] = None
    price: Optional[str] = None
    short_specs: Optional[ShortSpecs] = None
    carousel_images: Optional[List[str]] = None
    specifications: Optional[List[SpecCategory]] = None
    dimensions: Optional[Dimensions] = None
    build_materials: Optional[BuildMaterials] = None


# ---------- OUT ----------

class MobileOut(BaseModel):
    id: str
    slug: str
    name: str
    brand: str
    model: str
    image_url: str
    imagekit_path: Optional[str] = None
    release_date: str
    price: Optional[str] = None
    short_specs: ShortSpecs
    carousel_images: List[str] = []
    specifications: List[SpecCategory] = []
    dimensions: Optional[Dimensions] = None
    build_materials: Optional[BuildMaterials] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
