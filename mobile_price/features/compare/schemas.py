from typing import List, Optional

from pydantic import BaseModel


class CompareMobileOut(BaseModel):
    ref: str  # "brand/slug"
    id: str
    name: str
    brand: str
    model: str
    price: Optional[str] = None
    image_url: str


class SpecRow(BaseModel):
    feature: str
    # une valeur par mobile comparé, dans l'ordre de `mobiles` (None si absente)
    values: List[Optional[str]]


class CompareCategory(BaseModel):
    category: str
    rows: List[SpecRow]


class CompareOut(BaseModel):
    mobiles: List[CompareMobileOut]
    short_specs: List[SpecRow]
    categories: List[CompareCategory]
