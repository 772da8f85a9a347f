from typing import Dict, List, Sequence, Tuple

from fastapi import HTTPException, status

from mobile_price.db.models.mobiles import Mobile
from mobile_price.features.compare.schemas import CompareCategory, CompareMobileOut, CompareOut, SpecRow
from mobile_price.features.mobiles.services import MobileService
from mobile_price.features.viewer import geometry
from mobile_price.features.viewer.schemas import LayoutOut

MIN_COMPARED = 2
MAX_COMPARED = geometry.MAX_COMPARED

SHORT_SPEC_FIELDS: List[Tuple[str, str]] = [
    ("ram", "RAM"),
    ("storage", "Storage"),
    ("camera", "Camera"),
    ("battery", "Battery"),
    ("display", "Display"),
    ("processor", "Processor"),
]


def parse_refs(refs: Sequence[str]) -> List[Tuple[str, str]]:
    """
    "apple/iphone-16-pro" → ("apple", "iphone-16-pro").
    400 si le nombre de références ou leur format est invalide.
    """
    if not MIN_COMPARED <= len(refs) <= MAX_COMPARED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Compare between {MIN_COMPARED} and {MAX_COMPARED} mobiles",
        )
    parsed: List[Tuple[str, str]] = []
    for ref in refs:
        brand, sep, slug = ref.strip().partition("/")
        if not sep or not brand or not slug or "/" in slug:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid mobile reference: {ref!r} (expected 'brand/slug')",
            )
        parsed.append((brand, slug))
    return parsed


class CompareService:
    """Comparaison côte à côte de 2 à 3 mobiles du catalogue."""

    def __init__(self, mobile_svc: MobileService):
        self.mobile_svc = mobile_svc

    def _resolve(self, refs: Sequence[str]) -> List[Mobile]:
        return [self.mobile_svc.get_by_slug(brand, slug) for brand, slug in parse_refs(refs)]

    def compare(self, refs: Sequence[str]) -> CompareOut:
        mobiles = self._resolve(refs)

        short_specs = [
            SpecRow(feature=label, values=[(m.short_specs or {}).get(key) for m in mobiles])
            for key, label in SHORT_SPEC_FIELDS
        ]
        # on n'affiche pas une ligne vide pour tous les mobiles
        short_specs = [row for row in short_specs if any(v is not None for v in row.values)]

        return CompareOut(
            mobiles=[
                CompareMobileOut(
                    ref=f"{m.brand}/{m.slug}",
                    id=m.id,
                    name=m.name,
                    brand=m.brand,
                    model=m.model,
                    price=m.price,
                    image_url=m.image_url,
                )
                for m in mobiles
            ],
            short_specs=short_specs,
            categories=self._spec_matrix(mobiles),
        )

    @staticmethod
    def _spec_matrix(mobiles: Sequence[Mobile]) -> List[CompareCategory]:
        """Union des catégories / features (ordre de première apparition) × mobiles."""
        # category -> feature -> index mobile -> value
        matrix: Dict[str, Dict[str, Dict[int, str]]] = {}
        for i, mobile in enumerate(mobiles):
            for cat in mobile.specifications or []:
                features = matrix.setdefault(cat["category"], {})
                for spec in cat.get("specs", []):
                    features.setdefault(spec["feature"], {})[i] = spec["value"]

        categories: List[CompareCategory] = []
        for category, features in matrix.items():
            rows = [
                SpecRow(feature=feature, values=[values.get(i) for i in range(len(mobiles))])
                for feature, values in features.items()
            ]
            categories.append(CompareCategory(category=category, rows=rows))
        return categories

    def layout(self, refs: Sequence[str], mode: str = "side-by-side") -> LayoutOut:
        mobiles = self._resolve(refs)
        keys = [f"{m.brand}/{m.slug}" for m in mobiles]
        if mode == "overlay":
            return geometry.overlay_layout(keys)
        return geometry.side_by_side_layout(keys)

