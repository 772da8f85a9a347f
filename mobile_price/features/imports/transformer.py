"""
➡️ But : Transformer les fiches brutes d'une base de téléphones externe en payloads du catalogue.

transform_brand() → BrandCreateIn (slug, logo, description par défaut)

transform_mobile() → MobileCreateIn (slug, specs courtes, catégories de specs, image, date de sortie)

🔹 Avantages :

Aucune dépendance au stockage : testable avec de simples dicts.

Les payloads passent par les mêmes schémas que l'API admin.
"""

import re
from datetime import date
from typing import Dict, List, Optional, Tuple

from mobile_price.features.brands.schemas import BrandCreateIn
from mobile_price.features.imports.schemas import RawPhoneIn
from mobile_price.features.mobiles.schemas import MobileCreateIn, ShortSpecs, SpecCategory, SpecItem

UNKNOWN = "Unknown"
PRICE_NOT_AVAILABLE = "Price not available"
IMAGE_URL_PATTERN = "https://fdn2.gsmarena.com/vv/bigpic/{manufacturer}-{model}.jpg"

BRAND_LOGOS: Dict[str, str] = {
    "Apple": "🍎",
    "Samsung": "S",
    "Xiaomi": "X",
    "OnePlus": "1+",
    "Google": "G",
    "Huawei": "H",
    "Oppo": "O",
    "Vivo": "V",
    "Sony": "S",
    "Nokia": "N",
    "Motorola": "M",
    "Realme": "R",
    "Honor": "H",
    "Nothing": "N",
}

BRAND_DESCRIPTIONS: Dict[str, str] = {
    "Apple": "American multinational technology company",
    "Samsung": "South Korean multinational electronics corporation",
    "Xiaomi": "Chinese electronics company",
    "OnePlus": "Chinese smartphone manufacturer",
    "Google": "American multinational technology corporation",
    "Huawei": "Chinese multinational technology corporation",
    "Oppo": "Chinese consumer electronics company",
    "Vivo": "Chinese technology company",
    "Sony": "Japanese multinational electronics corporation",
    "Nokia": "Finnish multinational telecommunications company",
    "Motorola": "American telecommunications company",
    "Realme": "Chinese smartphone brand",
    "Honor": "Chinese smartphone brand",
    "Nothing": "British consumer technology company",
}

# version majeure d'Android → date de sortie approximative
ANDROID_RELEASES: Dict[str, str] = {
    "14": "2023-10-04",
    "13": "2022-08-15",
    "12": "2021-10-04",
    "11": "2020-09-08",
    "10": "2019-09-03",
    "9": "2018-08-06",
    "8": "2017-08-21",
    "7": "2016-08-22",
    "6": "2015-10-05",
}

_RAM_RE = re.compile(r"(\d+GB)\s+RAM")
_STORAGE_RE = re.compile(r"(\d+GB)\s+\d+GB\s+RAM")


# -----------------------------
# Helpers
# -----------------------------
def create_slug(text: str) -> str:
    """'Galaxy S24 Ultra!' → 'galaxy-s24-ultra'"""
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip().strip("-")


def brand_logo(brand_name: str) -> str:
    return BRAND_LOGOS.get(brand_name, brand_name[:1].upper())


def brand_description(brand_name: str) -> str:
    return BRAND_DESCRIPTIONS.get(brand_name, f"{brand_name} smartphone manufacturer")


def image_url(manufacturer: str, model: str) -> str:
    clean_model = re.sub(r"[^a-z0-9\s]", "", model.lower())
    clean_model = re.sub(r"\s+", "-", clean_model)
    return IMAGE_URL_PATTERN.format(manufacturer=manufacturer.lower(), model=clean_model)


def release_date_from_android(android_version: Optional[str], *, today: Optional[date] = None) -> str:
    """Date de sortie déduite de la version majeure d'Android (sinon : aujourd'hui)."""
    fallback = (today or date.today()).isoformat()
    if not android_version:
        return fallback
    major = android_version.split(".")[0].strip()
    return ANDROID_RELEASES.get(major, fallback)


def extract_ram_storage(internal: Optional[str]) -> Tuple[str, str]:
    """'128GB 8GB RAM, 256GB 8GB RAM' → ('8GB', '128GB')"""
    internal = internal or ""
    ram = _RAM_RE.search(internal)
    storage = _STORAGE_RE.search(internal)
    return (ram.group(1) if ram else UNKNOWN, storage.group(1) if storage else UNKNOWN)


def short_specs(phone: RawPhoneIn) -> ShortSpecs:
    ram, storage = extract_ram_storage(phone.internal)
    return ShortSpecs(
        ram=ram,
        storage=storage,
        camera=phone.main_camera_specs or UNKNOWN,
        battery=phone.battery,
        display=phone.display_size,
        processor=phone.chipset,
    )


def _category(name: str, pairs: List[Tuple[str, Optional[str]]]) -> SpecCategory:
    # les valeurs inconnues ne sont pas affichées
    return SpecCategory(
        category=name,
        specs=[SpecItem(feature=f, value=v) for f, v in pairs if v and v != UNKNOWN],
    )


def detailed_specs(phone: RawPhoneIn) -> List[SpecCategory]:
    categories: List[SpecCategory] = []

    if phone.display_size or phone.display_type or phone.display_resolution:
        categories.append(_category("Display", [
            ("Screen Size", phone.display_size),
            ("Resolution", phone.display_resolution),
            ("Display Type", phone.display_type),
        ]))

    if phone.main_camera_specs or phone.selfie_camera_specs:
        categories.append(_category("Camera", [
            ("Main Camera", phone.main_camera_specs),
            ("Front Camera", phone.selfie_camera_specs),
            ("Main Features", phone.main_camera_features),
            ("Video Recording", phone.main_video_specs),
        ]))

    if phone.chipset or phone.cpu or phone.gpu:
        categories.append(_category("Performance", [
            ("Chipset", phone.chipset),
            ("CPU", phone.cpu),
            ("GPU", phone.gpu),
        ]))

    if phone.battery or phone.internal:
        categories.append(_category("Battery & Storage", [
            ("Battery", phone.battery),
            ("Internal Storage", phone.internal),
        ]))

    if phone.sensors or phone.android_version:
        categories.append(_category("Features", [
            ("Operating System", f"Android {phone.android_version or UNKNOWN}"),
            ("Sensors", phone.sensors),
        ]))

    return [c for c in categories if c.specs]


# -----------------------------
# Transformations
# -----------------------------
def transform_brand(brand_name: str, phone_count: int = 0) -> BrandCreateIn:
    return BrandCreateIn(
        name=brand_name,
        slug=create_slug(brand_name),
        logo=brand_logo(brand_name),
        phone_count=str(phone_count),
        description=brand_description(brand_name),
    )


def transform_mobile(phone: RawPhoneIn, *, today: Optional[date] = None) -> MobileCreateIn:
    full_name = f"{phone.manufacturer} {phone.model}"
    slug = create_slug(full_name)
    brand_slug = create_slug(phone.manufacturer)
    url = image_url(phone.manufacturer, phone.model)

    return MobileCreateIn(
        slug=slug,
        name=full_name,
        brand=brand_slug,
        model=phone.model,
        image_url=url,
        imagekit_path=f"/mobiles/{brand_slug}/{slug}.jpg",
        release_date=release_date_from_android(phone.android_version, today=today),
        price=PRICE_NOT_AVAILABLE,
        short_specs=short_specs(phone),
        carousel_images=[url],
        specifications=detailed_specs(phone),
        dimensions=None,
        build_materials=None,
    )
