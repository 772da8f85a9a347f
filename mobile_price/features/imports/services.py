import logging
from collections import Counter
from typing import Sequence

from mobile_price.features.brands.services import BrandRepo
from mobile_price.features.imports import transformer
from mobile_price.features.imports.schemas import ImportResultOut, RawPhoneIn
from mobile_price.features.mobiles.services import MobileRepo

logger = logging.getLogger(__name__)


class ImportService:
    """
    Alimente le catalogue à partir de fiches brutes :
    - crée les marques manquantes (phone_count = nombre de fiches du lot) ;
    - crée les mobiles absents, ignore ceux dont (brand, slug) existe déjà.
    """

    def __init__(self, brand_repo: BrandRepo, mobile_repo: MobileRepo):
        self.brand_repo = brand_repo
        self.mobile_repo = mobile_repo

    def import_phones(self, phones: Sequence[RawPhoneIn]) -> ImportResultOut:
        per_brand = Counter(p.manufacturer for p in phones)
        brands_created = mobiles_created = mobiles_skipped = 0

        for name, count in per_brand.items():
            brand = transformer.transform_brand(name, count) if transformer.create_slug(name) else None
            if brand is None or self.brand_repo.exists_slug(brand.slug):
                continue
            self.brand_repo.create(commit=False, **brand.model_dump())
            brands_created += 1

        for phone in phones:
            # pas de slug exploitable (nom sans caractère alphanumérique)
            if not transformer.create_slug(phone.manufacturer) or not transformer.create_slug(phone.model):
                mobiles_skipped += 1
                continue
            mobile = transformer.transform_mobile(phone)
            if self.mobile_repo.exists_slug(mobile.brand, mobile.slug):
                mobiles_skipped += 1
                continue
            self.mobile_repo.create(commit=False, **mobile.model_dump())
            mobiles_created += 1

        # un lot = une transaction (même session pour les deux repositories)
        self.mobile_repo.commit()

        logger.info(
            "Import: %d brands, %d mobiles created, %d skipped",
            brands_created, mobiles_created, mobiles_skipped,
        )
        return ImportResultOut(
            brands_created=brands_created,
            mobiles_created=mobiles_created,
            mobiles_skipped=mobiles_skipped,
        )
