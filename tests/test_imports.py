"""Test the raw phone record transformer and the import endpoint."""

from datetime import date

import pytest

from mobile_price.features.imports import transformer
from mobile_price.features.imports.schemas import RawPhoneIn


@pytest.fixture
def raw_phone():
    return {
        "id": 1,
        "manufacturer": "Nothing",
        "model": "Phone (2a) Plus",
        "chipset": "Dimensity 7350 Pro",
        "androidVersion": "14",
        "battery": "5000 mAh",
        "cpu": "Octa-core",
        "displayResolution": "1084 x 2412 pixels",
        "displaySize": "6.7 inches",
        "displayType": "AMOLED",
        "gpu": "Mali-G610 MC4",
        "internal": "256GB 8GB RAM, 256GB 12GB RAM",
        "mainCameraSpecs": "50 MP, f/1.9",
        "selfieCameraSpecs": "50 MP",
        "sensors": "Fingerprint, accelerometer",
    }


class TestHelpers:

    @pytest.mark.parametrize("text, expected", [
        ("Galaxy S24 Ultra", "galaxy-s24-ultra"),
        ("Phone (2a)  Plus", "phone-2a-plus"),
        ("  --OnePlus 12--  ", "oneplus-12"),
        ("Redmi Note 13 Pro+", "redmi-note-13-pro"),
    ])
    def test_create_slug(self, text, expected):
        assert transformer.create_slug(text) == expected

    def test_brand_tables_with_fallback(self):
        assert transformer.brand_logo("OnePlus") == "1+"
        assert transformer.brand_logo("fairphone") == "F"
        assert transformer.brand_description("Fairphone") == "Fairphone smartphone manufacturer"

    def test_image_url(self):
        assert transformer.image_url("Samsung", "Galaxy S24 Ultra") == (
            "https://fdn2.gsmarena.com/vv/bigpic/samsung-galaxy-s24-ultra.jpg"
        )

    def test_ram_and_storage(self):
        assert transformer.extract_ram_storage("128GB 8GB RAM, 256GB 8GB RAM") == ("8GB", "128GB")
        assert transformer.extract_ram_storage("microSDXC") == ("Unknown", "Unknown")
        assert transformer.extract_ram_storage(None) == ("Unknown", "Unknown")

    def test_release_date(self):
        today = date(2026, 1, 2)
        assert transformer.release_date_from_android("13.0", today=today) == "2022-08-15"
        assert transformer.release_date_from_android("4.4", today=today) == "2026-01-02"
        assert transformer.release_date_from_android(None, today=today) == "2026-01-02"


class TestTransformMobile:

    def test_full_record(self, raw_phone):
        mobile = transformer.transform_mobile(RawPhoneIn.model_validate(raw_phone))
        assert mobile.slug == "nothing-phone-2a-plus"
        assert mobile.brand == "nothing"
        assert mobile.name == "Nothing Phone (2a) Plus"
        assert mobile.imagekit_path == "/mobiles/nothing/nothing-phone-2a-plus.jpg"
        assert mobile.release_date == "2023-10-04"
        assert mobile.price == "Price not available"
        assert mobile.short_specs.ram == "8GB"
        assert mobile.short_specs.storage == "256GB"
        assert mobile.short_specs.processor == "Dimensity 7350 Pro"
        assert [c.category for c in mobile.specifications] == [
            "Display", "Camera", "Performance", "Battery & Storage", "Features",
        ]

    def test_missing_values_are_dropped(self):
        phone = RawPhoneIn(manufacturer="Fairphone", model="5", cpu="Octa-core")
        mobile = transformer.transform_mobile(phone, today=date(2026, 1, 2))
        assert mobile.short_specs.camera == "Unknown"
        assert mobile.release_date == "2026-01-02"
        assert len(mobile.specifications) == 1
        performance = mobile.specifications[0]
        assert performance.category == "Performance"
        assert [s.feature for s in performance.specs] == ["CPU"]

    def test_transform_brand(self):
        brand = transformer.transform_brand("Google", 4)
        assert brand.slug == "google"
        assert brand.logo == "G"
        assert brand.phone_count == "4"


class TestImportEndpoint:
    """Test POST /api/admin/import."""

    def test_import_creates_brand_and_mobile(self, client, raw_phone):
        response = client.post("/api/admin/import", json={"phones": [raw_phone]})
        assert response.status_code == 200
        assert response.json() == {"brands_created": 1, "mobiles_created": 1, "mobiles_skipped": 0}

        assert client.get("/api/brands/nothing").json()["phone_count"] == "1"
        assert client.get("/api/mobiles/nothing/nothing-phone-2a-plus").status_code == 200

    def test_import_skips_existing(self, client, raw_phone):
        client.post("/api/admin/import", json={"phones": [raw_phone]})
        response = client.post("/api/admin/import", json={"phones": [raw_phone, raw_phone]})
        assert response.json() == {"brands_created": 0, "mobiles_created": 0, "mobiles_skipped": 2}

    def test_existing_brand_is_reused(self, client):
        phone = {"manufacturer": "Apple", "model": "iPhone 16e", "internal": "128GB 8GB RAM"}
        data = client.post("/api/admin/import", json={"phones": [phone]}).json()
        assert data["brands_created"] == 0
        assert data["mobiles_created"] == 1
        assert client.get("/api/mobiles/apple/apple-iphone-16e").json()["short_specs"]["storage"] == "128GB"

    def test_empty_list_returns_400(self, client):
        assert client.post("/api/admin/import", json={"phones": []}).status_code == 400

    def test_missing_model_returns_400(self, client):
        response = client.post("/api/admin/import", json={"phones": [{"manufacturer": "Apple"}]})
        assert response.status_code == 400
