"""Test the comparison endpoints."""

import pytest
from fastapi import HTTPException

from mobile_price.features.compare.services import parse_refs


class TestParseRefs:
    """Unit tests for the 'brand/slug' reference parser."""

    def test_valid_refs(self):
        assert parse_refs(["apple/iphone-16-pro", " google/pixel-9-pro "]) == [
            ("apple", "iphone-16-pro"),
            ("google", "pixel-9-pro"),
        ]

    @pytest.mark.parametrize("refs", [
        ["apple/iphone-16-pro"],
        ["a/b", "c/d", "e/f", "g/h"],
    ])
    def test_wrong_count(self, refs):
        with pytest.raises(HTTPException) as exc:
            parse_refs(refs)
        assert exc.value.status_code == 400

    @pytest.mark.parametrize("bad", ["iphone-16-pro", "apple/", "/iphone", "apple/iphone/16"])
    def test_malformed_ref(self, bad):
        with pytest.raises(HTTPException) as exc:
            parse_refs(["google/pixel-9-pro", bad])
        assert exc.value.status_code == 400


class TestCompareEndpoint:
    """Test GET /api/compare."""

    def test_spec_matrix(self, client):
        response = client.get(
            "/api/compare",
            params=[("mobile", "apple/iphone-16-pro"), ("mobile", "google/pixel-9-pro")],
        )
        assert response.status_code == 200
        data = response.json()

        assert [m["ref"] for m in data["mobiles"]] == ["apple/iphone-16-pro", "google/pixel-9-pro"]

        ram = next(row for row in data["short_specs"] if row["feature"] == "RAM")
        assert ram["values"] == ["8GB", "16GB"]

        categories = {c["category"]: c["rows"] for c in data["categories"]}
        assert list(categories) == ["Display", "Performance", "Camera"]
        screen = next(row for row in categories["Display"] if row["feature"] == "Screen Size")
        assert screen["values"] == ["6.3 inches", None]
        main_camera = next(row for row in categories["Camera"] if row["feature"] == "Main Camera")
        assert main_camera["values"] == [None, "50MP"]

    def test_three_mobiles(self, client):
        response = client.get(
            "/api/compare",
            params=[
                ("mobile", "apple/iphone-16-pro"),
                ("mobile", "apple/iphone-15-pro-max"),
                ("mobile", "samsung/galaxy-s24-ultra"),
            ],
        )
        assert response.status_code == 200
        assert len(response.json()["mobiles"]) == 3

    def test_single_mobile_returns_400(self, client):
        response = client.get("/api/compare", params={"mobile": "apple/iphone-16-pro"})
        assert response.status_code == 400

    def test_missing_param_returns_400(self, client):
        assert client.get("/api/compare").status_code == 400

    def test_unknown_mobile_returns_404(self, client):
        response = client.get(
            "/api/compare",
            params=[("mobile", "apple/iphone-16-pro"), ("mobile", "nokia/3310")],
        )
        assert response.status_code == 404


class TestCompareLayoutEndpoint:
    """Test GET /api/compare/layout."""

    refs = [("mobile", "apple/iphone-16-pro"), ("mobile", "google/pixel-9-pro")]

    def test_side_by_side_is_default(self, client):
        data = client.get("/api/compare/layout", params=self.refs).json()
        assert data["mode"] == "side-by-side"
        assert [(p["x"], p["y"]) for p in data["positions"]] == [(225, 250), (375, 250)]
        assert data["connectors"] == []

    def test_overlay(self, client):
        data = client.get("/api/compare/layout", params=self.refs + [("mode", "overlay")]).json()
        assert data["mode"] == "overlay"
        assert data["positions"][0]["x"] == pytest.approx(400)
        assert data["positions"][1]["x"] == pytest.approx(300)
        assert len(data["connectors"]) == 1

    def test_unknown_mode_returns_400(self, client):
        params = self.refs + [("mode", "stacked")]
        assert client.get("/api/compare/layout", params=params).status_code == 400
