"""Test the viewer endpoints (3D model, 360° frame, AR overlay)."""


class TestModelEndpoint:

    def test_model_data(self, client):
        response = client.get("/api/mobiles/apple/iphone-15-pro-max/model")
        assert response.status_code == 200
        data = response.json()
        assert data["dimensions"]["screen_size"] == 6.1
        assert len(data["vertices"]["body"]) == 24
        assert data["textures"] == ["https://images.unsplash.com/photo-1592750475338-74b7b21085ab?w=600&h=600"]
        assert data["materials"]["body"]["color"] == "#A8DADC"

    def test_textures_fall_back_to_main_image(self, client):
        data = client.get("/api/mobiles/apple/iphone-16-pro/model").json()
        assert data["textures"] == ["https://fdn2.gsmarena.com/vv/bigpic/apple-iphone-16-pro.jpg"]

    def test_unknown_mobile_returns_404(self, client):
        assert client.get("/api/mobiles/apple/iphone-99/model").status_code == 404


class TestFrameEndpoint:

    def test_frame(self, client):
        response = client.get(
            "/api/mobiles/google/pixel-9-pro/frame",
            params={"angle": 90, "zoom": 1.5, "width": 800, "height": 600},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["canvas_width"] == 800
        assert data["side_edge"] is not None
        assert data["camera"] == []
        assert data["brand_label"]["text"] == "GOOGLE"

    def test_zoom_out_of_range_returns_400(self, client):
        response = client.get("/api/mobiles/google/pixel-9-pro/frame", params={"zoom": 5})
        assert response.status_code == 400


class TestOverlayEndpoint:

    def test_overlay(self, client):
        response = client.get(
            "/api/mobiles/apple/iphone-16-pro/overlay",
            params={"x": 320, "y": 240, "scale": 1.2, "hand": "small"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["color"] == "#A8DADC"
        assert abs(data["scale"] - 1.02) < 1e-9

    def test_unknown_hand_returns_400(self, client):
        response = client.get("/api/mobiles/apple/iphone-16-pro/overlay", params={"hand": "huge"})
        assert response.status_code == 400


class TestNonFiniteParameters:
    """inf / nan never reach the geometry: they are rejected as invalid input."""

    def test_infinite_angle_returns_400(self, client):
        response = client.get("/api/mobiles/apple/iphone-16-pro/frame", params={"angle": "inf"})
        assert response.status_code == 400
        assert response.json()["errors"][0]["loc"] == ["query", "angle"]

    def test_nan_position_returns_400(self, client):
        response = client.get("/api/mobiles/apple/iphone-16-pro/overlay", params={"x": "nan"})
        assert response.status_code == 400
        assert response.json()["errors"][0]["loc"] == ["query", "x"]

    def test_negative_infinite_y_returns_400(self, client):
        response = client.get("/api/mobiles/apple/iphone-16-pro/overlay", params={"y": "-inf"})
        assert response.status_code == 400
