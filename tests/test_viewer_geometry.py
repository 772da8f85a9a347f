"""Unit tests for the AR/VR geometry helpers."""

import math

import pytest

from mobile_price.features.viewer import geometry


class TestBrandTables:

    def test_known_brand_dimensions(self):
        dims = geometry.device_dimensions("Apple")
        assert (dims.width, dims.height, dims.depth, dims.screen_size) == (77.6, 160.9, 7.8, 6.1)

    def test_unknown_brand_falls_back_to_samsung(self):
        assert geometry.device_dimensions("nokia") == geometry.DEVICE_DIMENSIONS["samsung"]

    def test_brand_color_fallback(self):
        assert geometry.brand_color("google") == "#34A853"
        assert geometry.brand_color("nokia") == "#6B7280"

    def test_hand_scales(self):
        assert [geometry.hand_scale(s) for s in ("small", "medium", "large")] == [0.85, 1.0, 1.15]


class TestAdjustBrightness:

    def test_lighten_clamps_at_255(self):
        assert geometry.adjust_brightness("#4285F4", 20) == "#5699ff"

    def test_darken_clamps_at_0(self):
        assert geometry.adjust_brightness("#102030", -40) == "#000008"

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            geometry.adjust_brightness("#fff", 10)


class TestPhoneVertices:

    def test_body_and_screen(self):
        dims = geometry.device_dimensions("apple")
        vertices = geometry.phone_vertices(dims)
        assert len(vertices.body) == 24
        assert len(vertices.screen) == 12
        # face avant en z = +depth/2, face arrière en z = -depth/2
        assert vertices.body[2] == pytest.approx(dims.depth / 2)
        assert vertices.body[14] == pytest.approx(-dims.depth / 2)
        assert vertices.screen[0] == pytest.approx(-dims.width / 2.2)
        assert vertices.screen[2] == pytest.approx(dims.depth / 2 + 0.1)


class TestPhoneFrame:

    def test_front_view(self):
        frame = geometry.phone_frame(brand="samsung", angle=0)
        assert frame.perspective == pytest.approx(1.0)
        assert frame.phone_width == pytest.approx(150)
        assert frame.phone_height == pytest.approx(270)
        assert frame.phone_depth == pytest.approx(20)
        assert frame.side_edge is None
        assert len(frame.camera) == 2
        assert frame.face.x == pytest.approx(125)
        assert frame.screen.width == pytest.approx(150 - 16)
        assert frame.shadow.cx == pytest.approx(200)
        assert frame.brand_label.text == "SAMSUNG"
        assert frame.info_panel[-1] == "Zoom: 100%"

    def test_side_edge_on_the_right_is_darker(self):
        frame = geometry.phone_frame(brand="samsung", angle=90, zoom=2.0)
        assert frame.phone_width == pytest.approx(300 * 0.6)
        assert frame.camera == []
        right = frame.face.x + frame.face.width
        assert frame.side_edge.points[0] == pytest.approx((right, frame.face.y))
        assert frame.side_edge.points[1][0] == pytest.approx(right + 40)
        assert frame.side_edge.fill == geometry.adjust_brightness("#4285F4", -40)
        assert frame.shadow.cx == pytest.approx(210)

    def test_side_edge_on_the_left_is_lighter(self):
        frame = geometry.phone_frame(brand="samsung", angle=-60)
        assert frame.side_edge.points[1][0] < frame.face.x
        assert frame.side_edge.fill == geometry.adjust_brightness("#4285F4", 40)
        assert frame.side_edge.points[1][0] == pytest.approx(frame.face.x - 20 * math.sin(math.radians(60)))

    def test_small_rotation_hides_side_edge(self):
        assert geometry.phone_frame(brand="apple", angle=5).side_edge is None


class TestArOverlay:

    def test_medium_hand(self):
        overlay = geometry.ar_overlay(brand="apple", x=200, y=300)
        assert overlay.scale == 1.0
        assert overlay.body.width == pytest.approx(100)
        assert overlay.body.height == pytest.approx(100 * 160.9 / 77.6)
        assert overlay.screen.width == pytest.approx(100 / 1.1)
        assert [label.y for label in overlay.labels] == [240, 360]

    def test_hand_size_scales_the_phone(self):
        overlay = geometry.ar_overlay(brand="apple", x=0, y=0, scale=2.0, hand="large")
        assert overlay.scale == pytest.approx(2.3)
        assert overlay.body.width == pytest.approx(230)


class TestLayouts:

    def test_side_by_side_is_centred(self):
        layout = geometry.side_by_side_layout(["a/x", "b/y", "c/z"])
        assert [p.x for p in layout.positions] == [150, 300, 450]

    def test_overlay_circle(self):
        layout = geometry.overlay_layout(["a/x", "b/y", "c/z"])
        for p in layout.positions:
            assert math.hypot(p.x - 350, p.y - 250) == pytest.approx(50)
        assert len(layout.connectors) == 2


class TestInfoPanelRounding:

    @pytest.mark.parametrize("angle, label", [(0.5, "Rotation: 1°"), (2.5, "Rotation: 3°"), (-0.4, "Rotation: 0°")])
    def test_rotation_rounds_half_up(self, angle, label):
        assert geometry.phone_frame(brand="apple", angle=angle).info_panel[3] == label

    def test_round_half_up(self):
        assert [geometry.round_half_up(v) for v in (0.5, 1.5, 2.5, -1.5)] == [1, 2, 3, -1]


class TestNonFiniteInput:

    @pytest.mark.parametrize("angle", [math.inf, -math.inf, math.nan])
    def test_frame_rejects_non_finite_angle(self, angle):
        with pytest.raises(ValueError):
            geometry.phone_frame(brand="apple", angle=angle)

    def test_overlay_rejects_nan_position(self):
        with pytest.raises(ValueError):
            geometry.ar_overlay(brand="apple", x=math.nan, y=0)
