"""
➡️ But : Calculer la géométrie des visualisations "AR/VR" (essayage, vue 360°, comparaison).

Fonctions pures, sans état : le client n'a plus qu'à dessiner les primitives renvoyées.

- device_dimensions / brand_color : tables par marque (repli sur Samsung / gris)
- adjust_brightness : éclaircir / assombrir une couleur hexadécimale
- phone_frame : faux 3D par cosinus (perspective) et sinus (tranche visible)
- ar_overlay : téléphone à l'échelle sur l'image caméra
- side_by_side_layout / overlay_layout : placement de plusieurs appareils
"""

import math
from typing import Any, Dict, List, Optional, Sequence

from mobile_price.features.viewer.schemas import (
    Circle,
    DeviceDimensionsOut,
    Ellipse,
    GradientStop,
    LayoutOut,
    LayoutPosition,
    ModelVertices,
    OverlayOut,
    PhoneFrameOut,
    Polygon,
    Rect,
    TextLabel,
)

# mm / pouces
DEVICE_DIMENSIONS: Dict[str, DeviceDimensionsOut] = {
    "apple": DeviceDimensionsOut(width=77.6, height=160.9, depth=7.8, screen_size=6.1),
    "samsung": DeviceDimensionsOut(width=79.0, height=162.3, depth=8.2, screen_size=6.8),
    "google": DeviceDimensionsOut(width=76.5, height=162.6, depth=8.8, screen_size=6.7),
    "xiaomi": DeviceDimensionsOut(width=75.3, height=161.4, depth=8.2, screen_size=6.73),
    "oneplus": DeviceDimensionsOut(width=75.8, height=164.3, depth=9.2, screen_size=6.82),
    "oppo": DeviceDimensionsOut(width=76.2, height=162.6, depth=9.5, screen_size=6.82),
    "vivo": DeviceDimensionsOut(width=76.3, height=164.1, depth=8.9, screen_size=6.78),
}
DEFAULT_DIMENSIONS_BRAND = "samsung"

BRAND_COLORS: Dict[str, str] = {
    "apple": "#A8DADC",
    "samsung": "#4285F4",
    "google": "#34A853",
    "xiaomi": "#FF6900",
    "oneplus": "#EB0028",
    "oppo": "#1BA854",
    "vivo": "#4A90E2",
}
DEFAULT_COLOR = "#6B7280"

HAND_SCALES: Dict[str, float] = {"small": 0.85, "medium": 1.0, "large": 1.15}

ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ROTATION_SPEED = 0.02

SIDE_VISIBLE_THRESHOLD = 0.1
CAMERA_VISIBLE_THRESHOLD = 0.5
SCREEN_INSET = 8

MAX_COMPARED = 3


# -----------------------------
# Tables par marque
# -----------------------------
def device_dimensions(brand: str) -> DeviceDimensionsOut:
    return DEVICE_DIMENSIONS.get(brand.lower(), DEVICE_DIMENSIONS[DEFAULT_DIMENSIONS_BRAND])


def brand_color(brand: str) -> str:
    return BRAND_COLORS.get(brand.lower(), DEFAULT_COLOR)


def hand_scale(size: str = "medium") -> float:
    return HAND_SCALES[size]


def round_half_up(value: float) -> int:
    """Arrondi "commercial" : 0.5 → 1, 2.5 → 3 (round() arrondit au pair)."""
    return math.floor(value + 0.5)


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} doit être un nombre fini: {value!r}")


def adjust_brightness(color: str, amount: int) -> str:
    """
    Ajoute `amount` à chaque canal RGB (borné à 0..255).
    adjust_brightness("#4285F4", 20) → "#5699ff"
    """
    hex_ = color.lstrip("#")
    if len(hex_) != 6:
        raise ValueError(f"Couleur hexadécimale attendue au format #RRGGBB: {color!r}")
    channels = [int(hex_[i:i + 2], 16) for i in (0, 2, 4)]
    r, g, b = (max(0, min(255, c + amount)) for c in channels)
    return f"#{r:02x}{g:02x}{b:02x}"


# -----------------------------
# Modèle 3D (vue 360°)
# -----------------------------
def phone_vertices(dims: DeviceDimensionsOut) -> ModelVertices:
    w, h, d = dims.width, dims.height, dims.depth
    body = [
        # face avant (écran)
        -w / 2, -h / 2, d / 2,
        w / 2, -h / 2, d / 2,
        w / 2, h / 2, d / 2,
        -w / 2, h / 2, d / 2,
        # face arrière
        -w / 2, -h / 2, -d / 2,
        w / 2, -h / 2, -d / 2,
        w / 2, h / 2, -d / 2,
        -w / 2, h / 2, -d / 2,
    ]
    # écran légèrement en retrait et au-dessus de la face avant
    screen = [
        -w / 2.2, -h / 2.1, d / 2 + 0.1,
        w / 2.2, -h / 2.1, d / 2 + 0.1,
        w / 2.2, h / 2.1, d / 2 + 0.1,
        -w / 2.2, h / 2.1, d / 2 + 0.1,
    ]
    return ModelVertices(body=body, screen=screen)


def materials(brand: str) -> Dict[str, Dict[str, Any]]:
    return {
        "screen": {"color": "#000000", "reflectivity": 0.9},
        "body": {"color": brand_color(brand), "metallic": 0.8},
        "camera": {"color": "#1a1a1a", "roughness": 0.1},
    }


def animations() -> Dict[str, Dict[str, Any]]:
    return {
        "rotation": {"speed": ROTATION_SPEED, "axis": "y"},
        "zoom": {"min": ZOOM_MIN, "max": ZOOM_MAX},
    }


def phone_frame(
    *,
    brand: str,
    angle: float,
    zoom: float = 1.0,
    canvas_width: int = 400,
    canvas_height: int = 600,
) -> PhoneFrameOut:
    """
    Calcule une image de la vue 360° pour `angle` (degrés) et `zoom`.

    perspective = cos(angle) rétrécit la face, side = sin(angle) fait apparaître une tranche
    à droite (side > 0, assombrie) ou à gauche (side < 0, éclaircie).
    """
    _require_finite(angle=angle, zoom=zoom)
    dims = device_dimensions(brand)
    body_color = brand_color(brand)

    center_x = canvas_width / 2
    center_y = canvas_height / 2
    base_size = 150 * zoom
    rad = math.radians(angle)

    perspective = math.cos(rad)
    side = math.sin(rad)
    phone_width = base_size * (0.6 + 0.4 * abs(perspective))
    phone_height = base_size * 1.8
    phone_depth = 20 * zoom

    left = center_x - phone_width / 2
    right = center_x + phone_width / 2
    top = center_y - phone_height / 2
    bottom = center_y + phone_height / 2

    side_edge: Optional[Polygon] = None
    if abs(side) > SIDE_VISIBLE_THRESHOLD:
        offset = phone_depth * abs(side)
        if side > 0:
            points = [(right, top), (right + offset, top), (right + offset, bottom), (right, bottom)]
        else:
            points = [(left, top), (left - offset, top), (left - offset, bottom), (left, bottom)]
        side_edge = Polygon(points=points, fill=adjust_brightness(body_color, -40 if side > 0 else 40))

    camera: List[Circle] = []
    if abs(perspective) > CAMERA_VISIBLE_THRESHOLD:
        camera_size = 12 * zoom
        cx = center_x - phone_width / 3
        cy = top + 30
        camera = [
            Circle(cx=cx, cy=cy, radius=camera_size, fill="#1a1a1a"),
            Circle(cx=cx, cy=cy, radius=camera_size * 0.7, fill="#4a5568"),
        ]

    return PhoneFrameOut(
        angle=angle,
        zoom=zoom,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        perspective=perspective,
        side_visible=side,
        phone_width=phone_width,
        phone_height=phone_height,
        phone_depth=phone_depth,
        background=[GradientStop(offset=0, color="#f8fafc"), GradientStop(offset=1, color="#e2e8f0")],
        shadow=Ellipse(
            cx=center_x + side * 10,
            cy=center_y + base_size + 20,
            rx=base_size * 0.8,
            ry=base_size * 0.2,
            fill="rgba(0, 0, 0, 0.1)",
        ),
        face=Rect(x=left, y=top, width=phone_width, height=phone_height),
        face_gradient=[
            GradientStop(offset=0, color=body_color),
            GradientStop(offset=0.5, color=adjust_brightness(body_color, 20)),
            GradientStop(offset=1, color=adjust_brightness(body_color, -20)),
        ],
        side_edge=side_edge,
        screen=Rect(
            x=left + SCREEN_INSET,
            y=top + SCREEN_INSET,
            width=phone_width - SCREEN_INSET * 2,
            height=phone_height - SCREEN_INSET * 2,
        ),
        screen_gradient=[
            GradientStop(offset=0, color="#000000"),
            GradientStop(offset=0.5, color="#1a1a1a"),
            GradientStop(offset=1, color="#000000"),
        ],
        reflection_gradient=[
            GradientStop(offset=0, color="rgba(255, 255, 255, 0.15)"),
            GradientStop(offset=0.5, color="rgba(255, 255, 255, 0.05)"),
            GradientStop(offset=1, color="rgba(255, 255, 255, 0.1)"),
        ],
        camera=camera,
        brand_label=TextLabel(
            text=brand.upper(),
            x=center_x,
            y=bottom - 30,
            font=f"{12 * zoom:g}px Arial",
            color="#666666",
        ),
        info_panel=[
            f'Screen: {dims.screen_size:g}"',
            f"Size: {dims.width:g}×{dims.height:g}mm",
            f"Thickness: {dims.depth:g}mm",
            f"Rotation: {round_half_up(angle)}°",
            f"Zoom: {round_half_up(zoom * 100)}%",
        ],
    )


# -----------------------------
# Essayage AR
# -----------------------------
def ar_overlay(*, brand: str, x: float, y: float, scale: float = 1.0, hand: str = "medium") -> OverlayOut:
    """Téléphone à l'échelle centré en (x, y) ; la taille de main multiplie l'échelle."""
    _require_finite(x=x, y=y, scale=scale)
    dims = device_dimensions(brand)
    effective = scale * hand_scale(hand)
    width = 100 * effective
    height = (dims.height / dims.width) * width

    return OverlayOut(
        dimensions=dims,
        color=brand_color(brand),
        scale=effective,
        body=Rect(x=x - width / 2, y=y - height / 2, width=width, height=height),
        screen=Rect(x=x - width / 2.2, y=y - height / 2.1, width=width / 1.1, height=height / 1.05),
        labels=[
            TextLabel(text=f'{dims.screen_size:g}" Screen', x=x, y=y - 60, font="14px Arial"),
            TextLabel(text=f"{dims.width:g} × {dims.height:g} mm", x=x, y=y + 60, font="12px Arial"),
        ],
    )


# -----------------------------
# Comparaison AR
# -----------------------------
def side_by_side_layout(refs: Sequence[str], *, spacing: float = 150, center_x: float = 300, y: float = 250) -> LayoutOut:
    start_x = center_x - ((len(refs) - 1) * spacing) / 2
    positions = [
        LayoutPosition(mobile=ref, index=i, x=start_x + i * spacing, y=y)
        for i, ref in enumerate(refs)
    ]
    return LayoutOut(mode="side-by-side", positions=positions)


def overlay_layout(refs: Sequence[str], *, center_x: float = 350, center_y: float = 250, radius: float = 50) -> LayoutOut:
    n = len(refs)
    positions = [
        LayoutPosition(
            mobile=ref,
            index=i,
            x=center_x + math.cos(i * 2 * math.pi / n) * radius,
            y=center_y + math.sin(i * 2 * math.pi / n) * radius,
        )
        for i, ref in enumerate(refs)
    ]
    connectors = [
        ((a.x, a.y), (b.x, b.y))
        for a, b in zip(positions, positions[1:])
    ]
    return LayoutOut(mode="overlay", positions=positions, connectors=connectors)
