from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel

Point = Tuple[float, float]
HandSize = Literal["small", "medium", "large"]
LayoutMode = Literal["side-by-side", "overlay"]


# ---------- PRIMITIVES DE DESSIN ----------

class Rect(BaseModel):
    x: float
    y: float
    width: float
    height: float


class GradientStop(BaseModel):
    offset: float
    color: str


class Circle(BaseModel):
    cx: float
    cy: float
    radius: float
    fill: str


class Ellipse(BaseModel):
    cx: float
    cy: float
    rx: float
    ry: float
    fill: str


class Polygon(BaseModel):
    points: List[Point]
    fill: str


class TextLabel(BaseModel):
    text: str
    x: float
    y: float
    font: str
    color: str = "#FFFFFF"


# ---------- OUT ----------

class DeviceDimensionsOut(BaseModel):
    """Dimensions physiques en mm (screen_size en pouces)."""
    width: float
    height: float
    depth: float
    screen_size: float


class ModelVertices(BaseModel):
    # listes plates x, y, z
    body: List[float]
    screen: List[float]


class PhoneModelOut(BaseModel):
    brand: str
    dimensions: DeviceDimensionsOut
    vertices: ModelVertices
    textures: List[str]
    materials: Dict[str, Dict[str, Any]]
    animations: Dict[str, Dict[str, Any]]


class PhoneFrameOut(BaseModel):
    """Une image de la vue 360° : tout ce qu'un client doit dessiner pour cet angle."""
    angle: float
    zoom: float
    canvas_width: int
    canvas_height: int
    perspective: float
    side_visible: float
    phone_width: float
    phone_height: float
    phone_depth: float
    background: List[GradientStop]
    shadow: Ellipse
    face: Rect
    face_gradient: List[GradientStop]
    side_edge: Optional[Polygon] = None
    screen: Rect
    screen_gradient: List[GradientStop]
    reflection_gradient: List[GradientStop]
    camera: List[Circle] = []
    brand_label: TextLabel
    info_panel: List[str]


class OverlayOut(BaseModel):
    """Placement du téléphone virtuel sur l'image caméra (essayage AR)."""
    dimensions: DeviceDimensionsOut
    color: str
    scale: float
    body: Rect
    screen: Rect
    labels: List[TextLabel]


class LayoutPosition(BaseModel):
    mobile: str  # "brand/slug"
    index: int
    x: float
    y: float


class LayoutOut(BaseModel):
    mode: LayoutMode
    positions: List[LayoutPosition]
    # en mode overlay : segments pointillés entre positions consécutives
    connectors: List[Tuple[Point, Point]] = []
