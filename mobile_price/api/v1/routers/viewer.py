from fastapi import APIRouter, Depends, Query

from mobile_price.api.v1.dependencies import get_viewer_service
from mobile_price.features.viewer import geometry
from mobile_price.features.viewer.schemas import HandSize, OverlayOut, PhoneFrameOut, PhoneModelOut
from mobile_price.features.viewer.services import ViewerService

router = APIRouter(
    prefix="/mobiles",
    tags=["viewer"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "/{brand}/{slug}/model",
    summary="Données du modèle 3D (sommets, textures, matériaux)",
    response_model=PhoneModelOut,
)
def get_model(brand: str, slug: str, svc: ViewerService = Depends(get_viewer_service)):
    return svc.model(brand, slug)


@router.get(
    "/{brand}/{slug}/frame",
    summary="Image de la vue 360° pour un angle donné",
    response_model=PhoneFrameOut,
)
def get_frame(
    brand: str,
    slug: str,
    angle: float = Query(0.0, allow_inf_nan=False, description="Angle de rotation en degrés"),
    zoom: float = Query(1.0, ge=geometry.ZOOM_MIN, le=geometry.ZOOM_MAX, allow_inf_nan=False),
    width: int = Query(400, ge=1, le=4000, description="Largeur du canvas"),
    height: int = Query(600, ge=1, le=4000, description="Hauteur du canvas"),
    svc: ViewerService = Depends(get_viewer_service),
):
    return svc.frame(brand, slug, angle=angle, zoom=zoom, canvas_width=width, canvas_height=height)


@router.get(
    "/{brand}/{slug}/overlay",
    summary="Placement de l'essayage AR",
    response_model=OverlayOut,
)
def get_overlay(
    brand: str,
    slug: str,
    x: float = Query(0.0, allow_inf_nan=False),
    y: float = Query(0.0, allow_inf_nan=False),
    scale: float = Query(1.0, gt=0, le=10, allow_inf_nan=False),
    hand: HandSize = Query("medium"),
    svc: ViewerService = Depends(get_viewer_service),
):
    return svc.overlay(brand, slug, x=x, y=y, scale=scale, hand=hand)
