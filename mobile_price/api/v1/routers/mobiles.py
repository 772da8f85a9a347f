from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from mobile_price.api.v1.dependencies import get_mobile_service
from mobile_price.features.mobiles.schemas import MobileCreateIn, MobileOut, MobileUpdateIn
from mobile_price.features.mobiles.services import MobileService

router = APIRouter(
    prefix="/mobiles",
    tags=["mobiles"],
    responses={404: {"description": "Not Found"}},
)

admin_router = APIRouter(
    prefix="/admin/mobiles",
    tags=["admin"],
    responses={404: {"description": "Not Found"}},
)


# -----------------------------
# Public
# -----------------------------
@router.get(
    "",
    summary="Lister les mobiles (filtre marque, mis en avant ou recherche)",
    response_model=List[MobileOut],
)
def list_mobiles(
    brand: Optional[str] = Query(None, description="Slug de la marque", examples=["apple"]),
    featured: Optional[bool] = Query(None, description="Uniquement les mobiles mis en avant"),
    search: Optional[str] = Query(None, description="Recherche dans nom / marque / modèle", examples=["iphone"]),
    svc: MobileService = Depends(get_mobile_service),
):
    return svc.list(brand=brand, featured=featured, search=search)


@router.get(
    "/{brand}/{slug}",
    summary="Récupérer un mobile par marque et slug",
    response_model=MobileOut,
)
def get_mobile(brand: str, slug: str, svc: MobileService = Depends(get_mobile_service)):
    return svc.get_by_slug(brand, slug)


# -----------------------------
# Admin
# -----------------------------
@admin_router.get(
    "/{mobile_id}",
    summary="Récupérer un mobile par id",
    response_model=MobileOut,
)
def get_mobile_by_id(mobile_id: str, svc: MobileService = Depends(get_mobile_service)):
    return svc.get(mobile_id)


@admin_router.post(
    "",
    summary="Créer un mobile",
    response_model=MobileOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Slug déjà utilisé pour cette marque"}},
)
def create_mobile(payload: MobileCreateIn, svc: MobileService = Depends(get_mobile_service)):
    return svc.create(payload)


@admin_router.put(
    "/{mobile_id}",
    summary="Mettre à jour un mobile (partiel)",
    response_model=MobileOut,
    responses={409: {"description": "Slug déjà utilisé pour cette marque"}},
)
def update_mobile(mobile_id: str, payload: MobileUpdateIn, svc: MobileService = Depends(get_mobile_service)):
    return svc.update(mobile_id, payload)


@admin_router.delete(
    "/{mobile_id}",
    summary="Supprimer un mobile",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_mobile(mobile_id: str, svc: MobileService = Depends(get_mobile_service)):
    svc.delete(mobile_id)
    return None
