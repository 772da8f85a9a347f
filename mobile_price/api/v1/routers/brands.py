from typing import List

from fastapi import APIRouter, Depends, status

from mobile_price.api.v1.dependencies import get_brand_service
from mobile_price.features.brands.schemas import BrandCreateIn, BrandOut, BrandUpdateIn
from mobile_price.features.brands.services import BrandService

router = APIRouter(
    prefix="/brands",
    tags=["brands"],
    responses={404: {"description": "Not Found"}},
)

admin_router = APIRouter(
    prefix="/admin/brands",
    tags=["admin"],
    responses={404: {"description": "Not Found"}},
)


# -----------------------------
# Public
# -----------------------------
@router.get(
    "",
    summary="Lister les marques",
    response_model=List[BrandOut],
)
def list_brands(svc: BrandService = Depends(get_brand_service)):
    return svc.list_all()


@router.get(
    "/{slug}",
    summary="Récupérer une marque par son slug",
    response_model=BrandOut,
)
def get_brand(slug: str, svc: BrandService = Depends(get_brand_service)):
    return svc.get_by_slug(slug)


# -----------------------------
# Admin
# -----------------------------
@admin_router.post(
    "",
    summary="Créer une marque",
    response_model=BrandOut,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Slug déjà utilisé"}},
)
def create_brand(payload: BrandCreateIn, svc: BrandService = Depends(get_brand_service)):
    return svc.create(payload)


@admin_router.put(
    "/{brand_id}",
    summary="Mettre à jour une marque (partiel)",
    response_model=BrandOut,
    responses={409: {"description": "Slug déjà utilisé"}},
)
def update_brand(brand_id: str, payload: BrandUpdateIn, svc: BrandService = Depends(get_brand_service)):
    return svc.update(brand_id, payload)


@admin_router.delete(
    "/{brand_id}",
    summary="Supprimer une marque",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_brand(brand_id: str, svc: BrandService = Depends(get_brand_service)):
    svc.delete(brand_id)
    return None
