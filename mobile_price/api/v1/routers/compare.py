from typing import List

from fastapi import APIRouter, Depends, Query

from mobile_price.api.v1.dependencies import get_compare_service, mobile_refs
from mobile_price.features.compare.schemas import CompareOut
from mobile_price.features.compare.services import CompareService
from mobile_price.features.viewer.schemas import LayoutMode, LayoutOut

router = APIRouter(
    prefix="/compare",
    tags=["compare"],
    responses={400: {"description": "Références invalides"}, 404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Comparer 2 à 3 mobiles",
    response_model=CompareOut,
)
def compare(
    refs: List[str] = Depends(mobile_refs),
    svc: CompareService = Depends(get_compare_service),
):
    return svc.compare(refs)


@router.get(
    "/layout",
    summary="Disposition des mobiles comparés dans la vue AR",
    response_model=LayoutOut,
)
def layout(
    refs: List[str] = Depends(mobile_refs),
    mode: LayoutMode = Query("side-by-side"),
    svc: CompareService = Depends(get_compare_service),
):
    return svc.layout(refs, mode)
