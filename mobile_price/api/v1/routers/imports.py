from fastapi import APIRouter, Depends, status

from mobile_price.api.v1.dependencies import get_import_service
from mobile_price.features.imports.schemas import ImportIn, ImportResultOut
from mobile_price.features.imports.services import ImportService

router = APIRouter(
    prefix="/admin/import",
    tags=["admin"],
)


@router.post(
    "",
    summary="Importer des fiches brutes (marques et mobiles manquants)",
    response_model=ImportResultOut,
    status_code=status.HTTP_200_OK,
)
def import_phones(payload: ImportIn, svc: ImportService = Depends(get_import_service)):
    return svc.import_phones(payload.phones)
