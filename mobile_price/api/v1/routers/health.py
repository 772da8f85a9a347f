from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Vérifier que l'API répond")
def health():
    return {"status": "ok"}
