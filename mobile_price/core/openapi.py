"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec les conventions de l'API
(format des erreurs, stockage, filtres du catalogue).
"""

from fastapi.openapi.utils import get_openapi

from mobile_price.core.config import settings


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de comparaison de prix de mobiles (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Les champs JSON sont en snake_case.\n"
            "- Erreur de schéma : `400 {\"detail\": \"Invalid request data\", \"errors\": [...]}`.\n"
            "- Entité absente : `404`, slug déjà utilisé : `409`.\n"
            "- `GET /api/mobiles` : un seul filtre appliqué, `brand` > `featured` > `search`.\n"
            f"- Stockage courant : `{settings.STORAGE_BACKEND}`.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
