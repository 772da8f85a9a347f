"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

CORS (origines autorisées depuis settings.CORS_ORIGINS)

logs (handler console + trace de chaque requête /api)

gestion d'erreurs (400 pour la validation, 500 générique)

schéma OpenAPI personnalisé

Inclut les routers sous /api (ex : /api/brands, /api/admin/mobiles).

Au démarrage : remplit le catalogue en mémoire, ou crée les tables (backend database).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn mobile_price.main:app --reload.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

from mobile_price.core.config import settings
from mobile_price.core.errors import register_exception_handlers
from mobile_price.core.log_config import log_requests, setup_logging
from mobile_price.core.openapi import custom_openapi
from mobile_price.db.seed import seed_database, seed_memory_store
from mobile_price.db.session import engine, init_db

from mobile_price.api.v1.dependencies import memory_store
from mobile_price.api.v1.routers import brands, compare, health, imports, mobiles, viewer

import uvicorn

setup_logging()
logger = logging.getLogger("mobile_price")

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "brands", "description": "Catalogue des marques"},
        {"name": "mobiles", "description": "Catalogue des mobiles (filtres, recherche)"},
        {"name": "compare", "description": "Comparaison de 2 à 3 mobiles"},
        {"name": "viewer", "description": "Vue 360° et essayage AR"},
        {"name": "admin", "description": "Gestion du catalogue"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)
app.middleware("http")(log_requests)
register_exception_handlers(app)

# Routers
app.include_router(health.router, prefix="/api")
app.include_router(brands.router, prefix="/api")
app.include_router(brands.admin_router, prefix="/api")
app.include_router(mobiles.router, prefix="/api")
app.include_router(mobiles.admin_router, prefix="/api")
app.include_router(viewer.router, prefix="/api")
app.include_router(compare.router, prefix="/api")
app.include_router(imports.router, prefix="/api")

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    logger.info("Starting %s (env=%s, storage=%s)", settings.APP_NAME, settings.ENV, settings.STORAGE_BACKEND)
    if settings.STORAGE_BACKEND == "database":
        init_db()
        if settings.SEED_ON_STARTUP:
            with Session(engine) as session:
                seed_database(session, settings.SEED_PATH)
    elif not memory_store.brands:
        seed_memory_store(memory_store, settings.SEED_PATH)

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
