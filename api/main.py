from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
import logging

from sqlmodel import Session

from .config import settings
from .logging_config import configure_logging
from .db import engine, init_db
from .routes.recipes import router as recipes_router
from .routes.nutrition import router as nutrition_router
from .routes.profile import router as profile_router
from .routes.favorites import router as favorites_router
from .routes.admin import router as admin_router
from .middleware.size_limit import SizeLimitMiddleware
from .errors import install_exception_handlers
from .services.seed import seed_recipes
from .storage.sql import SqlStorage
from .storage import provider
from prometheus_fastapi_instrumentator import Instrumentator

configure_logging()
logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "recipes", "description": "Catálogo y búsqueda por 4 ingredientes con filtros y orden."},
    {"name": "nutrition", "description": "Objetivos diarios, registro de comidas y resumen del día."},
    {"name": "profile", "description": "Perfil biométrico y objetivos sugeridos (Mifflin-St Jeor)."},
    {"name": "favorites", "description": "Recetas favoritas del usuario."},
    {"name": "admin", "description": "Seeds de datos de desarrollo."},
]

app = FastAPI(
    title="Recetario Nutricional API",
    version="0.1.0",
    description="Búsqueda de recetas por ingredientes y seguimiento nutricional diario.",
    default_response_class=ORJSONResponse,
    openapi_tags=TAGS_METADATA,
    license_info={"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_allow_origins.split(",")] if settings.cors_allow_origins != "*" else ["*"],
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=[m.strip() for m in settings.cors_allow_methods.split(",")] if settings.cors_allow_methods != "*" else ["*"],
    allow_headers=[h.strip() for h in settings.cors_allow_headers.split(",")] if settings.cors_allow_headers != "*" else ["*"],
)

# Middlewares
app.add_middleware(SizeLimitMiddleware)     # 413 si Content-Length excede

# Prometheus
instrumentator = Instrumentator().instrument(app)
instrumentator.expose(app, include_in_schema=False, endpoint="/metrics")

# Exception handlers
install_exception_handlers(app)

def _seed(storage) -> None:
    created = seed_recipes(storage)
    logger.info("Startup seed: %d new recipes (%s storage)", created, settings.storage_backend)

@app.on_event("startup")
def startup():
    if settings.storage_backend == "memory":
        if settings.seed_on_startup:
            _seed(provider.memory_storage)
        return
    init_db()
    if settings.seed_on_startup:
        with Session(engine, expire_on_commit=False) as session:
            _seed(SqlStorage(session))

# Routers
app.include_router(recipes_router)
app.include_router(nutrition_router)
app.include_router(profile_router)
app.include_router(favorites_router)
app.include_router(admin_router)


@app.get("/health", tags=["admin"], summary="Healthcheck simple")
def health():
    return {"status": "ok", "storage": settings.storage_backend, "env": settings.service_env}

# --- OpenAPI servers ---
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=TAGS_METADATA,
    )
    schema["servers"] = [{"url": settings.server_public_url, "description": f"{settings.service_env}"}]
    app.openapi_schema = schema
    return app.openapi_schema
app.openapi = custom_openapi  # type: ignore
