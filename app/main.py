# app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import close_woo_client
from app.api.error_handlers import register_exception_handlers
from app.api.routers import (
    attributes,
    categories,
    diagnostics,
    media,
    missing_products,
    products,
    views,
)
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.core.metrics import export_metrics
from app.middleware import (
    REQUEST_ID_HEADER,
    ObservabilityMiddleware,
    PayloadLimitMiddleware,
    SecurityHeadersMiddleware,
)

setup_logging()
logger = get_logger("app.main")

# --- Metadatos de la API para la documentación ---
TAGS_METADATA = [
    {"name": "products", "description": "Consulta y gestion de monedas y billetes en WooCommerce."},
    {"name": "attributes", "description": "Terminos de los atributos pais, calidad y año de emision."},
    {"name": "categories", "description": "Categorias de productos."},
    {"name": "media", "description": "Subida de imagenes (anverso y reverso) a WordPress."},
    {"name": "missing-products", "description": "Piezas que faltan en la coleccion por pais."},
    {"name": "views", "description": "Vistas del panel: estadisticas, paises, detalle y coleccion."},
    {"name": "diagnostics", "description": "Prueba de conexion y estado de la cache."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("Starting API", extra={"wp_url": settings.WP_URL})
    yield
    await close_woo_client()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description=(
        "Panel de inventario para una coleccion de monedas y billetes.\n\n"
        "- **Products**: consulta por pais y visibilidad, alta, edicion y baja de piezas privadas.\n"
        "- **Attributes / Categories**: opciones para los formularios.\n"
        "- **Media**: subida de imagenes a la biblioteca de WordPress.\n"
        "- **Views**: filtros y ordenamientos del panel calculados en el servidor.\n\n"
        "WooCommerce es la fuente de verdad; esta API solo hace de proxy."
    ),
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# --- Middlewares ---
app.add_middleware(PayloadLimitMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(ObservabilityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)

register_exception_handlers(app)

# --- Routers ---
app.include_router(products.router, prefix=settings.API_PREFIX)
app.include_router(attributes.router, prefix=settings.API_PREFIX)
app.include_router(categories.router, prefix=settings.API_PREFIX)
app.include_router(media.router, prefix=settings.API_PREFIX)
app.include_router(missing_products.router, prefix=settings.API_PREFIX)
app.include_router(views.router, prefix=settings.API_PREFIX)
app.include_router(diagnostics.router, prefix=settings.API_PREFIX)


@app.get("/metrics", include_in_schema=False)
def metrics():
    payload, content_type = export_metrics()
    return Response(content=payload, media_type=content_type)


# --- Endpoint raíz ---
@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "docs_url": "/docs", "redoc_url": "/redoc"}
