"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tracker.config import get_settings
from tracker.seed import seed
from tracker.store import get_store, reset_store

logger = logging.getLogger("tracker")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings = get_settings()
    store = get_store()
    if settings.SEED_DEMO_DATA and not store.equipment:
        seed(store)
    logger.info(
        "%s ready: %d equipment, %d maintenance records in memory",
        settings.APP_NAME, len(store.equipment), len(store.maintenance),
    )
    yield
    # Shutdown: in-memory state is discarded
    reset_store()


settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# ── API routers ──
from tracker.api.dashboard import router as dashboard_router
from tracker.api.equipment import router as equipment_router
from tracker.api.maintenance import router as maintenance_router
from tracker.api.pages import router as pages_router
from tracker.api.view import router as view_router

app.include_router(view_router, prefix="/api/v1")
app.include_router(equipment_router, prefix="/api/v1")
app.include_router(maintenance_router, prefix="/api/v1")
app.include_router(dashboard_router, prefix="/api/v1")
app.include_router(pages_router)
