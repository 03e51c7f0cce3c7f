"""
Pothole Dashboard — FastAPI Application Entry Point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from pothole_dashboard.config import DATABASE_URL, HOST, LOG_LEVEL, PORT, STATIC_DIR
from pothole_dashboard.errors import StorageUnavailable
from pothole_dashboard.store import DetectionStore

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s — %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("pothole_dashboard")


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: open & seed the store. Shutdown: close it."""
    store: DetectionStore = app.state.store
    logger.info("Starting Pothole Dashboard...")
    try:
        store.open()
        store.seed_if_empty()
    except StorageUnavailable as e:
        logger.error("Detection store unavailable at startup: %s", e)
    logger.info("Pothole Dashboard is ready.")
    yield
    logger.info("Shutting down Pothole Dashboard...")
    store.close()
    logger.info("Goodbye.")


# ── App ────────────────────────────────────────────────────────────────

def create_app(store: DetectionStore | None = None) -> FastAPI:
    """Build the application around a store (defaults to DATABASE_URL)."""
    app = FastAPI(
        title="Pothole Dashboard",
        description="Pothole detection records, map and analytics",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else DetectionStore(DATABASE_URL)

    # ── Routes ─────────────────────────────────────────────────────────

    from pothole_dashboard.routes.detections import router as detections_router
    from pothole_dashboard.routes.pages import router as pages_router

    app.include_router(detections_router)
    app.include_router(pages_router)

    # ── Static Files ───────────────────────────────────────────────────

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app


app = create_app()


def run():
    """Console entry point."""
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
