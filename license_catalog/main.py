import logging

from fastapi import FastAPI

from license_catalog.config import load_config
from license_catalog.features.catalog.api import router as catalog_router
from license_catalog.features.catalog.web import router as catalog_web_router
from license_catalog.web.health import router as health_router


def create_app() -> FastAPI:
    cfg = load_config()
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = FastAPI(title="License Catalog", version="0.1.0")
    app.state.cfg = cfg
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(catalog_web_router)
    return app


app = create_app()
