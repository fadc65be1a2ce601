from __future__ import annotations
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.catalog import build_default_catalog
from services.device_client import build_default_device_client


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    build_default_catalog()
    client = build_default_device_client()
    try:
        yield
    finally:
        client.close()
        build_default_device_client.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Awair Exporter",
        description="Re-exposes an Awair device's local air-data API as Prometheus metrics.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
