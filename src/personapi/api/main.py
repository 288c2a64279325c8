# src/personapi/api/main.py
from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personapi.api.deps import store_backend
from personapi.api.routes.person import router as person_router
from personapi.logging import get_logger

logger = get_logger(__file__)

# local frontends (CRA and Vite dev servers)
DEV_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


def cors_options() -> dict:
    """CORS middleware settings from ``PERSONAPI_CORS_*``."""

    raw_origins = os.getenv("PERSONAPI_CORS_ORIGINS") or ""
    origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    credentials = (os.getenv("PERSONAPI_CORS_ALLOW_CREDENTIALS") or "").strip().lower()
    return {
        "allow_origins": origins or list(DEV_ORIGINS),
        "allow_credentials": credentials in {"1", "true", "yes", "on"},
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["*"],
    }


def create_app() -> FastAPI:
    backend = store_backend()

    app = FastAPI(title="personapi")
    app.add_middleware(CORSMiddleware, **cors_options())

    @app.get("/status")
    def status():
        return {"ok": True}

    app.include_router(person_router)
    logger.info("person api ready (store=%s)", backend)
    return app


app = create_app()
