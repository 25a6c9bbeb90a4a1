from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.base import Base
from app.db.crud import BlobStore
from app.db.session import engine

import app.models

from app.routers import achievements, collections, places, route
from app.services.seed import load_seed_catalog, load_seed_collections
from app.services.session import TripSession

configure_logging(log_dir=settings.log_dir, level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="City Explorer", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def on_startup() -> None:
        Base.metadata.create_all(bind=engine)
        logger.info("Storage ready")

        app.state.trip_session = TripSession(
            blobs=BlobStore(),
            default_catalog=load_seed_catalog(settings.seed_dir),
            collections=load_seed_collections(settings.seed_dir),
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error")
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})
        duration_ms = int((time.time() - start) * 1000)
        logger.info("%s %s -> %s (%sms)", request.method, request.url.path, response.status_code, duration_ms)
        return response

    app.include_router(places.router)
    app.include_router(route.router)
    app.include_router(collections.router)
    app.include_router(achievements.router)

    return app


app = create_app()
