from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from firmness.api.router import router as api_router
from firmness.config.logging import configure_logging
from firmness.config.settings import settings
from firmness.core.middleware import register_middlewares
from firmness.db.init_db import init_db


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures logging, title, version and debug mode from Settings.
    - Registers CORS and the request tracking middleware.
    - Includes the API router under the configured prefix.
    """
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middlewares(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok", "version": settings.API_VERSION}

    # Schema creation and role seeding; production databases are managed elsewhere
    @app.on_event("startup")
    def on_startup() -> None:
        if not settings.is_production():
            init_db()

    return app


app = create_app()
