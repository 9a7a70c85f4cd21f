from __future__ import annotations

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .router import api_router
from formgrid.lib.settings import EnvSettings
from formgrid.service.pipeline_service import PipelineService


def create_app() -> FastAPI:
    load_dotenv()
    settings = EnvSettings()

    swagger_enabled = settings.get_bool("SWAGGER_ENABLED", True)
    app = FastAPI(
        title="formgrid",
        version="0.1.0",
        docs_url="/docs" if swagger_enabled else None,
        redoc_url="/redoc" if swagger_enabled else None,
        openapi_url="/openapi.json" if swagger_enabled else None,
    )

    # CORS
    raw_origins = settings.get("ALLOWED_CORS_ORIGINS", "*")
    origins: List[str] = [o.strip() for o in raw_origins.split(",") if o.strip()] or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    # layouts are parsed once at startup, not per request
    app.state.settings = settings
    app.state.pipeline = PipelineService(settings=settings)

    return app


app = create_app()
