"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from buildergen.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Builder Generator",
        description="Rule-based builder class generator for Java classes and records",
        version="0.1.0",
    )

    # Editor plugins call in from arbitrary local origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
