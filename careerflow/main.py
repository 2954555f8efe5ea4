"""FastAPI application entry point for the CareerFlow generation service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careerflow.config import get_settings, setup_logging
from careerflow.routers.generate_router import router as generate_router

# Initialise logging early
setup_logging()
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "CareerFlow starting — model=%s provider_configured=%s",
            settings.groq_model,
            settings.provider_configured,
        )
        yield

    application = FastAPI(
        title="CareerFlow Generation Service",
        description=(
            "Turns resume blurbs, interview answers and LinkedIn bios into "
            "polished text by filling a prompt template per request type and "
            "calling a hosted chat-completion model."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS — allow all origins during development
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(generate_router)

    # Every failure uses the same 500 {error} envelope, malformed bodies included
    @application.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        logger.warning("Invalid request body on %s: %s", request.url.path, details)
        return JSONResponse(status_code=500, content={"error": f"Invalid request: {details}"})

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "careerflow.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
