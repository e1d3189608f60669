"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fishidy.api.catches import router as catches_router
from fishidy.api.models import IdentifyRequest
from fishidy.app_logging import configure_logging
from fishidy.config import parse_cors_origins
from fishidy.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Fishidy", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catches_router)

    @app.get("/health")
    @app.get("/api/health")
    async def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        payload = {"status": "ok"}
        if state_container.settings.api_base_url:
            payload["apiBaseUrl"] = state_container.settings.api_base_url
        return payload

    @app.post("/identify")
    @app.post("/api/identify-fish")
    async def identify(request: Request) -> JSONResponse:
        """Identify the fish in a stored photo and save the catch."""
        state_container: AppContainer = request.app.state.container
        identify_request = await _read_identify_request(request)
        if (
            identify_request is None
            or not identify_request.image_url
            or not identify_request.user_id
        ):
            return JSONResponse(
                status_code=400, content={"error": "Missing required fields"}
            )

        try:
            result = await state_container.identification_service.identify(
                image_key=identify_request.image_url,
                image_display_url=identify_request.image_download_url,
                user_id=identify_request.user_id,
                catch_details=identify_request.catch_details,
            )
        except Exception as exc:
            logger.exception(
                "Fish identification failed",
                extra={
                    "image_key": identify_request.image_url,
                    "user_id": identify_request.user_id,
                },
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Failed to identify fish",
                    "details": _error_details(state_container, exc),
                },
            )

        return JSONResponse(
            content={
                "id": str(result.catch_id),
                "identification": result.identification,
                "catchDetails": result.catch_details,
            }
        )

    return app


async def _read_identify_request(request: Request) -> IdentifyRequest | None:
    """Parse the identify body, returning None when it is not a usable object."""
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        return IdentifyRequest.model_validate(body)
    except ValidationError:
        return None


def _error_details(state_container: AppContainer, exc: Exception) -> str:
    """Return a best-effort failure detail, with the type name when local."""
    message = str(exc) or "Unknown error"
    if state_container.settings.environment == "local":
        return f"{type(exc).__name__}: {message}"
    return message
