"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from pantry_chef.api.models import (
    AddIngredientRequest,
    FindRecipesRequest,
    IngredientPayload,
    PantryResponse,
)
from pantry_chef.app_logging import configure_logging
from pantry_chef.containers import AppContainer
from pantry_chef.domain.errors import InvalidInput, Unconfigured, UpstreamFailure
from pantry_chef.domain.recipes import Preferences
from pantry_chef.preferences import preference_options


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(Unconfigured)
    async def unconfigured_handler(
        request: Request, exc: Unconfigured
    ) -> JSONResponse:
        return JSONResponse(status_code=503, content={"error": str(exc)})

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(
        request: Request, exc: InvalidInput
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(UpstreamFailure)
    async def upstream_failure_handler(
        request: Request, exc: UpstreamFailure
    ) -> JSONResponse:
        logger.error("Model call failed", extra={"path": request.url.path})
        return JSONResponse(
            status_code=502,
            content=_error_body(request.app.state.container, exc),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/analyze-image")
    async def analyze_image(
        request: Request, image: UploadFile | None = File(default=None)
    ) -> dict[str, list[str]]:
        """Detect ingredients in an uploaded photo."""
        state_container: AppContainer = request.app.state.container
        image_bytes = await image.read() if image is not None else None
        content_type = image.content_type if image is not None else None
        ingredients = await state_container.chef_service.analyze_image(
            image_bytes, content_type
        )
        return {"ingredients": ingredients}

    @app.post("/api/find-recipes")
    async def find_recipes(
        payload: FindRecipesRequest, request: Request
    ) -> dict[str, list[dict[str, object]]]:
        """Suggest recipes, then commit the submitted ingredients to the pantry."""
        state_container: AppContainer = request.app.state.container
        pantry = state_container.pantry_service
        merged = list(payload.ingredients)
        if payload.include_pantry:
            merged.extend(pantry.list_names())
        recipes = await state_container.chef_service.find_recipes(
            merged,
            Preferences(dietary=payload.dietary, cuisine=payload.cuisine),
        )
        pantry.add_ingredients(payload.ingredients)
        return {
            "recipes": [
                recipe.model_dump(by_alias=True, exclude_none=True)
                for recipe in recipes
            ]
        }

    @app.get("/api/pantry")
    def list_pantry(request: Request) -> PantryResponse:
        """Return the pantry contents."""
        return _pantry_response(request.app.state.container)

    @app.post("/api/pantry")
    def add_to_pantry(
        payload: AddIngredientRequest, request: Request
    ) -> PantryResponse:
        """Add a single ingredient to the pantry."""
        state_container: AppContainer = request.app.state.container
        state_container.pantry_service.add_ingredient(payload.name)
        return _pantry_response(state_container)

    @app.delete("/api/pantry/{ingredient_id}")
    def remove_from_pantry(
        ingredient_id: str, request: Request
    ) -> PantryResponse:
        """Remove one ingredient from the pantry."""
        state_container: AppContainer = request.app.state.container
        state_container.pantry_service.remove_ingredient(ingredient_id)
        return _pantry_response(state_container)

    @app.delete("/api/pantry")
    def clear_pantry(request: Request) -> PantryResponse:
        """Remove every ingredient from the pantry."""
        state_container: AppContainer = request.app.state.container
        state_container.pantry_service.clear_pantry()
        return _pantry_response(state_container)

    @app.get("/api/preferences")
    async def preferences() -> dict[str, list[dict[str, str]]]:
        """Return the dietary and cuisine options."""
        return preference_options()

    return app


def _pantry_response(state_container: AppContainer) -> PantryResponse:
    """Build the pantry listing response."""
    return PantryResponse(
        ingredients=[
            IngredientPayload.from_domain(item)
            for item in state_container.pantry_service.list_ingredients()
        ]
    )


def _error_body(state_container: AppContainer, exc: Exception) -> dict[str, str]:
    """Return an error body with debug info in local environments."""
    body = {"error": str(exc)}
    if state_container.settings.environment == "local":
        body["debug"] = f"{type(exc).__name__}: {exc}".strip()
    return body
