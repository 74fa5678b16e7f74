"""Orchestration of image analysis and recipe search."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pantry_chef.domain.errors import (
    ModelCallError,
    RecipeGenerationFailed,
    Unconfigured,
)
from pantry_chef.domain.recipes import Preferences, Recipe
from pantry_chef.services.completions import CompletionClient
from pantry_chef.services.recipe_parser import parse_recipe_response
from pantry_chef.services.recipes import RECIPE_SYSTEM_PROMPT, build_recipe_prompt
from pantry_chef.services.vision import IngredientExtractionService

logger = logging.getLogger(__name__)


@dataclass
class ChefService:
    """Application service behind the analyze-image and find-recipes operations.

    Neither operation touches the pantry; committing ingredients after a
    successful search is left to the caller.
    """

    client: CompletionClient
    extraction_service: IngredientExtractionService
    model: str
    configured: bool = True
    temperature: float | None = 0.8
    max_output_tokens: int | None = 3000

    async def analyze_image(
        self, image_bytes: bytes | None, mime_type: str | None = None
    ) -> list[str]:
        """Return the ingredients detected in an uploaded photo."""
        return await self.extraction_service.extract(image_bytes, mime_type)

    async def find_recipes(
        self, ingredients: Sequence[str], preferences: Preferences | None = None
    ) -> list[Recipe]:
        """Generate recipes for the merged ingredient list."""
        if not self.configured:
            raise Unconfigured("OpenAI API key not configured")
        prompt = build_recipe_prompt(ingredients, preferences)
        try:
            reply = await self.client.complete(
                model=self.model,
                prompt=prompt,
                instructions=RECIPE_SYSTEM_PROMPT,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except ModelCallError as exc:
            logger.warning("Recipe generation failed: %s", exc)
            raise RecipeGenerationFailed(str(exc) or "Failed to find recipes") from exc
        recipes = parse_recipe_response(reply or "[]")
        logger.info(
            "Generated recipes",
            extra={"ingredient_count": len(ingredients), "recipe_count": len(recipes)},
        )
        return recipes
