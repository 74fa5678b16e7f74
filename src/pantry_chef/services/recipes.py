"""Prompt composition for recipe generation."""

from collections.abc import Sequence

from pantry_chef.domain.errors import InvalidInput
from pantry_chef.domain.recipes import Preferences

RECIPE_COUNT = 3

RECIPE_SYSTEM_PROMPT = (
    "You are an expert chef who creates detailed, practical recipes. "
    "Always respond with valid JSON only, no additional text."
)

_OUTPUT_CONTRACT = """

For each recipe, provide:
1. Recipe name
2. Brief description (1-2 sentences)
3. Cook time
4. Number of servings
5. Difficulty level (Easy/Medium/Hard)
6. Complete list of ingredients with measurements
7. Step-by-step cooking instructions
8. Nutritional information per serving (calories, protein, carbs, fat)

Format your response as a JSON array with the following structure:
[
  {
    "name": "Recipe Name",
    "description": "Brief description",
    "cookTime": "30 minutes",
    "servings": "4 servings",
    "difficulty": "Easy",
    "ingredients": ["ingredient 1 with measurement", "ingredient 2 with measurement"],
    "instructions": ["step 1", "step 2"],
    "nutrition": {
      "calories": "350 kcal",
      "protein": "25g",
      "carbs": "40g",
      "fat": "12g"
    }
  }
]

Prioritize recipes that maximize the use of the provided ingredients. \
Be creative but practical."""


def build_recipe_prompt(
    ingredients: Sequence[str], preferences: Preferences | None = None
) -> str:
    """Compose the recipe generation prompt for the given ingredients."""
    if not ingredients:
        raise InvalidInput("No ingredients provided")
    resolved = preferences or Preferences()
    prompt = (
        "You are an expert chef and nutritionist. "
        f"Based on the following ingredients: {', '.join(ingredients)}, "
        f"suggest {RECIPE_COUNT} delicious recipes."
    )
    dietary = (resolved.dietary or "").strip()
    if dietary:
        prompt += f" The recipes should be {dietary}."
    cuisine = (resolved.cuisine or "").strip()
    if cuisine:
        prompt += f" Focus on {cuisine} cuisine."
    return prompt + _OUTPUT_CONTRACT
