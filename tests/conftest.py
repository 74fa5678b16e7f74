"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from pantry_chef.config import Settings
from pantry_chef.containers import AppContainer
from pantry_chef.domain.errors import ModelCallError
from pantry_chef.domain.pantry import Ingredient
from pantry_chef.services.chef import ChefService
from pantry_chef.services.completions import CompletionClient
from pantry_chef.services.pantry import PantryService, PantrySnapshotStore
from pantry_chef.services.vision import IngredientExtractionService

RECIPE_REPLY = """```json
[
  {
    "name": "Vegan Sugar Cookies",
    "description": "Soft cookies without eggs.",
    "cookTime": "25 minutes",
    "servings": "12 cookies",
    "difficulty": "Easy",
    "ingredients": ["2 cups flour", "1 cup sugar"],
    "instructions": ["Mix", "Bake at 180C for 12 minutes"],
    "nutrition": {
      "calories": "120 kcal",
      "protein": "2g",
      "carbs": "20g",
      "fat": "4g"
    }
  }
]
```"""


@dataclass
class InMemoryPantryStore(PantrySnapshotStore):
    """In-memory pantry snapshot store for tests."""

    snapshot: list[Ingredient] = field(default_factory=list)
    saves: int = 0

    def load(self) -> list[Ingredient]:
        return list(self.snapshot)

    def save(self, ingredients: list[Ingredient]) -> None:
        self.snapshot = list(ingredients)
        self.saves += 1


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client that records calls and returns a fixed reply."""

    reply: str = "cherry tomatoes, basil, mozzarella"
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        instructions: str | None = None,
        image_data_url: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "prompt": prompt,
                "instructions": instructions,
                "image_data_url": image_data_url,
                "temperature": temperature,
                "max_output_tokens": max_output_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


def failing_client(message: str = "Rate limit reached") -> FakeCompletionClient:
    """Return a client whose every call fails upstream."""
    return FakeCompletionClient(error=ModelCallError(message))


def build_chef_service(
    client: CompletionClient, *, configured: bool = True
) -> ChefService:
    """Wire a chef service around a single completion client."""
    return ChefService(
        client=client,
        extraction_service=IngredientExtractionService(
            client=client, model="gpt-4o", configured=configured
        ),
        model="gpt-4o",
        configured=configured,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="openai-key",
        pantry_backend="file",
        environment="test",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def pantry_store() -> InMemoryPantryStore:
    return InMemoryPantryStore()


@pytest.fixture
def container(
    settings: Settings,
    completion_client: FakeCompletionClient,
    pantry_store: InMemoryPantryStore,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        pantry_service=PantryService(pantry_store),
        chef_service=build_chef_service(completion_client),
        close_resources=close_resources,
    )
