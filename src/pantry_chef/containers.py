"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from pantry_chef.adapters.json_file_pantry_store import JsonFilePantryStore
from pantry_chef.adapters.openai_completion_client import OpenAICompletionClient
from pantry_chef.adapters.supabase_pantry_store import SupabasePantryStore
from pantry_chef.config import PLACEHOLDER_API_KEY, Settings, is_api_key_configured
from pantry_chef.services.chef import ChefService
from pantry_chef.services.pantry import PantryService, PantrySnapshotStore
from pantry_chef.services.vision import IngredientExtractionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pantry_service: PantryService
    chef_service: ChefService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configured = is_api_key_configured(resolved_settings.openai_api_key)
    # the SDK refuses a missing key; services reject before any call instead
    openai_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key if configured else PLACEHOLDER_API_KEY
    )
    extraction_service = IngredientExtractionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        configured=configured,
        max_output_tokens=resolved_settings.openai_vision_max_output_tokens,
    )
    chef_service = ChefService(
        client=openai_client,
        extraction_service=extraction_service,
        model=resolved_settings.openai_model,
        configured=configured,
        temperature=resolved_settings.openai_recipe_temperature,
        max_output_tokens=resolved_settings.openai_recipe_max_output_tokens,
    )
    pantry_service = PantryService(_build_pantry_store(resolved_settings))

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        pantry_service=pantry_service,
        chef_service=chef_service,
        close_resources=close_resources,
    )


def _build_pantry_store(settings: Settings) -> PantrySnapshotStore:
    """Select the pantry persistence backend from settings."""
    if settings.pantry_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase pantry backend requires URL and service key")
        supabase_client = create_client(
            settings.supabase_url, settings.supabase_service_key
        )
        return SupabasePantryStore(supabase_client, settings.pantry_namespace)
    if settings.pantry_backend == "file":
        return JsonFilePantryStore(
            Path(settings.pantry_file_path), settings.pantry_namespace
        )
    raise ValueError(f"Unknown pantry backend: {settings.pantry_backend}")
