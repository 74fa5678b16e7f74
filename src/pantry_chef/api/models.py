"""Pydantic models for the HTTP request and response bodies."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from pantry_chef.domain.pantry import Ingredient


class FindRecipesRequest(BaseModel):
    """Recipe search payload."""

    ingredients: list[str] = Field(default_factory=list)
    dietary: str | None = None
    cuisine: str | None = None
    include_pantry: bool = True


class AddIngredientRequest(BaseModel):
    """Pantry insert payload."""

    name: str


class IngredientPayload(BaseModel):
    """Pantry entry as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    added_at: datetime = Field(alias="addedAt")

    @classmethod
    def from_domain(cls, ingredient: Ingredient) -> "IngredientPayload":
        """Build a payload from a domain ingredient."""
        return cls(id=ingredient.id, name=ingredient.name, added_at=ingredient.added_at)


class PantryResponse(BaseModel):
    """Pantry listing."""

    ingredients: list[IngredientPayload]
