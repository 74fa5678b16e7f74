"""Models for recipe requests and generated recipes."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


@dataclass(frozen=True)
class Preferences:
    """Optional dietary and cuisine constraints for recipe generation."""

    dietary: str | None = None
    cuisine: str | None = None


class _ModelOutput(BaseModel):
    """Lenient base for objects decoded from model text."""

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        extra="allow",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: object) -> object:
        # null fields fall back to their defaults
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Nutrition(_ModelOutput):
    """Per-serving nutrition figures as free-form strings."""

    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""


class Recipe(_ModelOutput):
    """Recipe suggested by the model."""

    name: str = ""
    description: str = ""
    cook_time: str = Field(default="", alias="cookTime")
    servings: str = ""
    difficulty: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    nutrition: Nutrition | None = None

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def _wrap_scalar(cls, value: object) -> object:
        # a single step or ingredient given as a bare string
        if isinstance(value, str | int | float):
            return [value]
        return value

    @field_validator("nutrition", mode="before")
    @classmethod
    def _drop_free_text_nutrition(cls, value: object) -> object:
        if isinstance(value, dict):
            return value
        return None
