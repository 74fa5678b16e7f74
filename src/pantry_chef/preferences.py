"""Dietary and cuisine preference options."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PreferenceChoice:
    """Declarative preference option."""

    value: str
    label: str


class DietaryOption(Enum):
    """Known dietary constraints."""

    VEGETARIAN = PreferenceChoice("vegetarian", "Vegetarian")
    VEGAN = PreferenceChoice("vegan", "Vegan")
    GLUTEN_FREE = PreferenceChoice("gluten-free", "Gluten-Free")
    KETO = PreferenceChoice("keto", "Keto")
    PALEO = PreferenceChoice("paleo", "Paleo")


class CuisineOption(Enum):
    """Known cuisine styles."""

    ITALIAN = PreferenceChoice("italian", "Italian")
    MEXICAN = PreferenceChoice("mexican", "Mexican")
    ASIAN = PreferenceChoice("asian", "Asian")
    INDIAN = PreferenceChoice("indian", "Indian")
    MEDITERRANEAN = PreferenceChoice("mediterranean", "Mediterranean")
    AMERICAN = PreferenceChoice("american", "American")


def preference_options() -> dict[str, list[dict[str, str]]]:
    """Return preference choices formatted for API clients."""
    return {
        "dietary": [_as_dict(entry.value) for entry in DietaryOption],
        "cuisine": [_as_dict(entry.value) for entry in CuisineOption],
    }


def _as_dict(choice: PreferenceChoice) -> dict[str, str]:
    return {"value": choice.value, "label": choice.label}
