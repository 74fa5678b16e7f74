"""Domain models for the ingredient pantry."""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True)
class Ingredient:
    """Represents an ingredient stored in the pantry."""

    id: str
    name: str
    added_at: datetime


def normalize_ingredient_name(name: str) -> str:
    """Return the comparison key for an ingredient name."""
    return name.strip().lower()


def ingredient_to_row(ingredient: Ingredient) -> dict[str, object]:
    """Serialize an ingredient into a persisted snapshot row."""
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "addedAt": ingredient.added_at.isoformat(),
    }


def ingredient_from_row(row: dict[str, object]) -> Ingredient:
    """Parse a persisted snapshot row into a domain model."""
    added_raw = row.get("addedAt")
    if isinstance(added_raw, int | float):
        # browser snapshots store epoch milliseconds
        added_at = datetime.fromtimestamp(added_raw / 1000, tz=UTC)
    elif isinstance(added_raw, str) and added_raw:
        added_at = datetime.fromisoformat(added_raw)
    else:
        added_at = datetime.now(tz=UTC)
    return Ingredient(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        added_at=added_at,
    )
