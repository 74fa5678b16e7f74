"""Services for managing the ingredient pantry."""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from pantry_chef.domain.pantry import Ingredient, normalize_ingredient_name

logger = logging.getLogger(__name__)


class PantrySnapshotStore(Protocol):
    """Persistence interface for the full pantry snapshot."""

    def load(self) -> list[Ingredient]:
        """Return the persisted snapshot, or an empty list."""

    def save(self, ingredients: list[Ingredient]) -> None:
        """Persist the full ordered snapshot, replacing the previous one."""


@dataclass
class PantryService:
    """Deduplicated ingredient pantry persisted on every mutation.

    The in-memory state is seeded from the store once, when the service is
    constructed. Each mutation writes the whole snapshot back, so the last
    write wins. Names are compared by their normalized form, while the
    stored name keeps the casing it was first added with.
    """

    store: PantrySnapshotStore
    _ingredients: list[Ingredient] = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ingredients = list(self.store.load())
        self._lock = threading.Lock()

    def add_ingredient(self, name: str) -> Ingredient | None:
        """Add an ingredient unless it is blank or already present."""
        normalized = normalize_ingredient_name(name)
        if not normalized:
            return None
        with self._lock:
            if any(
                normalize_ingredient_name(existing.name) == normalized
                for existing in self._ingredients
            ):
                return None
            ingredient = Ingredient(
                id=str(uuid4()),
                name=name,
                added_at=datetime.now(tz=UTC),
            )
            self._ingredients.append(ingredient)
            self._persist()
        logger.info("Added pantry ingredient", extra={"ingredient_id": ingredient.id})
        return ingredient

    def add_ingredients(self, names: Iterable[str]) -> list[Ingredient]:
        """Add several ingredients and return the ones actually created."""
        created = []
        for name in names:
            ingredient = self.add_ingredient(name)
            if ingredient is not None:
                created.append(ingredient)
        return created

    def remove_ingredient(self, ingredient_id: str) -> None:
        """Remove an ingredient by id; unknown ids are ignored."""
        with self._lock:
            remaining = [item for item in self._ingredients if item.id != ingredient_id]
            if len(remaining) == len(self._ingredients):
                return
            self._ingredients = remaining
            self._persist()

    def clear_pantry(self) -> None:
        """Remove every ingredient."""
        with self._lock:
            self._ingredients = []
            self._persist()

    def list_ingredients(self) -> list[Ingredient]:
        """Return pantry entries in insertion order."""
        with self._lock:
            return list(self._ingredients)

    def list_names(self) -> list[str]:
        """Return ingredient display names in insertion order."""
        return [item.name for item in self.list_ingredients()]

    def _persist(self) -> None:
        self.store.save(list(self._ingredients))
