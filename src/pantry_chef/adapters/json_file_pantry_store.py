"""JSON file implementation of the pantry snapshot store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pantry_chef.domain.pantry import (
    Ingredient,
    ingredient_from_row,
    ingredient_to_row,
)
from pantry_chef.services.pantry import PantrySnapshotStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFilePantryStore(PantrySnapshotStore):
    """File-backed pantry snapshots keyed by namespace."""

    path: Path
    namespace: str

    def load(self) -> list[Ingredient]:
        """Return the snapshot stored under the namespace."""
        rows = self._read_all().get(self.namespace, [])
        if not isinstance(rows, list):
            return []
        ingredients = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            try:
                ingredients.append(ingredient_from_row(row))
            except (KeyError, ValueError, OverflowError):
                logger.warning(
                    "Skipping unreadable pantry row", extra={"path": str(self.path)}
                )
        return ingredients

    def save(self, ingredients: list[Ingredient]) -> None:
        """Rewrite the snapshot stored under the namespace."""
        snapshots = self._read_all()
        snapshots[self.namespace] = [ingredient_to_row(item) for item in ingredients]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(snapshots, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning(
                "Ignoring unreadable pantry file", extra={"path": str(self.path)}
            )
            return {}
        return data if isinstance(data, dict) else {}
