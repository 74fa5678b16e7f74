"""Supabase implementation of the pantry snapshot store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from pantry_chef.domain.pantry import (
    Ingredient,
    ingredient_from_row,
    ingredient_to_row,
)
from pantry_chef.services.pantry import PantrySnapshotStore


@dataclass
class SupabasePantryStore(PantrySnapshotStore):
    """Supabase-backed pantry snapshots, one row per namespace."""

    client: Client
    namespace: str

    def load(self) -> list[Ingredient]:
        """Return the snapshot stored under the namespace."""
        response = (
            self.client.table("pantry_snapshots")
            .select("ingredients")
            .eq("namespace", self.namespace)
            .limit(1)
            .execute()
        )
        if not response.data:
            return []
        rows = response.data[0].get("ingredients") or []
        return [ingredient_from_row(row) for row in rows]

    def save(self, ingredients: list[Ingredient]) -> None:
        """Upsert the snapshot row for the namespace."""
        self.client.table("pantry_snapshots").upsert(
            {
                "namespace": self.namespace,
                "ingredients": [ingredient_to_row(item) for item in ingredients],
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="namespace",
        ).execute()
