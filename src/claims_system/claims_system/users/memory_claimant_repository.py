from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .model import Claimant


class InMemoryClaimantRepository:
    """Claimants held in a dict for the lifetime of the process."""

    def __init__(self, *, active_claimant_id: int = 1):
        self._by_id: dict[int, Claimant] = {}
        self._active_claimant_id = int(active_claimant_id)

    def get_by_id(self, claimant_id: int) -> Optional[Claimant]:
        return self._by_id.get(int(claimant_id))

    def get_active(self) -> Claimant:
        claimant = self._by_id.get(self._active_claimant_id)
        if claimant is None:
            raise LookupError(f"No claimant with id {self._active_claimant_id} has been seeded")
        return claimant

    def add(self, claimant: Claimant) -> None:
        self._by_id[claimant.claimant_id] = claimant

    def update_identity(
        self,
        claimant_id: int,
        *,
        first_name: str,
        last_name: str,
        unique_id: str,
    ) -> Claimant:
        current = self._by_id[int(claimant_id)]
        updated = replace(
            current,
            first_name=first_name,
            last_name=last_name,
            name=f"{first_name} {last_name}",
            unique_id=unique_id,
        )
        self._by_id[updated.claimant_id] = updated
        return updated
