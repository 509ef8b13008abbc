from __future__ import annotations

from typing import Optional, Protocol

from .model import Claimant


class ClaimantRepository(Protocol):
    """Repository interface for Claimant.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, claimant_id: int) -> Optional[Claimant]:
        raise NotImplementedError

    def get_active(self) -> Claimant:
        """The lecturer identity the login form resolves to."""

        raise NotImplementedError

    def add(self, claimant: Claimant) -> None:
        raise NotImplementedError

    def update_identity(
        self,
        claimant_id: int,
        *,
        first_name: str,
        last_name: str,
        unique_id: str,
    ) -> Claimant:
        raise NotImplementedError
