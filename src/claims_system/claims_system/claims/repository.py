from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ClaimStatus
from .model import Claim


class ClaimRepository(Protocol):
    """The claims store.

    One canonical record per claim id. "Pending" is a view over status, not a
    second collection.
    """

    def next_id(self) -> int:
        raise NotImplementedError

    def add(self, claim: Claim) -> Claim:
        raise NotImplementedError

    def get(self, claim_id: int) -> Optional[Claim]:
        """Return the canonical record (not a copy)."""

        raise NotImplementedError

    def list_claims(
        self,
        *,
        status: Optional[ClaimStatus] = None,
        claimant_id: Optional[int] = None,
    ) -> Sequence[Claim]:
        raise NotImplementedError

    def set_status(self, claim_id: int, status: ClaimStatus) -> bool:
        raise NotImplementedError
