from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ClaimStatus
from .model import Claim


class InMemoryClaimRepository:
    """Claims store kept in insertion order for the lifetime of the process.

    Ids come from a monotonically increasing counter that always stays above
    every id already stored, including seeded ones.
    """

    def __init__(self, *, first_id: int = 1):
        self._claims: dict[int, Claim] = {}
        self._next_id = int(first_id)

    def next_id(self) -> int:
        claim_id = self._next_id
        self._next_id += 1
        return claim_id

    def add(self, claim: Claim) -> Claim:
        if claim.claim_id is None:
            raise ValueError("Cannot store a draft claim without an id")
        if claim.claim_id in self._claims:
            raise ValueError(f"Claim {claim.claim_id} already exists")

        self._claims[claim.claim_id] = claim
        if claim.claim_id >= self._next_id:
            self._next_id = claim.claim_id + 1
        return claim

    def get(self, claim_id: int) -> Optional[Claim]:
        return self._claims.get(int(claim_id))

    def list_claims(
        self,
        *,
        status: Optional[ClaimStatus] = None,
        claimant_id: Optional[int] = None,
    ) -> Sequence[Claim]:
        items = list(self._claims.values())
        if status is not None:
            items = [c for c in items if c.status == status]
        if claimant_id is not None:
            items = [c for c in items if c.claimant_id == int(claimant_id)]
        return items

    def set_status(self, claim_id: int, status: ClaimStatus) -> bool:
        claim = self._claims.get(int(claim_id))
        if not claim:
            return False
        claim.status = status
        return True
