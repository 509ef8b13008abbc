"""Demo data for the prototype.

Everything lives in memory, so seeding runs on every start. Both helpers are
idempotent: records whose id is already present are left alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..claims.model import Claim, DocumentReference
from ..claims.repository import ClaimRepository
from ..core.enums import ClaimStatus
from ..users.model import AdminIdentity, Claimant
from ..users.repository import ClaimantRepository

logger = logging.getLogger(__name__)

DEMO_LECTURER = Claimant(
    claimant_id=1,
    name="Alice Johnson",
    hourly_rate=250.00,
    first_name="Alice",
    last_name="Johnson",
    unique_id="1234",
)

DEMO_ADMIN = AdminIdentity(first_name="Admin", last_name="User", unique_id="987654")


@dataclass(frozen=True)
class SeedClaim:
    claim_id: int
    claimant_id: int
    claimant_name: str
    period: str
    hours_worked: float
    hourly_rate: float
    status: ClaimStatus
    documents: tuple[str, ...] = ()


def _demo_claims(lecturer: Claimant) -> list[SeedClaim]:
    return [
        SeedClaim(1001, lecturer.claimant_id, lecturer.name, "Sep 2025", 20, 250, ClaimStatus.PENDING, ("Contract.pdf",)),
        SeedClaim(1002, lecturer.claimant_id, lecturer.name, "Aug 2025", 19.4, 250, ClaimStatus.APPROVED),
        SeedClaim(1003, 2, "John Doe", "Oct 2025", 21, 200, ClaimStatus.PENDING),
        SeedClaim(1004, 3, "Jane Smith", "Oct 2025", 18, 300, ClaimStatus.PENDING),
    ]


def ensure_demo_claimants(claimants: ClaimantRepository) -> Claimant:
    existing = claimants.get_by_id(DEMO_LECTURER.claimant_id)
    if existing:
        return existing
    claimants.add(DEMO_LECTURER)
    return DEMO_LECTURER


def ensure_demo_claims(claims: ClaimRepository, *, lecturer: Claimant) -> int:
    """Insert the demo claims that are missing. Returns how many were added."""
    added = 0
    for seed in _demo_claims(lecturer):
        if claims.get(seed.claim_id):
            continue
        claims.add(
            Claim(
                claim_id=seed.claim_id,
                claimant_id=seed.claimant_id,
                claimant_name=seed.claimant_name,
                period=seed.period,
                hours_worked=float(seed.hours_worked),
                hourly_rate=float(seed.hourly_rate),
                status=seed.status,
                documents=[DocumentReference(file_name=name) for name in seed.documents],
            )
        )
        added += 1
    return added


def seed_demo_data(claimants: ClaimantRepository, claims: ClaimRepository) -> None:
    lecturer = ensure_demo_claimants(claimants)
    added = ensure_demo_claims(claims, lecturer=lecturer)
    logger.info("Demo data ready (%d claims added)", added)
