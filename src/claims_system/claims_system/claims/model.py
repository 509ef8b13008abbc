from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import ClaimStatus


@dataclass(frozen=True)
class DocumentReference:
    """A supporting document attached to one claim."""

    file_name: str
    file_path: Optional[str] = None


@dataclass
class Claim:
    """Domain entity: a lecturer's request for payment.

    `claim_id` is None while the claim is still a draft. Status is the
    authoritative lifecycle state; everything derived from it or from the
    amounts is computed on read.
    """

    claim_id: Optional[int]
    claimant_id: int
    claimant_name: str = ""
    period: str = ""
    hours_worked: float = 0.0
    hourly_rate: float = 0.0
    status: ClaimStatus = ClaimStatus.PENDING
    notes: str = ""
    documents: list[DocumentReference] = field(default_factory=list)

    @property
    def total_amount(self) -> float:
        return self.hours_worked * self.hourly_rate

    @property
    def document_count(self) -> int:
        return len(self.documents)

    @property
    def is_draft(self) -> bool:
        return self.claim_id is None

    @classmethod
    def new_draft(cls, *, claimant_id: int, hourly_rate: float) -> "Claim":
        return cls(claim_id=None, claimant_id=int(claimant_id), hourly_rate=float(hourly_rate))
