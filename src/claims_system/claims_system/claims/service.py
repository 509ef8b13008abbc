from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.formatting import format_currency
from ..common.validators import is_blank, parse_hours
from ..core.enums import ClaimStatus, ErrorCode
from ..core.exceptions import ValidationError
from ..core.notifications import Notification
from ..users.model import Claimant
from .model import Claim
from .repository import ClaimRepository

logger = logging.getLogger(__name__)

_DECISION_MESSAGES = {
    ClaimStatus.APPROVED: "approved successfully.",
    ClaimStatus.REJECTED: "rejected.",
}


@dataclass(frozen=True)
class SubmissionResult:
    claim: Claim
    next_draft: Claim
    notification: Notification


@dataclass(frozen=True)
class DecisionResult:
    claim: Claim
    notification: Notification


class ClaimService:
    """Use cases: fill in a draft, submit it, decide on pending claims."""

    def __init__(self, claims: ClaimRepository):
        self._claims = claims

    @staticmethod
    def new_draft(claimant: Claimant) -> Claim:
        return Claim.new_draft(claimant_id=claimant.claimant_id, hourly_rate=claimant.hourly_rate)

    @staticmethod
    def update_draft(draft: Claim, *, period: str, hours_worked: str, notes: str = "") -> Claim:
        """Copy form fields onto the draft. Documents are left untouched."""
        draft.period = (period or "").strip()
        draft.notes = (notes or "").strip()
        draft.hours_worked = parse_hours(hours_worked)
        return draft

    @staticmethod
    def validate_draft(draft: Claim) -> None:
        if draft.hours_worked <= 0:
            raise ValidationError("Please enter valid hours worked and month/year.", code=ErrorCode.INVALID_HOURS)
        if is_blank(draft.period):
            raise ValidationError("Please enter valid hours worked and month/year.", code=ErrorCode.MISSING_PERIOD)
        if draft.document_count == 0:
            raise ValidationError(
                "A supporting document is mandatory. Please upload at least one document before submitting the claim.",
                code=ErrorCode.DOCUMENT_REQUIRED,
            )

    def submit(self, draft: Claim, *, claimant: Claimant) -> SubmissionResult:
        """Promote a validated draft into the store.

        The caller must replace its draft with `next_draft`; the submitted
        draft object is not reused.
        """
        self.validate_draft(draft)

        claim = Claim(
            claim_id=self._claims.next_id(),
            claimant_id=claimant.claimant_id,
            claimant_name=claimant.name,
            period=draft.period.strip(),
            hours_worked=float(draft.hours_worked),
            hourly_rate=float(draft.hourly_rate),
            status=ClaimStatus.PENDING,
            notes=draft.notes,
            documents=list(draft.documents),
        )
        self._claims.add(claim)
        logger.info("Claim %s submitted by claimant %s (%s)", claim.claim_id, claimant.claimant_id, claim.period)

        return SubmissionResult(
            claim=claim,
            next_draft=self.new_draft(claimant),
            notification=Notification.info(
                "Submission Successful",
                f"Claim {claim.claim_id} submitted successfully.\nTotal Amount: {format_currency(claim.total_amount)}",
            ),
        )

    def decide(self, claim_id: int, outcome: ClaimStatus) -> Optional[DecisionResult]:
        """Set a pending claim's final status.

        Unknown ids and claims that were already decided are left alone and
        return None.
        """
        outcome = ClaimStatus(outcome)
        if not outcome.is_terminal:
            raise ValidationError("A claim can only be approved or rejected")

        claim = self._claims.get(int(claim_id))
        if not claim or claim.status.is_terminal:
            return None

        self._claims.set_status(claim.claim_id, outcome)
        logger.info("Claim %s %s", claim.claim_id, outcome.value.lower())
        return DecisionResult(
            claim=claim,
            notification=Notification.info(
                "Action Complete",
                f"Claim {claim.claim_id} was {_DECISION_MESSAGES[outcome]}",
            ),
        )

    def approve(self, claim_id: int) -> Optional[DecisionResult]:
        return self.decide(claim_id, ClaimStatus.APPROVED)

    def reject(self, claim_id: int) -> Optional[DecisionResult]:
        return self.decide(claim_id, ClaimStatus.REJECTED)

    def get(self, claim_id: int) -> Optional[Claim]:
        return self._claims.get(int(claim_id))

    def list_history(self, *, claimant_id: Optional[int] = None) -> Sequence[Claim]:
        return self._claims.list_claims(claimant_id=claimant_id)

    def list_pending(self) -> Sequence[Claim]:
        return self._claims.list_claims(status=ClaimStatus.PENDING)
