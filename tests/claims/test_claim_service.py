from __future__ import annotations

import pytest

from src.claims_system.claims_system.claims.model import Claim, DocumentReference
from src.claims_system.claims_system.core.enums import ClaimStatus, ErrorCode
from src.claims_system.claims_system.core.exceptions import ValidationError


def _ready_draft(claim_service, lecturer, *, hours=10, period="Oct 2025"):
    draft = claim_service.new_draft(lecturer)
    draft.hours_worked = hours
    draft.period = period
    draft.documents.append(DocumentReference(file_name="timesheet.pdf", file_path="/tmp/timesheet.pdf"))
    return draft


def test_new_draft_prefilled_from_claimant(claim_service, lecturer):
    draft = claim_service.new_draft(lecturer)
    assert draft.is_draft
    assert draft.claimant_id == lecturer.claimant_id
    assert draft.hourly_rate == lecturer.hourly_rate
    assert draft.documents == []


def test_submit_zero_hours_fails(claim_service, lecturer):
    draft = _ready_draft(claim_service, lecturer, hours=0)
    with pytest.raises(ValidationError) as exc:
        claim_service.submit(draft, claimant=lecturer)
    assert exc.value.code == ErrorCode.INVALID_HOURS


def test_submit_missing_period_fails(claim_service, lecturer):
    draft = _ready_draft(claim_service, lecturer, period="  ")
    with pytest.raises(ValidationError) as exc:
        claim_service.submit(draft, claimant=lecturer)
    assert exc.value.code == ErrorCode.MISSING_PERIOD


def test_submit_without_documents_fails(claim_service, lecturer):
    draft = claim_service.new_draft(lecturer)
    draft.hours_worked = 10
    draft.period = "Oct 2025"
    with pytest.raises(ValidationError) as exc:
        claim_service.submit(draft, claimant=lecturer)
    assert exc.value.code == ErrorCode.DOCUMENT_REQUIRED


def test_hours_checked_before_documents(claim_service, lecturer):
    draft = claim_service.new_draft(lecturer)
    with pytest.raises(ValidationError) as exc:
        claim_service.submit(draft, claimant=lecturer)
    assert exc.value.code == ErrorCode.INVALID_HOURS


def test_successful_submission(claim_service, lecturer):
    draft = _ready_draft(claim_service, lecturer, hours=10)
    result = claim_service.submit(draft, claimant=lecturer)
    claim = result.claim

    assert claim.status == ClaimStatus.PENDING
    assert claim.total_amount == 10 * lecturer.hourly_rate
    assert claim.claimant_name == lecturer.name
    assert claim in claim_service.list_history(claimant_id=lecturer.claimant_id)
    assert claim in claim_service.list_pending()

    assert result.next_draft is not draft
    assert result.next_draft.documents == []
    assert result.next_draft.hourly_rate == lecturer.hourly_rate
    assert f"Claim {claim.claim_id} submitted successfully." in result.notification.message
    assert "R2,500.00" in result.notification.message


def test_submitted_documents_are_copied_not_aliased(claim_service, lecturer):
    draft = _ready_draft(claim_service, lecturer)
    claim = claim_service.submit(draft, claimant=lecturer).claim

    draft.documents.append(DocumentReference(file_name="late.pdf"))
    assert claim.document_count == 1


def test_ids_increase_above_seed_ids(claim_service, lecturer):
    first = claim_service.submit(_ready_draft(claim_service, lecturer), claimant=lecturer).claim
    second = claim_service.submit(_ready_draft(claim_service, lecturer), claimant=lecturer).claim

    assert first.claim_id > 1004
    assert second.claim_id > first.claim_id


def test_approve_removes_from_pending(claim_service):
    result = claim_service.approve(1001)

    assert result is not None
    assert result.claim.status == ClaimStatus.APPROVED
    assert 1001 not in [c.claim_id for c in claim_service.list_pending()]
    assert claim_service.get(1001).status == ClaimStatus.APPROVED
    assert "approved successfully" in result.notification.message


def test_reject_is_visible_through_every_lookup(claim_service, lecturer):
    claim = claim_service.get(1001)
    claim_service.reject(1001)

    assert claim.status == ClaimStatus.REJECTED
    history = claim_service.list_history(claimant_id=lecturer.claimant_id)
    assert next(c for c in history if c.claim_id == 1001).status == ClaimStatus.REJECTED


def test_second_decision_is_a_noop(claim_service):
    claim_service.approve(1003)
    assert claim_service.approve(1003) is None
    assert claim_service.reject(1003) is None
    assert claim_service.get(1003).status == ClaimStatus.APPROVED


def test_decide_unknown_claim_is_a_noop(claim_service):
    assert claim_service.decide(424242, ClaimStatus.APPROVED) is None


def test_decide_cannot_move_back_to_pending(claim_service):
    with pytest.raises(ValidationError):
        claim_service.decide(1001, ClaimStatus.PENDING)


def test_update_draft_parses_form_fields(claim_service, lecturer):
    draft = claim_service.new_draft(lecturer)
    claim_service.update_draft(draft, period=" Nov 2025 ", hours_worked="12.5", notes="  extra tutorials ")

    assert draft.period == "Nov 2025"
    assert draft.hours_worked == 12.5
    assert draft.notes == "extra tutorials"
    assert draft.total_amount == 12.5 * 250


def test_update_draft_rejects_bad_hours(claim_service, lecturer):
    draft = claim_service.new_draft(lecturer)
    with pytest.raises(ValidationError) as exc:
        claim_service.update_draft(draft, period="Nov 2025", hours_worked="1.2.3")
    assert exc.value.code == ErrorCode.INVALID_HOURS


def test_derived_values_follow_changes():
    claim = Claim(claim_id=None, claimant_id=1, hours_worked=2, hourly_rate=100)
    assert claim.total_amount == 200
    claim.hours_worked = 3
    claim.documents.append(DocumentReference(file_name="a.pdf"))
    assert claim.total_amount == 300
    assert claim.document_count == 1
