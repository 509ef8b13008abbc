from __future__ import annotations

from dataclasses import dataclass

from .claims.memory_claim_repository import InMemoryClaimRepository
from .claims.service import ClaimService
from .core.constants import MAX_DOCUMENT_BYTES, MAX_DOCUMENTS_PER_CLAIM
from .database.bootstrap import seed_demo_data
from .documents.service import DocumentService
from .navigation.session import SessionRegistry
from .users.memory_claimant_repository import InMemoryClaimantRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    claimants_repo: InMemoryClaimantRepository
    claims_repo: InMemoryClaimRepository

    auth_service: AuthService
    claim_service: ClaimService
    document_service: DocumentService
    sessions: SessionRegistry


def build_container(*, app_config: dict) -> Container:
    claimants_repo = InMemoryClaimantRepository(active_claimant_id=int(app_config.get("ACTIVE_CLAIMANT_ID", 1)))
    claims_repo = InMemoryClaimRepository()

    if bool(app_config.get("AUTO_SEED_DEMO", True)):
        seed_demo_data(claimants_repo, claims_repo)

    auth_service = AuthService(claimants_repo)
    claim_service = ClaimService(claims_repo)
    document_service = DocumentService(
        max_documents=int(app_config.get("MAX_DOCUMENTS_PER_CLAIM", MAX_DOCUMENTS_PER_CLAIM)),
        max_bytes=int(app_config.get("MAX_DOCUMENT_BYTES", MAX_DOCUMENT_BYTES)),
    )

    return Container(
        claimants_repo=claimants_repo,
        claims_repo=claims_repo,
        auth_service=auth_service,
        claim_service=claim_service,
        document_service=document_service,
        sessions=SessionRegistry(),
    )
