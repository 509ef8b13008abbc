from __future__ import annotations

import pytest

from src.claims_system.claims_system.claims.memory_claim_repository import InMemoryClaimRepository
from src.claims_system.claims_system.claims.service import ClaimService
from src.claims_system.claims_system.database.bootstrap import seed_demo_data
from src.claims_system.claims_system.documents.service import DocumentService
from src.claims_system.claims_system.users.memory_claimant_repository import InMemoryClaimantRepository
from src.claims_system.claims_system.users.service import AuthService


class FakeFile:
    """Stand-in for a selected file: only name, size and path are read."""

    def __init__(self, name: str, size: int, path: str = ""):
        self.name = name
        self.size = size
        self.path = path or f"/tmp/{name}"


class UnreadableFile:
    name = "broken.pdf"
    path = "/tmp/broken.pdf"

    @property
    def size(self) -> int:
        raise PermissionError("permission denied")


@pytest.fixture
def claimants_repo():
    return InMemoryClaimantRepository()


@pytest.fixture
def claims_repo():
    return InMemoryClaimRepository()


@pytest.fixture
def seeded(claimants_repo, claims_repo):
    seed_demo_data(claimants_repo, claims_repo)
    return claimants_repo, claims_repo


@pytest.fixture
def lecturer(seeded):
    claimants_repo, _ = seeded
    return claimants_repo.get_active()


@pytest.fixture
def auth_service(seeded):
    claimants_repo, _ = seeded
    return AuthService(claimants_repo)


@pytest.fixture
def claim_service(seeded):
    _, claims_repo = seeded
    return ClaimService(claims_repo)


@pytest.fixture
def document_service():
    return DocumentService()


@pytest.fixture
def make_file():
    return FakeFile


@pytest.fixture
def unreadable_file():
    return UnreadableFile()


@pytest.fixture
def app(tmp_path):
    from src.claims_system.claims_system.main import create_app

    return create_app("config.testing", UPLOAD_FOLDER=str(tmp_path / "uploads"))


@pytest.fixture
def client(app):
    return app.test_client()
