import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "claims-prototype-secret"

    # Uploaded claim documents are only referenced by their local path
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", str(REPO_ROOT / "uploads"))
    MAX_DOCUMENTS_PER_CLAIM = int(os.environ.get("MAX_DOCUMENTS_PER_CLAIM", "5"))
    MAX_DOCUMENT_BYTES = int(os.environ.get("MAX_DOCUMENT_BYTES", str(5 * 1024 * 1024)))
    ALLOWED_EXTENSIONS = frozenset({"pdf", "docx", "xlsx"})

    # Lecturer identity the login form resolves to
    ACTIVE_CLAIMANT_ID = int(os.environ.get("ACTIVE_CLAIMANT_ID", "1"))

    AUTO_SEED_DEMO = bool(int(os.environ.get("AUTO_SEED_DEMO", "1")))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
