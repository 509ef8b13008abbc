import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

UPLOAD_FOLDER = Config.UPLOAD_FOLDER
MAX_DOCUMENTS_PER_CLAIM = Config.MAX_DOCUMENTS_PER_CLAIM
MAX_DOCUMENT_BYTES = Config.MAX_DOCUMENT_BYTES
ALLOWED_EXTENSIONS = Config.ALLOWED_EXTENSIONS
ACTIVE_CLAIMANT_ID = Config.ACTIVE_CLAIMANT_ID

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Mock data is re-created on every start (nothing is persisted)
AUTO_SEED_DEMO = Config.AUTO_SEED_DEMO
