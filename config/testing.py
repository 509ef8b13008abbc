import os
import tempfile

from config.config import Config

SECRET_KEY = "test-secret"

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(tempfile.gettempdir(), "claims-system-test-uploads"))
MAX_DOCUMENTS_PER_CLAIM = 5
MAX_DOCUMENT_BYTES = 5 * 1024 * 1024
ALLOWED_EXTENSIONS = Config.ALLOWED_EXTENSIONS
ACTIVE_CLAIMANT_ID = 1

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED_DEMO = True
