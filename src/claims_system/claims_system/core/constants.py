"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_DOCUMENTS_PER_CLAIM = 5
MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

LECTURER_ID_LENGTH = 4
ADMIN_ID_LENGTH = 6

CURRENCY_SYMBOL = "R"
