"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_TTL_HOURS = 8
TOKEN_ALGORITHM = "HS256"
CUSTOMER_LIST_LIMIT = 500
DEFAULT_POOL_SIZE = 10
DEFAULT_POOL_TIMEOUT_SECONDS = 5.0
UPLOAD_URL_PREFIX = "uploads"
