"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MATCH_THRESHOLD = 70.0
BYTE_TOLERANCE = 5

CAPTURE_TIMEOUT_MS = 15000
CONFIRMATION_PAUSE_MS = 2000

DEFAULT_HISTORY_DAYS = 7
DEFAULT_STATUS_HISTORY = 50
DEFAULT_READER_ID = "reader-0"

DB_LOCK_TIMEOUT_SECONDS = 10
