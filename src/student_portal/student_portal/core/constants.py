"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

BLOOD_GROUPS = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")

MIN_PASSWORD_LENGTH = 6
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# Student cards show at most this many address characters
ADDRESS_PREVIEW_LENGTH = 30

SELECTION_STORAGE_KEY = "selection-storage"
SUMMARY_STORAGE_KEY = "attendance-summaries"
SUMMARY_KEY_PREFIX = "attendance-summary"
# Summaries live in the session cookie, so only the newest few are kept
SUMMARY_CACHE_LIMIT = 31

DEFAULT_SESSION_DAYS = 7
