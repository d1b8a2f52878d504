SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": "https://placeholder.supabase.co",
    "key": "placeholder.anon.key",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_DAYS = 1

WTF_CSRF_ENABLED = False
