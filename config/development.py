import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "key": os.getenv("SUPABASE_ANON_KEY", ""),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

# "Remember me" lifetime for the signed session cookie
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

WTF_CSRF_ENABLED = True
