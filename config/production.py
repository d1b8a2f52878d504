import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = {
    "url": os.getenv("SUPABASE_URL", ""),
    "key": os.getenv("SUPABASE_ANON_KEY", ""),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

WTF_CSRF_ENABLED = True
