# config.py
# Environment-driven settings. Read once at import time.

import os

SUGGEST_URL = os.getenv("QIT_SUGGEST_URL", "https://suggestqueries.google.com/complete/search")
SUGGEST_CLIENT = os.getenv("QIT_SUGGEST_CLIENT", "firefox")
SUGGEST_TIMEOUT_SECONDS = float(os.getenv("QIT_SUGGEST_TIMEOUT", "8"))

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}

DEFAULT_LANGUAGE = os.getenv("QIT_LANGUAGE", "ar")
DEFAULT_REGION = os.getenv("QIT_REGION", "eg")

# Optional CSV overrides for the rule tables (path or URL)
RULES_FILE = os.getenv("QIT_RULES_FILE") or None
REGIONS_FILE = os.getenv("QIT_REGIONS_FILE") or None
INTENT_RULES_FILE = os.getenv("QIT_INTENT_RULES_FILE") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
