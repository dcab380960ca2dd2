"""Central configuration loaded from environment variables / .env file."""
import os
from dotenv import load_dotenv

load_dotenv()

# ── App ────────────────────────────────────────────────────────────────────
APP_TITLE: str = os.getenv("AUTHUI_APP_TITLE", "AuthUI")
LOCALE: str = os.getenv("AUTHUI_LOCALE", "en")
LOG_LEVEL: str = os.getenv("AUTHUI_LOG_LEVEL", "INFO")

# ── Validation ─────────────────────────────────────────────────────────────
MIN_PASSWORD_LENGTH: int = int(os.getenv("AUTHUI_MIN_PASSWORD_LENGTH", "8"))
PHONE_MIN_DIGITS: int = int(os.getenv("AUTHUI_PHONE_MIN_DIGITS", "7"))
PHONE_MAX_DIGITS: int = int(os.getenv("AUTHUI_PHONE_MAX_DIGITS", "15"))

# ── Notifications ──────────────────────────────────────────────────────────
TOAST_ICON: str = os.getenv("AUTHUI_TOAST_ICON", ":material/person_add:")
