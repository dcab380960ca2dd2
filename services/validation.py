import re
from typing import Optional

from domain.models import StringResource
from utils import config

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
# Optional leading "+", then ASCII digits and common separators
PHONE_RE = re.compile(r"^\+?[\d\s\-().]+$", re.ASCII)


def validate_email(value: str) -> Optional[StringResource]:
    value = (value or "").strip()
    if not value:
        return StringResource("error_email_required")
    domain = value.partition("@")[2]
    # every dot-separated domain label must be non-empty
    if not EMAIL_RE.match(value) or "" in domain.split("."):
        return StringResource("error_email_invalid")
    return None


def validate_phone(value: str) -> Optional[StringResource]:
    value = (value or "").strip()
    if not value:
        return StringResource("error_phone_required")
    # Separators are tolerated; only the digits count.
    digits = re.sub(r"\D", "", value, flags=re.ASCII)
    if not PHONE_RE.match(value) or not (config.PHONE_MIN_DIGITS <= len(digits) <= config.PHONE_MAX_DIGITS):
        return StringResource("error_phone_invalid", (config.PHONE_MIN_DIGITS, config.PHONE_MAX_DIGITS))
    return None


def validate_password(value: str) -> Optional[StringResource]:
    if not value:
        return StringResource("error_password_required")
    if len(value) < config.MIN_PASSWORD_LENGTH:
        return StringResource("error_password_short", (config.MIN_PASSWORD_LENGTH,))
    return None


def validate_repeat_password(password: str, repeat_password: str) -> Optional[StringResource]:
    if not repeat_password:
        return StringResource("error_password_required")
    if password != repeat_password:
        return StringResource("error_passwords_mismatch")
    return None
