"""Field-level input checks applied before anything reaches a service or the store."""

import re

from models.schemas.identity import ROLES
from services.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255


def validate_email(email: str) -> str:
    """Return the normalized email (stripped, lower-cased)."""
    email = (email or "").strip().lower()
    if len(email) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.match(email):
        raise ValidationError("email", "Invalid email address")
    return email


def validate_password(password: str) -> str:
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            "password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return password


def validate_name(name: str) -> str:
    name = (name or "").strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError("name", f"Name must be at least {MIN_NAME_LENGTH} characters")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError("name", f"Name must be at most {MAX_NAME_LENGTH} characters")
    return name


def validate_role(role: str) -> str:
    if role not in ROLES:
        raise ValidationError("role", f"Role must be one of: {', '.join(ROLES)}")
    return role


def require_text(field: str, value: str, label: str | None = None) -> str:
    """Reject empty or whitespace-only text."""
    if not (value or "").strip():
        raise ValidationError(field, f"Please enter your {label or field.replace('_', ' ')}")
    return value
