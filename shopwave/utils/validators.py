"""Custom validators and sanitizers"""

import re
from typing import Optional
import bleach
from email_validator import validate_email, EmailNotValidError

# Review text allows no markup at all
REVIEW_ALLOWED_TAGS: list = []


def validate_email_address(email: str) -> str:
    """Validate and normalize email"""
    email = email.strip().lower()

    try:
        validation = validate_email(email, check_deliverability=False)
        return validation.normalized
    except EmailNotValidError as e:
        raise ValueError(str(e))


def sanitize_html(html: str, allowed_tags: Optional[list] = None) -> str:
    """Sanitize HTML content"""
    if allowed_tags is None:
        allowed_tags = ['b', 'em', 'i', 'strong', 'br', 'p']

    return bleach.clean(
        html,
        tags=allowed_tags,
        attributes={},
        strip=True
    )


def normalize_text(text: str) -> str:
    """Normalize text input"""
    # Remove zero-width characters
    text = re.sub(r'[\u200b\u200c\u200d\ufeff]', '', text)

    # Collapse whitespace
    return " ".join(text.split())


def require_text(value: str) -> str:
    """Reject blank strings after normalization"""
    value = normalize_text(value)
    if not value:
        raise ValueError("must not be blank")
    return value


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Sanitize free text; blank input becomes None"""
    if value is None:
        return None
    value = normalize_text(sanitize_html(value, REVIEW_ALLOWED_TAGS))
    return value or None
