# core/sanitizers.py
"""
Input sanitization for user-generated content.

Everything typed by a user (team descriptions, mail bodies, submission
copy, skill tags) should pass through these functions before it is stored.
"""
import re
from typing import Iterable, Optional

import bleach


# Allowed HTML tags for rich text (mail bodies, descriptions)
ALLOWED_TAGS = [
    'p', 'br', 'strong', 'em', 'u', 'a', 'ul', 'ol', 'li',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'blockquote', 'code', 'pre'
]

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'title'],
}

MAX_TAG_LENGTH = 50


def sanitize_text(text: Optional[str], max_length: Optional[int] = None, strip: bool = True) -> str:
    """
    Sanitize plain text input.

    - Strips leading/trailing whitespace
    - Removes control characters
    - Enforces maximum length
    - Returns empty string for None input
    """
    if text is None:
        return ""

    if strip:
        text = text.strip()

    # Remove control characters except newlines and tabs
    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', text)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_html(html: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize HTML content, removing dangerous elements.
    """
    if html is None:
        return ""

    clean = bleach.clean(
        html.strip(),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True
    )

    if max_length and len(clean) > max_length:
        clean = clean[:max_length]

    return clean


def sanitize_title(title: Optional[str]) -> str:
    """
    Sanitize titles and mail subjects.

    - Max 255 characters
    - Single line (no newlines)
    """
    text = sanitize_text(title, max_length=255)
    # Replace newlines with spaces
    text = re.sub(r'[\r\n]+', ' ', text)
    # Collapse multiple spaces
    text = re.sub(r'\s+', ' ', text)
    return text


def sanitize_description(description: Optional[str]) -> str:
    """
    Sanitize descriptions and mail bodies.

    - Max 10000 characters
    - HTML sanitized
    """
    return sanitize_html(description, max_length=10000)


def sanitize_tags(values: Optional[Iterable[str]]) -> list[str]:
    """
    Clean a list of skill/role/tag strings.

    Blank entries are dropped and duplicates removed, keeping first-seen order.
    """
    if not values:
        return []

    seen = set()
    cleaned = []
    for value in values:
        tag = sanitize_title(value)[:MAX_TAG_LENGTH]
        if tag and tag not in seen:
            seen.add(tag)
            cleaned.append(tag)
    return cleaned
