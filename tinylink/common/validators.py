"""Validation utilities for the link shortener."""

import re
from urllib.parse import urlparse
from typing import Tuple


SHORT_CODE_MAX_LENGTH = 50
SHORT_CODE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a destination URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > 2048:
        return False, "URL is too long (max 2048 characters)"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    # Lone surrogates (undecodable argv bytes) cannot be stored
    try:
        url.encode("utf-8")
    except UnicodeEncodeError:
        return False, "URL must be valid UTF-8 text"

    try:
        result = urlparse(url)

        if result.scheme not in ("http", "https"):
            return False, "URL must use http or https protocol"

        if not result.netloc or not result.hostname:
            return False, "URL must have a valid domain"

        # Accessing port raises ValueError for out-of-range values
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_short_code(short_code: str) -> Tuple[bool, str]:
    """Validate a short code.

    Args:
        short_code: The short code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) > SHORT_CODE_MAX_LENGTH:
        return False, f"Short code must be at most {SHORT_CODE_MAX_LENGTH} characters"

    if not SHORT_CODE_PATTERN.fullmatch(short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    return True, ""
