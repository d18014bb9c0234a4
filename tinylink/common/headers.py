"""Resolve the public base URL of the service from request headers."""

from typing import Dict, Optional


def _lower_keys(headers: Dict[str, str]) -> Dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Pick the X-Forwarded-* values a reverse proxy sets.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto and forwarded_host
    """
    lowered = _lower_keys(headers)

    return {
        "forwarded_proto": lowered.get("x-forwarded-proto"),
        "forwarded_host": lowered.get("x-forwarded-host"),
    }


def build_base_url(
    headers: Dict[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build the base URL short links are published under.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. BASE_URL from config

    Returns:
        Base URL without trailing slash (e.g., https://example.com)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        # A proxy may append several comma-separated hops; the first is the client-facing one
        proto = forwarded["forwarded_proto"].split(",")[0].strip()
        host = forwarded["forwarded_host"].split(",")[0].strip()
        return f"{proto}://{host}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
