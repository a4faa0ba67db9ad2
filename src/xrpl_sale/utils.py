"""
Utility functions for XRPL.Sale client.

Helper functions and utilities following functional programming principles.
"""

from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse


def sanitize_dict(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Remove None values from a dictionary."""
    if not data:
        return {}
    return {key: value for key, value in data.items() if value is not None}


def encode_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop None values and render scalars the way the API expects them."""
    encoded = {}
    for key, value in sanitize_dict(params).items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


def validate_url(url: Any) -> bool:
    """Validate absolute HTTP/HTTPS URL format."""
    if not url or not isinstance(url, str):
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.hostname)


def parse_bool(value: Any) -> bool:
    """Interpret env/YAML style booleans."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def redact(value: Optional[str], visible: int = 4) -> str:
    """Mask a credential for log output."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return f"{value[:visible]}{'*' * 8}"
