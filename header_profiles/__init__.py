"""Browser-like HTTP request header profiles.

This package builds User-Agent and companion headers from fixed browser
templates, for use with any HTTP client:

- Static User-Agent table for Chrome, Firefox and Safari
- Case-insensitive lookup with deterministic fallbacks
- Accept-Language from an ordered locale list
- Sec-Fetch-* navigation headers and Chrome client hints
- Optional conversion to httpx or curl_cffi header containers

Basic usage:

    from header_profiles import HeaderGenerator

    gen = HeaderGenerator()
    headers = gen.generate()

    # Per-call overrides
    headers = gen.generate(browser="firefox", os="linux", locales=["fr-FR", "fr"])

    # Hand off to an HTTP client
    import httpx
    httpx.get("https://example.com", headers=gen.to_transport_headers(headers))
"""

from .config import HeaderOptions, DEFAULT_OPTIONS
from .models import HeaderProfileError, EnvironmentUnsupported
from .fingerprint import (
    USER_AGENTS,
    HeaderGenerator,
    get_user_agent,
    list_browsers,
    list_platforms,
    format_platform,
)
from .transport import available_transports, supports_transport, to_transport_headers

__version__ = "0.1.0"

__all__ = [
    # Generator
    "HeaderGenerator",
    # Configuration
    "HeaderOptions",
    "DEFAULT_OPTIONS",
    # Exceptions
    "HeaderProfileError",
    "EnvironmentUnsupported",
    # Templates
    "USER_AGENTS",
    "get_user_agent",
    "list_browsers",
    "list_platforms",
    "format_platform",
    # Transport conversion
    "available_transports",
    "supports_transport",
    "to_transport_headers",
    # Version
    "__version__",
]
