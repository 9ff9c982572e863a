"""Conversion of generated headers to HTTP client header containers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..models import EnvironmentUnsupported

logger = logging.getLogger(__name__)

try:
    import httpx

    HTTPX_AVAILABLE = True
except ImportError:
    HTTPX_AVAILABLE = False
    httpx = None

try:
    from curl_cffi.requests import Headers as CurlHeaders

    CURL_AVAILABLE = True
except ImportError:
    CURL_AVAILABLE = False
    CurlHeaders = None


BACKEND_ALIASES = {
    "httpx": "httpx",
    "curl": "curl",
    "curl_cffi": "curl",
}


def _canonical_backend(backend: str) -> str | None:
    """Map a backend name or alias to its canonical name."""
    return BACKEND_ALIASES.get(str(backend).lower())


def supports_transport(backend: str) -> bool:
    """Check whether native headers can be built for a backend.

    Args:
        backend: "httpx", "curl" or "curl_cffi".

    Returns:
        True if the backend's library is importable.
    """
    name = _canonical_backend(backend)
    if name == "httpx":
        return HTTPX_AVAILABLE
    if name == "curl":
        return CURL_AVAILABLE
    return False


def available_transports() -> list[str]:
    """Get canonical names of backends usable in this environment."""
    return [name for name in ("httpx", "curl") if supports_transport(name)]


def to_transport_headers(
    headers: Mapping[str, str],
    backend: str = "httpx",
) -> Any:
    """Convert a header mapping to a backend's native header container.

    Header names and values are passed through unchanged, in order.

    Args:
        headers: Header mapping, e.g. from HeaderGenerator.generate().
        backend: "httpx" (httpx.Headers) or "curl"/"curl_cffi"
            (curl_cffi.requests.Headers).

    Returns:
        Native headers object for the backend.

    Raises:
        EnvironmentUnsupported: If the backend is unknown or its library
            is not installed.
    """
    if not supports_transport(backend):
        logger.debug("Native headers unavailable for backend %r", backend)
        raise EnvironmentUnsupported(backend)

    items = list(headers.items())
    if _canonical_backend(backend) == "httpx":
        return httpx.Headers(items)
    return CurlHeaders(items)
