"""Header generation for browser-like request profiles."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..config import HeaderOptions, normalize_locales, resolve_options
from ..transport import to_transport_headers
from .user_agents import get_user_agent

logger = logging.getLogger(__name__)


ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
    "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)
ACCEPT_ENCODING = "gzip, deflate, br"
LANGUAGE_QUALITY = ";q=0.9"

# Sent on every top-level navigation
NAVIGATION_HEADERS = (
    ("Upgrade-Insecure-Requests", "1"),
    ("Sec-Fetch-Dest", "document"),
    ("Sec-Fetch-Mode", "navigate"),
    ("Sec-Fetch-Site", "none"),
    ("Sec-Fetch-User", "?1"),
)

SEC_CH_UA = '"Not A(Brand";v="99", "Google Chrome";v="121", "Chromium";v="121"'

PLATFORM_NAMES = {
    "macos": "macOS",
    "ios": "iOS",
}


def format_platform(os: str) -> str:
    """Format an OS name as a quoted Sec-CH-UA-Platform value.

    Args:
        os: Operating system name as configured.

    Returns:
        Quoted platform, e.g. '"macOS"' or '"Windows"'.
    """
    name = PLATFORM_NAMES.get(os)
    if name is None:
        name = os[:1].upper() + os[1:]
    return f'"{name}"'


def format_accept_language(locales: tuple[str, ...]) -> str:
    """Join locales into an Accept-Language value with a single quality."""
    return ",".join(locales) + LANGUAGE_QUALITY


class HeaderGenerator:
    """Generate browser-like header sets from static templates.

    Output is deterministic: identical options always produce identical
    headers, in the same order. The instance only holds its frozen default
    options, so one generator can be shared freely.

    Example:
        gen = HeaderGenerator(locales=["de-DE", "de"])
        headers = gen.generate(browser="firefox", os="linux")
    """

    def __init__(
        self,
        options: HeaderOptions | Mapping[str, Any] | None = None,
        **default_options: Any,
    ):
        """Initialize header generator.

        Args:
            options: HeaderOptions or mapping with any subset of
                browser, os, device and locales.
            **default_options: Individual option overrides, applied
                after ``options``.
        """
        self._defaults = resolve_options(options, **default_options)

    @property
    def default_options(self) -> HeaderOptions:
        """Get the options every generate() call starts from."""
        return self._defaults

    def generate(
        self,
        overrides: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> dict[str, str]:
        """Generate an ordered header set.

        Args:
            overrides: Mapping of per-call option overrides (shallow, field by
                field). Omitted fields inherit the instance defaults.
            **kwargs: Individual option overrides, applied after ``overrides``.

        Returns:
            New dict of headers in browser send order.
        """
        config = self._defaults.merged(overrides, **kwargs)

        headers: dict[str, str] = {}
        headers["User-Agent"] = get_user_agent(config.browser, config.os)
        headers["Accept"] = ACCEPT

        locales = normalize_locales(config.locales)
        if locales:
            headers["Accept-Language"] = format_accept_language(locales)

        headers["Accept-Encoding"] = ACCEPT_ENCODING
        headers.update(NAVIGATION_HEADERS)

        # Exact match on the configured value, not the resolved template
        if config.browser == "chrome":
            headers.update(self._client_hints(config))

        logger.debug(
            "Generated %d headers for %s/%s/%s: %s",
            len(headers), config.browser, config.os, config.device,
            headers["User-Agent"],
        )
        return headers

    def _client_hints(self, config: HeaderOptions) -> dict[str, str]:
        """Build Chrome Sec-CH-UA-* client hint headers."""
        return {
            "Sec-CH-UA": SEC_CH_UA,
            "Sec-CH-UA-Mobile": "?1" if config.device == "mobile" else "?0",
            "Sec-CH-UA-Platform": format_platform(config.os),
        }

    def to_transport_headers(
        self,
        headers: Mapping[str, str],
        backend: str = "httpx",
    ) -> Any:
        """Convert generated headers to an HTTP client's header container.

        See header_profiles.transport.to_transport_headers().

        Raises:
            EnvironmentUnsupported: If the backend is not available.
        """
        return to_transport_headers(headers, backend=backend)
