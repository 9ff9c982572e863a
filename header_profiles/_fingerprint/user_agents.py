"""Static User-Agent templates keyed by browser and operating system."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


# Declaration order is significant: an unknown OS resolves to the first
# entry of its browser.
USER_AGENTS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "chrome": MappingProxyType({
        "windows": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "macos": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
        "linux": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
    }),
    "firefox": MappingProxyType({
        "windows": "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:122.0) Gecko/20100101 Firefox/122.0",
        "macos": "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.2; rv:122.0) Gecko/20100101 Firefox/122.0",
        "linux": "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:122.0) Gecko/20100101 Firefox/122.0",
    }),
    "safari": MappingProxyType({
        "macos": "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_2_1) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
        "ios": "Mozilla/5.0 (iPhone; CPU iPhone OS 17_2_1 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Mobile/15E148 Safari/604.1",
    }),
})

# Used when the browser itself is unknown
DEFAULT_BROWSER = "chrome"
DEFAULT_OS = "windows"


def get_user_agent(browser: str, os: str) -> str:
    """Resolve a User-Agent string for a browser/OS pair.

    Lookup is case-insensitive and never fails:

    - Unknown browser: the chrome/windows template.
    - Unknown OS for a known browser: the first template declared for
      that browser.

    Args:
        browser: Browser name (e.g., "chrome", "Firefox").
        os: Operating system name (e.g., "windows", "macOS").

    Returns:
        Literal User-Agent string.
    """
    browser_key = str(browser).lower()
    agents = USER_AGENTS.get(browser_key)
    if agents is None:
        logger.debug(
            "Unknown browser %r, using %s/%s User-Agent",
            browser, DEFAULT_BROWSER, DEFAULT_OS,
        )
        return USER_AGENTS[DEFAULT_BROWSER][DEFAULT_OS]

    os_key = str(os).lower()
    if os_key in agents:
        return agents[os_key]

    fallback_os = next(iter(agents))
    logger.debug(
        "Unknown os %r for %s, using %s User-Agent",
        os, browser_key, fallback_os,
    )
    return agents[fallback_os]


def list_browsers() -> list[str]:
    """Get browser names in declaration order."""
    return list(USER_AGENTS)


def list_platforms(browser: str) -> list[str]:
    """Get operating systems with a template for a browser.

    Unknown browsers resolve to the default browser's platforms, matching
    the fallback used by get_user_agent().
    """
    agents = USER_AGENTS.get(str(browser).lower(), USER_AGENTS[DEFAULT_BROWSER])
    return list(agents)
