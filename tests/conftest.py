"""Shared test fixtures and configuration."""

import pytest

from header_profiles import HeaderGenerator, HeaderOptions


# ============== Expected Header Sets ==============

CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
)

ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
    "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
)


@pytest.fixture
def default_headers() -> dict[str, str]:
    """Exact header set for chrome/windows/desktop with en-US,en."""
    return {
        "User-Agent": CHROME_WINDOWS_UA,
        "Accept": ACCEPT,
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate, br",
        "Upgrade-Insecure-Requests": "1",
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Sec-Fetch-User": "?1",
        "Sec-CH-UA": '"Not A(Brand";v="99", "Google Chrome";v="121", "Chromium";v="121"',
        "Sec-CH-UA-Mobile": "?0",
        "Sec-CH-UA-Platform": '"Windows"',
    }


# ============== Generator Fixtures ==============

@pytest.fixture
def generator() -> HeaderGenerator:
    """Generator with built-in defaults."""
    return HeaderGenerator()


@pytest.fixture
def french_generator() -> HeaderGenerator:
    """Generator with French locale defaults."""
    return HeaderGenerator(locales=["fr-FR", "fr"])


@pytest.fixture
def mobile_options() -> HeaderOptions:
    """Options for Safari on iOS."""
    return HeaderOptions(browser="safari", os="ios", device="mobile")
