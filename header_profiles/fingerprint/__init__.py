"""Browser User-Agent templates and header generation."""

from .._fingerprint.user_agents import (
    USER_AGENTS,
    get_user_agent,
    list_browsers,
    list_platforms,
)
from .._fingerprint.headers import HeaderGenerator, format_platform

__all__ = [
    "USER_AGENTS",
    "get_user_agent",
    "list_browsers",
    "list_platforms",
    "HeaderGenerator",
    "format_platform",
]
