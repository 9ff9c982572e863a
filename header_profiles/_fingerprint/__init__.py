"""Browser header templates and generation."""

from .user_agents import USER_AGENTS, get_user_agent, list_browsers, list_platforms
from .headers import HeaderGenerator, format_platform

__all__ = [
    "USER_AGENTS",
    "get_user_agent",
    "list_browsers",
    "list_platforms",
    "HeaderGenerator",
    "format_platform",
]
