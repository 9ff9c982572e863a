"""Native header containers for HTTP client backends."""

from .native import available_transports, supports_transport, to_transport_headers

__all__ = ["available_transports", "supports_transport", "to_transport_headers"]
