"""Exceptions raised by the header_profiles package."""


class HeaderProfileError(Exception):
    """Base exception for header profile errors."""
    pass


class EnvironmentUnsupported(HeaderProfileError):
    """No native header container is available for the requested backend."""

    def __init__(self, backend: str, message: str | None = None):
        if message is None:
            message = f"Native headers for backend '{backend}' are not available in this environment"
        super().__init__(message)
        self.backend = backend
