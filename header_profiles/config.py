"""Configuration dataclass for header generation."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Sequence

# Fields where None means "not set" and the base value is inherited
INHERIT_ON_NONE = ("browser", "os", "device")


@dataclass(frozen=True)
class HeaderOptions:
    """Options controlling which header profile is generated.

    Attributes:
        browser: Browser family - "chrome", "firefox" or "safari".
        os: Operating system - "windows", "macos", "linux" or "ios".
        device: Device class - "desktop" or "mobile".
        locales: Language tags for Accept-Language, in preference order.
            None or empty omits the header.

    Values are not validated. Unknown browser or OS names fall back to
    known User-Agent templates at generation time.
    """

    browser: str = "chrome"
    os: str = "windows"
    device: str = "desktop"
    locales: tuple[str, ...] | None = ("en-US", "en")

    def __post_init__(self) -> None:
        """Store locales as a tuple so the record stays immutable."""
        if isinstance(self.locales, str):
            object.__setattr__(self, "locales", (self.locales,))
        elif self.locales is not None and not isinstance(self.locales, tuple):
            object.__setattr__(self, "locales", tuple(self.locales))

    def merged(
        self,
        overrides: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> HeaderOptions:
        """Return a new HeaderOptions with overrides applied field by field.

        The merge is shallow: a supplied ``locales`` replaces the whole
        sequence. None for browser, os or device is treated as omitted;
        None for locales is kept and drops Accept-Language.

        Args:
            overrides: Mapping of field overrides.
            **kwargs: Further overrides, applied after ``overrides``.

        Returns:
            Fresh HeaderOptions instance.

        Raises:
            TypeError: If an override names an unknown field, or
                ``overrides`` is not a mapping.
        """
        changes: dict[str, Any] = {}
        if overrides:
            changes.update(overrides)
        changes.update(kwargs)

        changes = {
            key: value for key, value in changes.items()
            if not (value is None and key in INHERIT_ON_NONE)
        }
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Get options as a plain dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_OPTIONS = HeaderOptions()


def resolve_options(
    options: HeaderOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> HeaderOptions:
    """Merge partial options over the built-in defaults.

    A complete HeaderOptions is used as the base instead of the defaults.
    """
    if isinstance(options, HeaderOptions):
        return options.merged(**kwargs)
    return DEFAULT_OPTIONS.merged(options, **kwargs)


def normalize_locales(locales: Sequence[str] | None) -> tuple[str, ...]:
    """Get locales as a tuple, treating None as empty."""
    if not locales:
        return ()
    return tuple(locales)
