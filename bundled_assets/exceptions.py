"""Exception hierarchy for bundled-assets.

All errors raised by the package derive from :class:`BundledAssetsError`.
Several also derive from a builtin so callers can catch them generically
(``ValueError`` for bad arguments, ``LookupError`` for missing bundles).
"""

from __future__ import annotations

from typing import Any


class BundledAssetsError(Exception):
    """Base class for all bundled-assets errors.

    Attributes:
        message: Human readable description.
        details: Optional structured context (resource names, keys, ...).
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class ResourceNotFoundError(BundledAssetsError):
    """A named resource does not exist under the resource root."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        self.name = name
        super().__init__(f"Resource not found: {name}", details)


class InvalidScopeError(BundledAssetsError, ValueError):
    """A discovery scope tried to leave the resource root."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"Invalid resource scope: {scope!r}")


class AssetDecodeError(BundledAssetsError):
    """A resource could not be decoded into an asset."""

    def __init__(self, name: str, reason: str, details: dict[str, Any] | None = None) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to decode {name}: {reason}", details)


class BundleNotFoundError(BundledAssetsError, LookupError):
    """No string table exists for a base name under any fallback locale."""

    def __init__(self, base_name: str, locale: str, details: dict[str, Any] | None = None) -> None:
        self.base_name = base_name
        self.locale = locale
        super().__init__(
            f"Can't find bundle for base name {base_name}, locale {locale}", details
        )


class UnknownConfigKeyError(BundledAssetsError, ValueError):
    """A configuration key was requested through the strict accessor but is absent."""

    def __init__(self, key: str, sources: list[str]) -> None:
        self.key = key
        self.sources = sources
        joined = ", ".join(sources)
        super().__init__(f"The config key '{key}' is not present in {joined}")


class ConfigError(BundledAssetsError):
    """Application configuration is malformed."""
