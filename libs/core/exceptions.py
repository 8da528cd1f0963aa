"""Base exceptions for the domain layer."""

from __future__ import annotations

from pathlib import Path


class DomainError(Exception):
    """Base class for all domain level exceptions."""


class NotFoundError(DomainError):
    """Raised when an entity cannot be located."""


class ValidationError(DomainError):
    """Raised when data fails domain validation rules."""


class TranslationReadError(DomainError):
    """Raised when the resolved translation file cannot be read."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        message = f"Cannot read translation file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class KeyCollisionError(DomainError):
    """Raised when a dotted key mixes a leaf and a mapping at the same path."""

    def __init__(self, key_path: str) -> None:
        self.key_path = key_path
        super().__init__(f"Key '{key_path}' collides with an existing entry")


class CatalogError(DomainError):
    """Raised when the movie catalog cannot be loaded."""


class ParseError(CatalogError):
    """Raised when the movie catalog is malformed."""


__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "TranslationReadError",
    "KeyCollisionError",
    "CatalogError",
    "ParseError",
]
