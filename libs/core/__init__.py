"""Core library exposing domain models, settings and exceptions."""

from .settings import Settings, get_settings
from .exceptions import (
    DomainError,
    NotFoundError,
    ValidationError,
    TranslationReadError,
    KeyCollisionError,
    CatalogError,
    ParseError,
)
from .models import I18nConfig, MovieTile, Row

__all__ = [
    "Settings",
    "get_settings",
    "DomainError",
    "NotFoundError",
    "ValidationError",
    "TranslationReadError",
    "KeyCollisionError",
    "CatalogError",
    "ParseError",
    "I18nConfig",
    "MovieTile",
    "Row",
]
