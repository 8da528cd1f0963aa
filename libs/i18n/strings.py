"""Loading translation stores and the lookups used by templates."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from libs.core.exceptions import ValidationError
from libs.core.models import I18nConfig

from .locale import Locale
from .properties import Store, parse_properties, read_properties
from .resolver import ExistenceChecker, LocaleResolver

logger = logging.getLogger(__name__)


def _freeze(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(
        {k: _freeze(v) if isinstance(v, Mapping) else v for k, v in mapping.items()}
    )


def _thaw(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _thaw(v) if isinstance(v, Mapping) else v for k, v in mapping.items()}


def _deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _deep_merge(current, value)
        else:
            target[key] = _thaw(value) if isinstance(value, Mapping) else value


class Translations:
    """Read-only nested mapping of translated strings.

    Leaves are strings, or ``None`` for keys that had no ``=`` in the file.
    Lookups never raise; a missing or empty entry yields the fallback.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, locale: Optional[Locale] = None) -> None:
        self._data = _freeze(data or {})
        self.locale = locale

    @property
    def language(self) -> str:
        return self.locale.language if self.locale else ""

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def lookup(self, *segments: str) -> Any:
        current: Any = self._data
        for segment in segments:
            if not isinstance(current, Mapping) or segment not in current:
                return None
            current = current[segment]
        return current

    def get(self, key_path: str, default: Optional[str] = None) -> Optional[str]:
        value = self.lookup(*key_path.split("."))
        return value if isinstance(value, str) else default

    def row_title(self, key: str) -> str:
        value = self.lookup("list", "display_name", key)
        return value if isinstance(value, str) and value else key

    def movie_title(self, movie_id: Any) -> str:
        value = self.lookup("movies", "title_short", str(movie_id))
        return value if isinstance(value, str) and value else ""

    def merge(self, other: "Translations") -> "Translations":
        """Return a new store with ``other`` layered on top; last write wins."""

        merged = _thaw(self._data)
        _deep_merge(merged, other.data)
        return Translations(merged, locale=self.locale)

    def to_dict(self) -> Dict[str, Any]:
        return _thaw(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Translations):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Translations({self.to_dict()!r})"


def get_row_title(store: Translations, key: str) -> str:
    return store.row_title(key)


def get_movie_title(store: Translations, movie_id: Any) -> str:
    return store.movie_title(movie_id)


class StringsLoader:
    """Resolve, read and parse translation files into ``Translations``.

    Every call builds its own store, so concurrent requests for different
    locales never share intermediate state. Parsed stores are immutable and,
    when ``cache`` is enabled, reused per resolved file.
    """

    def __init__(
        self,
        config: I18nConfig,
        checker: ExistenceChecker | None = None,
        timeout: Optional[float] = None,
        cache: bool = True,
        strict: bool = False,
    ) -> None:
        self.config = config
        self.resolver = LocaleResolver(
            config.directory,
            config.default_locale,
            checker=checker,
            timeout=timeout,
        )
        self.cache = cache
        self.strict = strict
        self._cache: Dict[Path, Translations] = {}

    async def get_strings(self, namespace: str, locale: Locale | str | None = None) -> Translations:
        if not namespace:
            raise ValidationError("String namespace is not defined.")

        resolution = await self.resolver.resolve(namespace, locale)
        cached = self._cache.get(resolution.path)
        if cached is not None:
            return cached

        text = await read_properties(resolution.path)
        store: Store = parse_properties(text, strict=self.strict)
        translations = Translations(store, locale=resolution.locale)
        logger.info(
            "Loaded translations from %s (%s tier)",
            resolution.filename,
            resolution.tier.value,
        )
        if self.cache:
            self._cache[resolution.path] = translations
        return translations

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = ["Translations", "StringsLoader", "get_row_title", "get_movie_title"]
