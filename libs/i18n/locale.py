from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

PROPERTIES_SUFFIX = ".properties"


class Tier(str, Enum):
    """Fallback level a translation file was selected from."""

    EXACT = "exact"
    LANGUAGE = "language"
    DEFAULT = "default"


@dataclass(frozen=True)
class Locale:
    """Language tag of the form ``language`` or ``language_REGION``."""

    language: str
    region: Optional[str] = None

    @classmethod
    def parse(cls, tag: str | None, default: str = "en_US") -> "Locale":
        """Split ``tag`` on ``_``; anything past the region is ignored."""

        raw = (tag or "").strip() or default
        parts = raw.split("_")
        region = parts[1] if len(parts) > 1 and parts[1] else None
        return cls(language=parts[0], region=region)

    def __str__(self) -> str:
        if self.region:
            return f"{self.language}_{self.region}"
        return self.language


def properties_filename(namespace: str, *parts: str) -> str:
    return "_".join([namespace, *parts]) + PROPERTIES_SUFFIX


def candidate_files(namespace: str, locale: Locale, default_locale: str) -> List[Tuple[Tier, str]]:
    """Return translation file names in priority order, most specific first.

    The default-locale file is always last so callers can rely on it being
    the final fallback.
    """

    candidates: List[Tuple[Tier, str]] = []
    if locale.region:
        candidates.append((Tier.EXACT, properties_filename(namespace, locale.language, locale.region)))
    candidates.append((Tier.LANGUAGE, properties_filename(namespace, locale.language)))
    candidates.append((Tier.DEFAULT, properties_filename(namespace, default_locale)))
    return candidates


__all__ = ["Locale", "Tier", "candidate_files", "properties_filename", "PROPERTIES_SUFFIX"]
