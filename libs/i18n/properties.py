"""Flat ``key.path=value`` files turned into nested dictionaries.

For example ``list.display_name.RecentlyWatchedList=Continue Watching``
becomes::

    {"list": {"display_name": {"RecentlyWatchedList": "Continue Watching"}}}

There is no comment, escaping or line-continuation syntax. Everything after
the first ``=`` is the value; a line without ``=`` maps its key to ``None``.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from libs.core.exceptions import KeyCollisionError, TranslationReadError

logger = logging.getLogger(__name__)

Store = Dict[str, Any]


def merge_into(store: Store, key_path: str, value: Optional[str], strict: bool = False) -> bool:
    """Insert ``value`` under the dotted ``key_path``, creating levels as needed.

    Returns ``False`` when the key was skipped because a leaf and a mapping
    would share a path. With ``strict=True`` that raises instead.
    """

    keys = key_path.split(".")
    current = store
    for key in keys[:-1]:
        if key not in current:
            current[key] = {}
        child = current[key]
        if not isinstance(child, dict):
            return _collision(key_path, strict)
        current = child

    last_key = keys[-1]
    if isinstance(current.get(last_key), dict):
        return _collision(key_path, strict)
    current[last_key] = value
    return True


def _collision(key_path: str, strict: bool) -> bool:
    if strict:
        raise KeyCollisionError(key_path)
    logger.warning("Skipping translation key '%s': collides with an existing entry", key_path)
    return False


def parse_properties(text: str, into: Store | None = None, strict: bool = False) -> Store:
    """Parse property ``text`` and merge every entry into ``into`` (or a new dict)."""

    store: Store = {} if into is None else into
    for line in text.split("\n"):
        line = line.rstrip("\r")
        if not line:
            continue
        key_path, sep, value = line.partition("=")
        merge_into(store, key_path, value if sep else None, strict=strict)
    return store


async def read_properties(path: Path) -> str:
    """Read a translation file as UTF-8 text without blocking the event loop."""

    path = Path(path)
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TranslationReadError(path, str(exc)) from exc


__all__ = ["Store", "merge_into", "parse_properties", "read_properties"]
