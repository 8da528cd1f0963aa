"""Pick the single translation file to load for a namespace and locale.

Candidates are checked in priority order:

1. ``<namespace>_<language>_<REGION>.properties``
2. ``<namespace>_<language>.properties``
3. ``<namespace>_<default_locale>.properties``

The first two existence checks run concurrently and the decision waits for
both. The default file is never checked; if it is missing too, reading it
fails later with ``TranslationReadError``.
"""

from __future__ import annotations

import asyncio
import logging
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Protocol, Sequence, Tuple

from libs.core.exceptions import NotFoundError, ValidationError

from .locale import Locale, Tier, candidate_files

logger = logging.getLogger(__name__)


class ExistenceChecker(Protocol):
    async def exists(self, path: Path) -> bool:
        ...


def _is_file(path: Path) -> bool:
    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError):
        return False
    return stat.S_ISREG(mode)


class FileSystemChecker:
    """Stat the file in a worker thread.

    Only "not found" is reported as ``False``; other ``OSError`` such as
    permission problems propagate to the resolver.
    """

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(_is_file, Path(path))


class DirectoryListingChecker:
    """Answer existence checks from a cached listing of each directory."""

    def __init__(self) -> None:
        self._listings: Dict[Path, FrozenSet[str]] = {}

    async def exists(self, path: Path) -> bool:
        path = Path(path)
        names = self._listings.get(path.parent)
        if names is None:
            names = await asyncio.to_thread(self._list, path.parent)
            self._listings[path.parent] = names
        return path.name in names

    def refresh(self) -> None:
        self._listings.clear()

    @staticmethod
    def _list(directory: Path) -> FrozenSet[str]:
        if not directory.is_dir():
            return frozenset()
        return frozenset(p.name for p in directory.iterdir() if p.is_file())


@dataclass(frozen=True)
class Resolution:
    tier: Tier
    filename: str
    path: Path
    # locale the selected file is written in
    locale: Locale


def first_existing(candidates: Sequence[Tuple[Tier, str]], found: Sequence[bool]) -> Tuple[Tier, str]:
    """Return the first candidate whose check succeeded, else the last one."""

    for candidate, exists in zip(candidates, found):
        if exists:
            return candidate
    return candidates[-1]


class LocaleResolver:
    def __init__(
        self,
        directory: Path,
        default_locale: str = "en_US",
        checker: ExistenceChecker | None = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.directory = Path(directory)
        self.default_locale = default_locale
        self.checker = checker or FileSystemChecker()
        self.timeout = timeout

    async def resolve(self, namespace: str, locale: Locale | str | None = None) -> Resolution:
        if not namespace:
            raise ValidationError("String namespace is not defined.")
        if not isinstance(locale, Locale):
            locale = Locale.parse(locale, self.default_locale)

        candidates = candidate_files(namespace, locale, self.default_locale)
        # the default candidate is used unconditionally, so it is not probed
        probes = candidates[:-1]
        found = await self._check_all([name for _, name in probes])

        tier, filename = first_existing(candidates, found)
        logger.debug(
            "Resolved translations | namespace=%s | locale=%s | tier=%s | file=%s",
            namespace,
            locale,
            tier.value,
            filename,
        )
        if tier is Tier.EXACT:
            selected = locale
        elif tier is Tier.LANGUAGE:
            selected = Locale(locale.language)
        else:
            selected = Locale.parse(self.default_locale)
        return Resolution(tier=tier, filename=filename, path=self.directory / filename, locale=selected)

    async def _check_all(self, filenames: List[str]) -> List[bool]:
        if not filenames:
            return []
        tasks = [asyncio.ensure_future(self._check(name)) for name in filenames]
        _, pending = await asyncio.wait(tasks, timeout=self.timeout)
        if pending:
            # finished checks still count; only the stalled tiers are dropped
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            logger.warning(
                "Existence checks timed out after %ss",
                self.timeout,
                extra={"candidates": [name for name, task in zip(filenames, tasks) if task in pending]},
            )
        return [bool(task.done() and not task.cancelled() and task.result()) for task in tasks]

    async def _check(self, filename: str) -> bool:
        try:
            return bool(await self.checker.exists(self.directory / filename))
        except NotFoundError:
            return False
        except Exception as exc:
            # a failing check only disqualifies its own tier
            logger.warning("Existence check failed for %s: %s", filename, exc)
            return False


__all__ = [
    "ExistenceChecker",
    "FileSystemChecker",
    "DirectoryListingChecker",
    "LocaleResolver",
    "Resolution",
    "first_existing",
]
