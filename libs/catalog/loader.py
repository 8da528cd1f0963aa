from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from libs.core.exceptions import CatalogError, ParseError
from libs.core.models import MovieTile, Row


async def load_catalog(path: Path) -> Dict[str, Any]:
    """Read and decode the movie catalog JSON file."""

    path = Path(path)
    try:
        raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Malformed catalog {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"Catalog {path} must contain a JSON object")
    return data


def _movie_at(movies: Any, index: Any) -> Mapping[str, Any]:
    # ``movies`` is either a list or an object keyed by stringified index
    try:
        if isinstance(movies, list):
            movie = movies[int(index)]
        else:
            movie = movies[str(index)]
    except (IndexError, KeyError, ValueError, TypeError) as exc:
        raise ParseError(f"Unknown movie reference {index!r}") from exc
    if not isinstance(movie, Mapping):
        raise ParseError(f"Movie {index!r} is not an object")
    return movie


def _tile(movie: Mapping[str, Any]) -> MovieTile:
    summary = movie.get("summary") or {}
    box_art = summary.get("box_art") or {}
    if "id" not in summary:
        raise ParseError("Movie summary has no id")
    return MovieTile(
        id=str(summary["id"]),
        box_art_150x214=box_art.get("150x214", ""),
        box_art_350x197=box_art.get("350x197", ""),
    )


def build_rows(catalog: Mapping[str, Any]) -> List[Row]:
    """Reshape the raw catalog into the rows the listing template iterates.

    Only the row key, movie id and the two box-art URLs are kept.
    """

    try:
        lists = catalog["lists"]
        movies = catalog["movies"]
    except (KeyError, TypeError) as exc:
        raise ParseError("Catalog must contain 'lists' and 'movies'") from exc

    rows: List[Row] = []
    for entry in lists:
        try:
            title = entry["summary"]["key"]
        except (KeyError, TypeError) as exc:
            raise ParseError("List entry has no summary key") from exc
        tiles = [_tile(_movie_at(movies, index)) for index in entry.get("movies", [])]
        rows.append(Row(title=str(title), movies=tiles))
    return rows


__all__ = ["load_catalog", "build_rows"]
