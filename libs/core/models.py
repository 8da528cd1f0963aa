"""Pydantic models representing core domain entities."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class I18nConfig(BaseModel):
    """Where translation files live and which locale to fall back to."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    default_locale: str = "en_US"


class MovieTile(BaseModel):
    """Single box-art tile rendered inside a row."""

    id: str
    box_art_150x214: str = ""
    box_art_350x197: str = ""


class Row(BaseModel):
    """Named row of movies on the listing page."""

    title: str
    movies: List[MovieTile] = Field(default_factory=list)


__all__ = ["I18nConfig", "MovieTile", "Row"]
