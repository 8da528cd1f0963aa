"""Locale resolution and ``.properties`` translation loading."""

from .locale import Locale, Tier, candidate_files
from .properties import merge_into, parse_properties, read_properties
from .resolver import (
    DirectoryListingChecker,
    ExistenceChecker,
    FileSystemChecker,
    LocaleResolver,
    Resolution,
    first_existing,
)
from .strings import StringsLoader, Translations, get_movie_title, get_row_title

__all__ = [
    "Locale",
    "Tier",
    "candidate_files",
    "merge_into",
    "parse_properties",
    "read_properties",
    "DirectoryListingChecker",
    "ExistenceChecker",
    "FileSystemChecker",
    "LocaleResolver",
    "Resolution",
    "first_existing",
    "StringsLoader",
    "Translations",
    "get_movie_title",
    "get_row_title",
]
