"""Movie catalog reading and row reshaping."""

from .loader import build_rows, load_catalog

__all__ = ["build_rows", "load_catalog"]
