"""Utilities that are independent of the numerical core."""

from .archive import zip_files

__all__ = ["zip_files"]
