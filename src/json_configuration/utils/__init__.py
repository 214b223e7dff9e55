"""Utility functions for JSON Configuration."""

from .paths import child_path, index_path

__all__ = ["child_path", "index_path"]
