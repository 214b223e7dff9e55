"""File I/O operations for JSON Configuration."""

from .config_file import ConfigFile

__all__ = ["ConfigFile"]
