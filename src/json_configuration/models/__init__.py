"""Data models for JSON Configuration."""

from .options import JsonConfigurationOptions

__all__ = ["JsonConfigurationOptions"]
