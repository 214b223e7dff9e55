"""
JSON Configuration - JSON documents as hierarchical configuration sections.

Loads JSON text into a tree of configuration sections and saves the tree
back as pretty-printed JSON, keeping integers narrow where they fit.
"""

from .decoder import SectionDecoder
from .encoder import SectionEncoder
from .error_handler import ErrorHandler
from .file_configuration import FileConfiguration
from .json_configuration import JsonConfiguration
from .models import JsonConfigurationOptions
from .number_classifier import NumberClassifier
from .parser import JSONParser, JsonNumber
from .section import MemorySection
from .types import (
    ClassifiedNumber,
    ConfigurationError,
    ConfigurationIOError,
    ConfigurationSection,
    DropReason,
    DroppedValue,
    JSONSyntaxError,
    NumberFormatError,
    NumberKind,
)

__version__ = "1.0.0"
__all__ = [
    "JsonConfiguration",
    "JsonConfigurationOptions",
    "FileConfiguration",
    "MemorySection",
    "ConfigurationSection",
    "SectionEncoder",
    "SectionDecoder",
    "NumberClassifier",
    "JSONParser",
    "JsonNumber",
    "ErrorHandler",
    "ClassifiedNumber",
    "NumberKind",
    "DropReason",
    "DroppedValue",
    "ConfigurationError",
    "ConfigurationIOError",
    "JSONSyntaxError",
    "NumberFormatError",
]
