"""Core type definitions for JSON Configuration."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union


INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


class NumberKind(Enum):
    """Numeric widths a JSON number can be narrowed to."""
    INT = "int"
    LONG = "long"
    DOUBLE = "double"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    FILESYSTEM = "filesystem"


class DropReason(Enum):
    """Why a value was left out of a conversion."""
    UNSUPPORTED_TYPE = "unsupported-type"
    NUMBER_OUT_OF_RANGE = "number-out-of-range"
    NULL_VALUE = "null-value"
    NON_OBJECT_ROOT = "non-object-root"


@dataclass
class ClassifiedNumber:
    """A JSON number narrowed to the smallest fitting width."""
    kind: NumberKind
    value: Union[int, float]


@dataclass
class DroppedValue:
    """Details of a value that a conversion silently omitted."""
    path: str
    reason: DropReason
    value_type: str


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    context: Dict[str, Any] = field(default_factory=dict)


class ConfigurationError(Exception):
    """Base exception for configuration load and save failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class JSONSyntaxError(ConfigurationError):
    """Raised when configuration text is not valid JSON."""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(message, ErrorType.SYNTAX, context={"line": line, "column": column})
        self.line = line
        self.column = column


class ConfigurationIOError(ConfigurationError):
    """Raised when a configuration file cannot be read or written."""

    def __init__(self, message: str, path: str):
        super().__init__(message, ErrorType.FILESYSTEM, context={"path": path})
        self.path = path


class NumberFormatError(ValueError):
    """Raised by JSON number accessors when the token does not fit."""


# Abstract base classes for interfaces

class ConfigurationSection(ABC):
    """Abstract interface for a hierarchical configuration section."""

    @abstractmethod
    def get(self, path: str, default: Any = None) -> Any:
        """Get the value stored at path."""
        pass

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        """Set the value stored at path."""
        pass

    @abstractmethod
    def create_section(self, path: str, values: Optional[Dict[str, Any]] = None) -> 'ConfigurationSection':
        """Create an empty child section at path."""
        pass

    @abstractmethod
    def get_values(self, deep: bool) -> Dict[str, Any]:
        """Get a key to value view of this section."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for conversion diagnostics."""

    @abstractmethod
    def handle_drop(self, path: str, value: Any, reason: DropReason) -> None:
        """Record a silently dropped value."""
        pass

    @abstractmethod
    def handle_configuration_error(self, error: ConfigurationError) -> ErrorResponse:
        """Describe a fatal configuration error."""
        pass
