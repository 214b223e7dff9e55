"""Options model for JSON configurations."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class JsonConfigurationOptions:
    """Options controlling how a JsonConfiguration is read and written."""

    indent: int = 2
    path_separator: str = "."

    def __post_init__(self):
        """Validate options after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate option values."""
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            raise ValueError("indent must be an integer")

        if self.indent < 0:
            raise ValueError("indent cannot be negative")

        if not isinstance(self.path_separator, str) or len(self.path_separator) != 1:
            raise ValueError("path_separator must be a single character")

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary for JSON serialization."""
        return {
            "indent": self.indent,
            "pathSeparator": self.path_separator
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JsonConfigurationOptions':
        """Create JsonConfigurationOptions from dictionary."""
        return cls(
            indent=data.get("indent", 2),
            path_separator=data.get("pathSeparator", ".")
        )
