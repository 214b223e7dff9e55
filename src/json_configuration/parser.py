"""JSON text parser and printer producing JSON value trees."""

import json
import logging
import math
import re
from typing import Any, Optional, Union
from .types import INT_MIN, INT_MAX, LONG_MIN, LONG_MAX, JSONSyntaxError, NumberFormatError


_INTEGER_TOKEN = re.compile(r"-?(0|[1-9][0-9]*)")


class JsonNumber:
    """
    A JSON number kept as its source token.

    The width accessors raise NumberFormatError when the token cannot be
    represented at the requested width, so callers can fall back to a
    wider one.
    """

    __slots__ = ("token",)

    def __init__(self, token: str):
        self.token = token

    def as_int(self) -> int:
        """Return the token as a 32-bit signed integer."""
        value = self._as_integer()
        if not INT_MIN <= value <= INT_MAX:
            raise NumberFormatError(f"{self.token} does not fit in 32 bits")
        return value

    def as_long(self) -> int:
        """Return the token as a 64-bit signed integer."""
        value = self._as_integer()
        if not LONG_MIN <= value <= LONG_MAX:
            raise NumberFormatError(f"{self.token} does not fit in 64 bits")
        return value

    def as_double(self) -> float:
        """Return the token as a finite 64-bit float."""
        try:
            value = float(self.token)
        except ValueError:
            raise NumberFormatError(f"{self.token!r} is not a number")
        if not math.isfinite(value):
            raise NumberFormatError(f"{self.token} is outside the double range")
        return value

    def _as_integer(self) -> int:
        if not _INTEGER_TOKEN.fullmatch(self.token):
            raise NumberFormatError(f"{self.token!r} is not an integer")
        try:
            return int(self.token)
        except ValueError as e:
            # int() refuses tokens beyond the interpreter's digit limit
            raise NumberFormatError(f"{self.token[:20]}... has too many digits") from e

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, JsonNumber) and other.token == self.token

    def __hash__(self) -> int:
        return hash(self.token)

    def __repr__(self) -> str:
        return f"JsonNumber({self.token!r})"


def _number_default(value: Any) -> Union[int, float]:
    if isinstance(value, JsonNumber):
        try:
            return value._as_integer()
        except NumberFormatError:
            return value.as_double()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class _InvalidConstant(Exception):
    """Raised from the parse_constant hook for NaN and Infinity literals."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> Any:
    raise _InvalidConstant(name)


def _constant_position(json_string: str) -> int:
    """Offset of the first NaN or Infinity literal outside string values."""
    for match in _CONSTANT_SCAN.finditer(json_string):
        if match.group(1):
            return match.start(1)
    return 0


_CONSTANT_SCAN = re.compile(r'"(?:[^"\\]|\\.)*"|(-?Infinity|NaN)', re.DOTALL)


class JSONParser:
    """
    Parses JSON text into JSON value trees and prints them back.

    Numbers are never converted during parsing: every number becomes a
    JsonNumber so that narrowing is left to the decoder. The NaN and
    Infinity literals are not JSON and are rejected as syntax errors.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse JSON text into a JSON value tree.

        Args:
            json_string: JSON text to parse

        Returns:
            Parsed tree of dict, list, str, bool, None and JsonNumber values

        Raises:
            JSONSyntaxError: If the text is not valid JSON
        """
        try:
            data = json.loads(
                json_string,
                parse_int=JsonNumber,
                parse_float=JsonNumber,
                parse_constant=_reject_constant,
            )
        except json.JSONDecodeError as e:
            raise JSONSyntaxError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                line=e.lineno,
                column=e.colno,
            )
        except _InvalidConstant as e:
            position = _constant_position(json_string)
            line = json_string.count("\n", 0, position) + 1
            column = position - json_string.rfind("\n", 0, position)
            raise JSONSyntaxError(
                f"JSON parsing failed: Invalid literal {e.name} at line {line}, column {column}",
                line=line,
                column=column,
            )

        self.logger.debug(f"Parsed JSON with root type: {type(data).__name__}")
        return data

    def to_text(self, value: Any, pretty: bool = True, indent: int = 2) -> str:
        """
        Print a JSON value tree as text.

        Args:
            value: JSON value tree to print
            pretty: Indent nested values and end with a newline
            indent: Spaces per nesting level when pretty printing

        Returns:
            JSON text
        """
        if pretty:
            return json.dumps(value, indent=indent, ensure_ascii=False, default=_number_default) + "\n"
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_number_default)
