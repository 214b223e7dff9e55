"""Encoder turning configuration trees into JSON value trees."""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional
from .types import LONG_MIN, LONG_MAX, ConfigurationSection, DropReason, ErrorHandlerInterface
from .utils import child_path, index_path


class SectionEncoder:
    """
    Converts generic mappings and configuration sections into JSON values.

    Encoding is best effort: a value of a type JSON cannot represent is
    left out of its parent object or array, never replaced with null.
    """

    def __init__(self, error_handler: Optional[ErrorHandlerInterface] = None,
                 logger: Optional[logging.Logger] = None,
                 path_separator: str = "."):
        """
        Initialize the encoder.

        Args:
            error_handler: Optional handler notified about dropped values
            logger: Optional logger instance
            path_separator: Separator used in diagnostic paths
        """
        self.error_handler = error_handler
        self.logger = logger or logging.getLogger(__name__)
        self.path_separator = path_separator

    def map_as_json_object(self, mapping: Mapping, path: str = "") -> Dict[str, Any]:
        """
        Convert a mapping into a JSON object.

        Args:
            mapping: Mapping of keys to generic values
            path: Location of the mapping, used for diagnostics

        Returns:
            JSON object holding every representable entry
        """
        json_object = {}
        for key, value in mapping.items():
            name = str(key)
            json_value = self.object_as_json_value(value, child_path(path, name, self.path_separator))
            if json_value is not None:
                json_object[name] = json_value
        return json_object

    def collection_as_json_array(self, iterable: Iterable, path: str = "") -> List[Any]:
        """
        Convert an iterable into a JSON array, keeping element order.

        Args:
            iterable: Iterable of generic values
            path: Location of the iterable, used for diagnostics

        Returns:
            JSON array holding every representable element
        """
        array = []
        for index, element in enumerate(iterable):
            json_value = self.object_as_json_value(element, index_path(path, index))
            if json_value is not None:
                array.append(json_value)
        return array

    def object_as_json_value(self, value: Any, path: str = "") -> Optional[Any]:
        """
        Convert a single generic value into a JSON value.

        Args:
            value: Generic value to convert
            path: Location of the value, used for diagnostics

        Returns:
            The JSON value, or None if the value cannot be represented
        """
        # bool is an int subclass, so it goes first
        if isinstance(value, bool):
            return value

        if isinstance(value, int):
            # 32-bit and 64-bit integers print the same way
            if LONG_MIN <= value <= LONG_MAX:
                return value
            return self._drop(path, value, DropReason.NUMBER_OUT_OF_RANGE)

        if isinstance(value, float):
            if math.isfinite(value):
                return value
            return self._drop(path, value, DropReason.NUMBER_OUT_OF_RANGE)

        if isinstance(value, str):
            return value

        if isinstance(value, Iterable) and not isinstance(
                value, (Mapping, bytes, bytearray, memoryview, ConfigurationSection)):
            return self.collection_as_json_array(value, path)

        if isinstance(value, Mapping):
            return self.map_as_json_object(value, path)

        if isinstance(value, ConfigurationSection):
            return self.map_as_json_object(value.get_values(False), path)

        reason = DropReason.NULL_VALUE if value is None else DropReason.UNSUPPORTED_TYPE
        return self._drop(path, value, reason)

    def _drop(self, path: str, value: Any, reason: DropReason) -> None:
        if self.error_handler is not None:
            self.error_handler.handle_drop(path, value, reason)
        else:
            self.logger.debug(f"Skipping {type(value).__name__} at {path or '<root>'}: {reason.value}")
        return None
