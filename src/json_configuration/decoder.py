"""Decoder turning JSON value trees into generic values and sections."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional
from .number_classifier import NumberClassifier
from .parser import JsonNumber
from .types import ConfigurationSection, DropReason, ErrorHandlerInterface
from .utils import child_path, index_path


class SectionDecoder:
    """
    Converts JSON value trees into generic values or configuration sections.

    Decoding into a section is done in two phases. The JSON object is first
    decoded into plain generic values; that result is then walked once more,
    turning mapping values into child sections and setting everything else
    as a leaf. Arrays therefore always land as a single list-valued leaf,
    even when their elements are objects.
    """

    def __init__(self, number_classifier: Optional[NumberClassifier] = None,
                 error_handler: Optional[ErrorHandlerInterface] = None,
                 logger: Optional[logging.Logger] = None,
                 path_separator: str = "."):
        """
        Initialize the decoder.

        Args:
            number_classifier: Optional NumberClassifier instance
            error_handler: Optional handler notified about dropped values
            logger: Optional logger instance
            path_separator: Separator used in diagnostic paths
        """
        self.logger = logger or logging.getLogger(__name__)
        self.number_classifier = number_classifier or NumberClassifier(self.logger)
        self.error_handler = error_handler
        self.path_separator = path_separator

    def convert_map_to_section(self, json_object: Dict[str, Any], section: ConfigurationSection) -> None:
        """
        Decode a JSON object into a configuration section, in place.

        Args:
            json_object: Parsed JSON object
            section: Destination section
        """
        self._convert_mapping_to_section(self.json_object_as_map(json_object), section)

    def _convert_mapping_to_section(self, mapping: Mapping, section: ConfigurationSection) -> None:
        result = self.deserialize(mapping)
        for key, value in result.items():
            if isinstance(value, dict):
                self.logger.debug(f"Creating section {key}")
                self._convert_mapping_to_section(value, section.create_section(key))
            else:
                section.set(key, value)

    def json_object_as_map(self, json_object: Dict[str, Any], path: str = "") -> Dict[str, Any]:
        """
        Decode a JSON object into a generic mapping.

        Args:
            json_object: Parsed JSON object
            path: Location of the object, used for diagnostics

        Returns:
            Mapping without the members that produced no value
        """
        result = {}
        for name, member in json_object.items():
            value = self.json_value_as_object(member, child_path(path, name, self.path_separator))
            if value is not None:
                result[name] = value
        return result

    def json_array_as_list(self, array: List[Any], path: str = "") -> List[Any]:
        """Decode a JSON array, skipping elements that produce no value."""
        result = []
        for index, element in enumerate(array):
            value = self.json_value_as_object(element, index_path(path, index))
            if value is not None:
                result.append(value)
        return result

    def json_value_as_object(self, value: Any, path: str = "") -> Optional[Any]:
        """
        Decode a single JSON value into a generic value.

        Plain int and float values (as produced by json.loads without
        number hooks) are classified the same way as JsonNumber tokens.

        Args:
            value: JSON value to decode
            path: Location of the value, used for diagnostics

        Returns:
            The generic value, or None if the value produced nothing
        """
        if isinstance(value, bool):
            return value

        if isinstance(value, (JsonNumber, int, float)):
            if not isinstance(value, JsonNumber):
                value = JsonNumber(repr(value))
            number = self.number_classifier.parse_number(value)
            if number is None:
                return self._drop(path, value, DropReason.NUMBER_OUT_OF_RANGE)
            return number

        if isinstance(value, str):
            return value

        if isinstance(value, list):
            return self.json_array_as_list(value, path)

        if isinstance(value, dict):
            return self.json_object_as_map(value, path)

        reason = DropReason.NULL_VALUE if value is None else DropReason.UNSUPPORTED_TYPE
        return self._drop(path, value, reason)

    def deserialize(self, value: Any) -> Any:
        """
        Normalize a generic tree.

        Every nested mapping becomes a dict with str keys and every
        non-string iterable (generators included) becomes a list.
        Leaves are returned unchanged.
        """
        if isinstance(value, Mapping):
            return {str(key): self.deserialize(item) for key, item in value.items()}
        if isinstance(value, Iterable) and not isinstance(
                value, (str, bytes, bytearray, memoryview, ConfigurationSection)):
            return [self.deserialize(item) for item in value]
        return value

    def _drop(self, path: str, value: Any, reason: DropReason) -> None:
        if self.error_handler is not None:
            self.error_handler.handle_drop(path, value, reason)
        else:
            self.logger.debug(f"Skipping {type(value).__name__} at {path or '<root>'}: {reason.value}")
        return None
