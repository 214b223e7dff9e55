"""Narrowest-fit classification of JSON numbers."""

import logging
from typing import Optional, Union
from .parser import JsonNumber
from .types import ClassifiedNumber, NumberFormatError, NumberKind


class NumberClassifier:
    """
    Picks the narrowest numeric width for a JSON number.

    Widths are tried in a fixed order: 32-bit int, 64-bit int, then double.
    A number that fits none of them yields no value at all.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def classify(self, number: Union[JsonNumber, str]) -> Optional[ClassifiedNumber]:
        """
        Classify a JSON number token.

        Args:
            number: JsonNumber or raw numeric token

        Returns:
            ClassifiedNumber with the chosen width, or None if the token
            fits no supported width
        """
        if not isinstance(number, JsonNumber):
            number = JsonNumber(str(number))

        try:
            return ClassifiedNumber(NumberKind.INT, number.as_int())
        except NumberFormatError:
            try:
                return ClassifiedNumber(NumberKind.LONG, number.as_long())
            except NumberFormatError:
                try:
                    return ClassifiedNumber(NumberKind.DOUBLE, number.as_double())
                except NumberFormatError as e:
                    self.logger.debug(f"Unclassifiable number: {e}")
        return None

    def parse_number(self, number: Union[JsonNumber, str]) -> Optional[Union[int, float]]:
        """Return the classified value only, or None."""
        classified = self.classify(number)
        return classified.value if classified is not None else None
