"""Diagnostics for values dropped during conversion."""

import logging
from typing import Any, List, Optional
from .types import (
    ConfigurationError,
    DropReason,
    DroppedValue,
    ErrorHandlerInterface,
    ErrorResponse,
    ErrorType,
)


class ErrorHandler(ErrorHandlerInterface):
    """
    Optional diagnostic channel for the encoder and decoder.

    Conversions never raise for unsupported values; they hand each dropped
    value to this handler instead. Drops are logged at DEBUG level and, when
    collection is enabled, kept for later inspection.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, collect: bool = False):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for drop reporting
            collect: Keep DroppedValue records in memory
        """
        self.logger = logger or logging.getLogger(__name__)
        self.collect = collect
        self._drops: List[DroppedValue] = []

    @property
    def drops(self) -> List[DroppedValue]:
        """Dropped values recorded so far, oldest first."""
        return list(self._drops)

    def clear(self) -> None:
        """Forget all recorded drops."""
        self._drops.clear()

    def handle_drop(self, path: str, value: Any, reason: DropReason) -> None:
        """
        Record a value that a conversion left out.

        Args:
            path: Location of the value, dotted for keys and [n] for indexes
            value: The dropped value
            reason: Why the value was dropped
        """
        record = DroppedValue(
            path=path or "<root>",
            reason=reason,
            value_type=type(value).__name__
        )
        self.logger.debug(f"Dropped {record.value_type} at {record.path}: {reason.value}")

        if self.collect:
            self._drops.append(record)

    def handle_configuration_error(self, error: ConfigurationError) -> ErrorResponse:
        """
        Handle fatal configuration errors and suggest a fix.

        Args:
            error: ConfigurationError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Configuration error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return ErrorResponse(
                can_recover=False,
                suggested_action=f"Fix the JSON syntax near line {error.context.get('line')}, "
                                 f"column {error.context.get('column')}.",
                context=error.context
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Check that the file exists, is readable and writable, "
                                 "and is UTF-8 encoded.",
                context=error.context
            )
