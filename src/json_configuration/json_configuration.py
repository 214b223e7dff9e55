"""JSON file configuration."""

import logging
from pathlib import Path
from typing import Optional, Union
from .decoder import SectionDecoder
from .encoder import SectionEncoder
from .file_configuration import FileConfiguration
from .models import JsonConfigurationOptions
from .number_classifier import NumberClassifier
from .parser import JSONParser
from .types import DropReason, ErrorHandlerInterface


BLANK_CONFIG = "{}\n"


class JsonConfiguration(FileConfiguration):
    """
    A configuration stored as a JSON document.

    Nested JSON objects load as child sections; arrays load as list values
    and keep any objects inside them as plain dictionaries. Loading is
    tolerant: empty text and documents whose root is not an object load
    nothing, and values that cannot be represented are skipped. Only
    unreadable files and malformed JSON syntax raise.
    """

    def __init__(self, options: Optional[JsonConfigurationOptions] = None,
                 error_handler: Optional[ErrorHandlerInterface] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the configuration.

        Args:
            options: Optional options instance
            error_handler: Optional handler notified about dropped values
            logger: Optional logger instance
        """
        super().__init__(options, logger)
        self.error_handler = error_handler
        self.parser = JSONParser(self.logger)
        separator = self.options().path_separator
        self.encoder = SectionEncoder(error_handler, self.logger, separator)
        self.decoder = SectionDecoder(NumberClassifier(self.logger), error_handler, self.logger, separator)

    @classmethod
    def load_configuration(cls, path: Union[str, Path],
                           options: Optional[JsonConfigurationOptions] = None,
                           error_handler: Optional[ErrorHandlerInterface] = None) -> 'JsonConfiguration':
        """
        Create a configuration and load it from a file.

        Args:
            path: JSON file to load
            options: Optional options instance
            error_handler: Optional handler notified about dropped values

        Returns:
            The loaded configuration

        Raises:
            ConfigurationIOError: If the file cannot be read
            JSONSyntaxError: If the file is not valid JSON
        """
        config = cls(options=options, error_handler=error_handler)
        config.load(path)
        return config

    def save_to_string(self) -> str:
        json_object = self.encoder.map_as_json_object(self.get_values(False))
        dump = self.parser.to_text(json_object, pretty=True, indent=self.options().indent)
        if dump == BLANK_CONFIG:
            return ""
        return dump

    def load_from_string(self, contents: str) -> None:
        if not contents:
            return

        parsed = self.parser.parse(contents)
        if not isinstance(parsed, dict):
            if self.error_handler is not None:
                self.error_handler.handle_drop("", parsed, DropReason.NON_OBJECT_ROOT)
            return

        self.decoder.convert_map_to_section(parsed, self)

    def build_header(self) -> str:
        return ""
