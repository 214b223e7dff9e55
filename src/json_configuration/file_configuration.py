"""Base class for configurations backed by a file."""

import logging
from abc import abstractmethod
from pathlib import Path
from typing import Optional, Union
from .io import ConfigFile
from .models import JsonConfigurationOptions
from .section import MemorySection


class FileConfiguration(MemorySection):
    """
    A root configuration section that can be loaded from and saved to a file.

    Subclasses supply the text format through save_to_string,
    load_from_string and build_header.
    """

    def __init__(self, options: Optional[JsonConfigurationOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the configuration.

        Args:
            options: Optional options instance, created lazily when omitted
            logger: Optional logger instance
        """
        self._options = options
        self.logger = logger or logging.getLogger(__name__)
        self.config_file = ConfigFile(self.logger)
        super().__init__()

    @property
    def path_separator(self) -> str:
        return self.options().path_separator

    def options(self) -> JsonConfigurationOptions:
        """Get the options of this configuration."""
        if self._options is None:
            self._options = JsonConfigurationOptions()
        return self._options

    def load(self, path: Union[str, Path]) -> None:
        """
        Load values from a file into this configuration.

        Args:
            path: File to load

        Raises:
            ConfigurationIOError: If the file cannot be read
            JSONSyntaxError: If the file contents cannot be parsed
        """
        self.load_from_string(self.config_file.read(path))

    def save(self, path: Union[str, Path]) -> None:
        """
        Save this configuration to a file.

        Args:
            path: File to write

        Raises:
            ConfigurationIOError: If the file cannot be written
        """
        header = self.build_header()
        self.config_file.write(path, header + self.save_to_string())

    @abstractmethod
    def save_to_string(self) -> str:
        """Serialize this configuration to text."""
        pass

    @abstractmethod
    def load_from_string(self, contents: str) -> None:
        """Load values from text into this configuration."""
        pass

    @abstractmethod
    def build_header(self) -> str:
        """Build the header written before the serialized values."""
        pass
