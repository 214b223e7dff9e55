"""Reading and writing configuration files."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ConfigurationIOError


class ConfigFile:
    """
    UTF-8 text access to configuration files.

    Every operating-system or decoding failure is raised as a
    ConfigurationIOError carrying the offending path.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file accessor.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read(self, path: Union[str, Path]) -> str:
        """
        Read a configuration file.

        Args:
            path: File to read

        Returns:
            File contents

        Raises:
            ConfigurationIOError: If the file cannot be read or decoded
        """
        file_path = Path(path)
        try:
            contents = file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationIOError(f"Failed to read {file_path}: {e}", str(file_path))

        self.logger.info(f"Read {len(contents)} characters from {file_path}")
        return contents

    def write(self, path: Union[str, Path], contents: str) -> None:
        """
        Write a configuration file, creating missing parent directories.

        Args:
            path: File to write
            contents: Text to write

        Raises:
            ConfigurationIOError: If the file cannot be written
        """
        file_path = Path(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(contents, encoding='utf-8')
        except OSError as e:
            raise ConfigurationIOError(f"Failed to write {file_path}: {e}", str(file_path))

        self.logger.info(f"Wrote {len(contents)} characters to {file_path}")
