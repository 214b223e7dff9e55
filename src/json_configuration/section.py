"""In-memory configuration section tree."""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple
from .types import ConfigurationSection


_MISSING = object()


class MemorySection(ConfigurationSection):
    """
    A configuration section that keeps its values in memory.

    Values are addressed by paths whose components are joined with the
    root's path separator, so ``section.get("server.port")`` reads the
    ``port`` value of the ``server`` child section. Setting a mapping
    creates a child section; setting None removes the key.
    """

    def __init__(self, parent: Optional['MemorySection'] = None, name: str = "",
                 path_separator: str = "."):
        """
        Initialize the section.

        Args:
            parent: Parent section, or None for a root section
            name: Key of this section inside its parent
            path_separator: Path separator, only used by root sections
        """
        self._map: Dict[str, Any] = {}
        self.parent = parent
        self.name = name
        self._path_separator = path_separator

    @property
    def root(self) -> 'MemorySection':
        """Top-most section of this tree."""
        section = self
        while section.parent is not None:
            section = section.parent
        return section

    @property
    def path_separator(self) -> str:
        if self.parent is None:
            return self._path_separator
        return self.root.path_separator

    @property
    def current_path(self) -> str:
        """Full path of this section from the root, empty for the root."""
        names = []
        section = self
        while section.parent is not None:
            names.append(section.name)
            section = section.parent
        return self.path_separator.join(reversed(names))

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get the value stored at path.

        Args:
            path: Path to the value; the empty path returns this section
            default: Value returned when nothing is stored at path

        Returns:
            Stored value, child section, or default
        """
        if not path:
            return self
        section, key = self._resolve(path, create=False)
        if section is None:
            return default
        return section._map.get(key, default)

    def set(self, path: str, value: Any) -> None:
        """
        Set the value stored at path, creating intermediate sections.

        Args:
            path: Path to the value
            value: Value to store; a mapping becomes a child section and
                None removes the key
        """
        section, key = self._resolve(path, create=True)
        if value is None:
            section._map.pop(key, None)
        elif isinstance(value, Mapping):
            section._create_child(key, value)
        else:
            section._map[key] = value

    def contains(self, path: str) -> bool:
        return self.get(path, _MISSING) is not _MISSING

    def is_section(self, path: str) -> bool:
        return isinstance(self.get(path), MemorySection)

    def get_section(self, path: str) -> Optional['MemorySection']:
        """Get the child section at path, or None if path holds no section."""
        value = self.get(path)
        return value if isinstance(value, MemorySection) else None

    def create_section(self, path: str, values: Optional[Mapping] = None) -> 'MemorySection':
        """
        Create an empty child section at path, replacing any existing value.

        Args:
            path: Path of the new section
            values: Optional initial values for the section

        Returns:
            The new section
        """
        section, key = self._resolve(path, create=True)
        return section._create_child(key, values)

    def get_keys(self, deep: bool) -> List[str]:
        """
        Get the keys of this section.

        Args:
            deep: Include keys of all descendants as full relative paths

        Returns:
            Keys in insertion order
        """
        return list(self.get_values(deep).keys())

    def get_values(self, deep: bool) -> Dict[str, Any]:
        """
        Get a key to value view of this section.

        Args:
            deep: Include values of all descendants under full relative
                paths; child sections are always included as section values

        Returns:
            Mapping of keys to values
        """
        values = {}
        self._collect_values(values, "", deep)
        return values

    def as_dict(self) -> Dict[str, Any]:
        """Convert this section into nested plain dictionaries."""
        return {
            key: value.as_dict() if isinstance(value, MemorySection) else value
            for key, value in self._map.items()
        }

    def _collect_values(self, values: Dict[str, Any], prefix: str, deep: bool) -> None:
        separator = self.path_separator
        for key, value in self._map.items():
            path = f"{prefix}{separator}{key}" if prefix else key
            values[path] = value
            if deep and isinstance(value, MemorySection):
                value._collect_values(values, path, deep)

    def _create_child(self, key: str, values: Optional[Mapping] = None) -> 'MemorySection':
        child = MemorySection(parent=self, name=key)
        self._map[key] = child
        for name, value in (values or {}).items():
            child.set(str(name), value)
        return child

    def _resolve(self, path: str, create: bool) -> Tuple[Optional['MemorySection'], str]:
        """Walk to the section holding the last component of path."""
        keys = path.split(self.path_separator)
        section = self
        for key in keys[:-1]:
            child = section._map.get(key)
            if not isinstance(child, MemorySection):
                if not create:
                    return None, keys[-1]
                child = section._create_child(key)
            section = child
        return section, keys[-1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.current_path!r}, keys={list(self._map)!r})"
