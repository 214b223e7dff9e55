"""Tests for the in-memory configuration section."""

from json_configuration.section import MemorySection


class TestMemorySection:
    """Tests for MemorySection class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.section = MemorySection()

    def test_set_and_get(self):
        """Test storing and reading a top-level value."""
        self.section.set("port", 8080)

        assert self.section.get("port") == 8080
        assert self.section.contains("port")

    def test_get_default(self):
        """Test that missing paths return the default."""
        assert self.section.get("missing") is None
        assert self.section.get("missing.deeper", 5) == 5
        assert not self.section.contains("missing")

    def test_empty_path_returns_self(self):
        """Test that the empty path addresses the section itself."""
        assert self.section.get("") is self.section

    def test_set_creates_intermediate_sections(self):
        """Test that dotted paths create child sections on demand."""
        self.section.set("server.tls.enabled", True)

        assert self.section.is_section("server")
        assert self.section.is_section("server.tls")
        assert self.section.get("server.tls.enabled") is True

    def test_set_mapping_creates_section(self):
        """Test that setting a mapping creates a child section."""
        self.section.set("db", {"host": "localhost", "pool": {"size": 5}})

        assert self.section.is_section("db")
        assert self.section.is_section("db.pool")
        assert self.section.get("db.pool.size") == 5

    def test_set_list_of_mappings_stays_list(self):
        """Test that lists are stored as a single value."""
        self.section.set("routes", [{"path": "/"}])

        assert not self.section.is_section("routes")
        assert self.section.get("routes") == [{"path": "/"}]

    def test_set_none_removes_key(self):
        """Test that setting None removes the key."""
        self.section.set("a", 1)
        self.section.set("a", None)

        assert not self.section.contains("a")
        assert self.section.get_keys(False) == []

    def test_create_section_replaces_value(self):
        """Test that create_section replaces a leaf value."""
        self.section.set("a", 1)

        child = self.section.create_section("a")

        assert self.section.get("a") is child
        assert child.get_keys(False) == []

    def test_create_section_with_values(self):
        """Test creating a section with initial values."""
        child = self.section.create_section("limits", {"cpu": 2, "memory": {"soft": 512}})

        assert child.get("cpu") == 2
        assert child.get("memory.soft") == 512

    def test_section_identity(self):
        """Test name, parent, root and path of nested sections."""
        child = self.section.create_section("a.b")

        assert child.name == "b"
        assert child.parent is self.section.get_section("a")
        assert child.root is self.section
        assert child.current_path == "a.b"
        assert self.section.current_path == ""

    def test_get_section_of_leaf(self):
        """Test that get_section returns None for leaf values."""
        self.section.set("a", 1)

        assert self.section.get_section("a") is None

    def test_get_values_shallow(self):
        """Test the shallow view returns child sections as values."""
        self.section.set("a.b", 1)
        self.section.set("c", 2)

        values = self.section.get_values(False)

        assert list(values) == ["a", "c"]
        assert isinstance(values["a"], MemorySection)
        assert values["c"] == 2

    def test_get_values_deep(self):
        """Test the deep view includes descendants under full paths."""
        self.section.set("a.b", 1)
        self.section.set("a.c.d", 2)

        values = self.section.get_values(True)

        assert list(values) == ["a", "a.b", "a.c", "a.c.d"]
        assert values["a.c.d"] == 2

    def test_nested_section_views_are_relative(self):
        """Test that keys of a nested section are relative to it."""
        self.section.set("a.b.c", 1)

        assert self.section.get_section("a").get_keys(True) == ["b", "b.c"]

    def test_custom_path_separator(self):
        """Test that the root separator is used for paths."""
        section = MemorySection(path_separator="/")
        section.set("a/b", 1)
        section.set("x.y", 2)

        assert section.get("a/b") == 1
        assert section.get("x.y") == 2
        assert section.get_section("a").path_separator == "/"
        assert section.get_keys(True) == ["a", "a/b", "x.y"]

    def test_as_dict(self):
        """Test conversion into nested plain dictionaries."""
        self.section.set("a.b", [1, 2])
        self.section.set("c", "x")

        assert self.section.as_dict() == {"a": {"b": [1, 2]}, "c": "x"}
