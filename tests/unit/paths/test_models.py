"""Unit tests for the Pathname value type.

Tests parsing, name/type splitting, rendering and validation.
"""

import dataclasses
from pathlib import PurePosixPath

import pytest
from posixfs.paths.models import Pathname, split_name


class TestSplitName:
    """Tests for split_name()."""

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("foo.txt", ("foo", "txt")),
            ("archive.tar.gz", ("archive.tar", "gz")),
            ("Makefile", ("Makefile", None)),
            (".bashrc", (".bashrc", None)),
            ("..", ("..", None)),
            ("...", ("...", None)),
            (".config.toml", (".config", "toml")),
            ("foo.", ("foo", "")),
        ],
    )
    def test_split(self, segment: str, expected: tuple[str, str | None]) -> None:
        """Segments split on the last dot outside the leading dot run."""
        assert split_name(segment) == expected


class TestPathnameParse:
    """Tests for Pathname.parse()."""

    def test_absolute_file(self) -> None:
        """Absolute path with extension parses into all parts."""
        path = Pathname.parse("/usr/lib/foo.tar.gz")

        assert path.absolute is True
        assert path.directory == ("usr", "lib")
        assert path.name == "foo.tar"
        assert path.type == "gz"

    def test_relative_file_without_type(self) -> None:
        """A name without dots has no type."""
        path = Pathname.parse("src/README")

        assert path.absolute is False
        assert path.directory == ("src",)
        assert path.name == "README"
        assert path.type is None

    def test_trailing_separator_is_directory_form(self) -> None:
        """A trailing separator gives directory form."""
        path = Pathname.parse("/var/log/")

        assert path.directory == ("var", "log")
        assert path.name is None
        assert path.type is None

    def test_dot_components_dropped(self) -> None:
        """Empty and '.' segments are dropped."""
        assert Pathname.parse("a/./b//c.txt") == Pathname.parse("a/b/c.txt")

    def test_trailing_dot_is_directory_form(self) -> None:
        """A final '.' means the directory itself."""
        assert Pathname.parse("a/b/.") == Pathname.parse("a/b/")

    def test_dotdot_kept_literally(self) -> None:
        """'..' is a literal component and a final '..' is directory form."""
        path = Pathname.parse("a/../b/..")

        assert path.directory == ("a", "..", "b", "..")
        assert path.name is None

    def test_root(self) -> None:
        """'/' is the absolute empty directory path."""
        path = Pathname.parse("/")

        assert path.absolute is True
        assert path.directory == ()
        assert path.name is None
        assert str(path) == "/"

    def test_empty_string(self) -> None:
        """The empty string is the relative empty path."""
        path = Pathname.parse("")

        assert path == Pathname()
        assert str(path) == ""

    def test_unspecific_extension(self) -> None:
        """A trailing dot is kept as an empty extension."""
        path = Pathname.parse("notes.")

        assert path.name == "notes"
        assert path.type == ""
        assert str(path) == "notes."

    def test_accepts_path_like(self) -> None:
        """os.PathLike objects are accepted."""
        assert Pathname.parse(PurePosixPath("/etc/hosts")) == Pathname.parse("/etc/hosts")

    def test_wild_chars_are_literal_by_default(self) -> None:
        """Plain strings are native names, even with '*' in them."""
        path = Pathname.parse("dir/a*b?")

        assert path.is_wild is False
        assert path.file_namestring == "a*b?"

    def test_pattern_parse_is_wild(self) -> None:
        """Parsing as a pattern marks wildcard paths."""
        assert Pathname.parse("src/*.py", pattern=True).is_wild is True
        assert Pathname.parse("*/main.py", pattern=True).is_wild is True

    def test_pattern_without_wild_chars_is_concrete(self) -> None:
        """The pattern flag is dropped when no component holds a wildcard."""
        path = Pathname.parse("src/main.py", pattern=True)

        assert path.is_wild is False
        assert path == Pathname.parse("src/main.py")


class TestPathnameValue:
    """Tests for Pathname construction, rendering and equality."""

    def test_str_round_trip(self) -> None:
        """Rendering a parsed path gives back the normalized text."""
        for text in ["/usr/lib/foo.tar.gz", "a/b/", "/", ".bashrc", "x/../y", "notes."]:
            assert str(Pathname.parse(text)) == text

    def test_fspath_of_empty_path(self) -> None:
        """The empty relative path is '.' to the OS."""
        assert Pathname().__fspath__() == "."

    def test_namestrings(self) -> None:
        """Directory and file namestrings split the rendering."""
        path = Pathname.parse("/a/b/c.txt")

        assert path.directory_namestring == "/a/b/"
        assert path.file_namestring == "c.txt"

    def test_canonical_split(self) -> None:
        """Equal final segments give equal values however they were built."""
        assert Pathname(name="a.b") == Pathname(name="a", type="b")
        assert Pathname(name="a", type="b.c") == Pathname.parse("a.b.c")

    def test_empty_name_is_directory_form(self) -> None:
        """An empty name is normalized to directory form."""
        path = Pathname(directory=("a",), name="")

        assert path.name is None
        assert path.type is None

    def test_directory_list_coerced_to_tuple(self) -> None:
        """A list of components is stored as a tuple."""
        path = Pathname(directory=["a", "b"])  # type: ignore[arg-type]

        assert path.directory == ("a", "b")
        assert hash(path) == hash(Pathname(directory=("a", "b")))

    def test_frozen(self) -> None:
        """Pathname values are immutable."""
        path = Pathname.parse("a/b")

        with pytest.raises(dataclasses.FrozenInstanceError):
            path.name = "c"  # type: ignore[misc]

    @pytest.mark.parametrize("component", ["", ".", "a/b"])
    def test_invalid_directory_component(self, component: str) -> None:
        """Empty, '.' and separator-holding components are rejected."""
        with pytest.raises(ValueError, match="Invalid directory component"):
            Pathname(directory=(component,))

    @pytest.mark.parametrize("name", ["..", "a/b"])
    def test_invalid_final_component(self, name: str) -> None:
        """'..' and separator-holding names cannot be a final component."""
        with pytest.raises(ValueError, match="Invalid final component"):
            Pathname(name=name)

    def test_type_without_name(self) -> None:
        """An extension needs a name."""
        with pytest.raises(ValueError, match="without a name"):
            Pathname(type="txt")
