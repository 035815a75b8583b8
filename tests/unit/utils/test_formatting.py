"""Unit tests for console formatting helpers."""

from posixfs.fs.kinds import EntryKind
from posixfs.paths.models import Pathname
from posixfs.utils.formatting import create_entry_table, format_kind, format_path


class TestFormatPath:
    """Tests for format_path function."""

    def test_plain(self) -> None:
        """Without a kind the path is returned as text."""
        assert format_path(Pathname.parse("a/b.txt")) == "a/b.txt"

    def test_styled_by_kind(self) -> None:
        """A kind wraps the path in its style."""
        assert format_path("sub/", EntryKind.DIRECTORY) == "[kind.directory]sub/[/]"

    def test_markup_escaped(self) -> None:
        """Brackets in names are not read as markup."""
        assert format_path("[red]x") == "\\[red]x"

    def test_empty_path(self) -> None:
        """The empty relative path is shown as '.'."""
        assert format_path(Pathname()) == "."


class TestFormatKind:
    """Tests for format_kind function."""

    def test_style_per_kind(self) -> None:
        """Each kind is rendered in its own style."""
        for kind in EntryKind:
            assert format_kind(kind) == f"[kind.{kind.value}]{kind.value}[/]"


class TestCreateEntryTable:
    """Tests for create_entry_table function."""

    def test_with_kind(self) -> None:
        """The default table has Kind and Path columns."""
        table = create_entry_table("Entries")

        assert [c.header for c in table.columns] == ["Kind", "Path"]
        assert table.title == "Entries"

    def test_without_kind(self) -> None:
        """with_kind=False leaves only the Path column."""
        table = create_entry_table("Plan", with_kind=False)

        assert [c.header for c in table.columns] == ["Path"]
