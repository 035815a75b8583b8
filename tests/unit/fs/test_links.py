"""Unit tests for link creation and reading."""

import os
from pathlib import Path

import pytest
from posixfs.fs.ambient import default_base
from posixfs.fs.kinds import EntryKind, file_kind
from posixfs.fs.links import make_hard_link, make_symlink, read_link, resolve_link
from posixfs.paths.models import Pathname


class TestMakeSymlink:
    """Tests for make_symlink()."""

    def test_absolute_target(self, tmp_path: Path) -> None:
        """An absolute target is stored as given."""
        target = tmp_path / "target.txt"
        target.write_text("x")

        created = make_symlink(str(target), str(tmp_path / "link"))

        assert created == Pathname.parse(f"{tmp_path}/link")
        assert os.readlink(tmp_path / "link") == str(target)
        assert file_kind(created) is EntryKind.SYMLINK

    def test_relative_target_from_link_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A relative target is stored relative, resolved from the link's directory."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "data.txt").write_text("data")
        monkeypatch.chdir(tmp_path)

        make_symlink("data.txt", "sub/link")

        assert os.readlink(tmp_path / "sub" / "link") == "data.txt"
        assert (tmp_path / "sub" / "link").read_text() == "data"

    def test_link_to_directory(self, tmp_path: Path) -> None:
        """A directory-form target is accepted."""
        (tmp_path / "real").mkdir()

        make_symlink(f"{tmp_path}/real/", str(tmp_path / "link"))

        assert (tmp_path / "link").is_dir()

    def test_string_target_kept_verbatim(self, tmp_path: Path) -> None:
        """A string target is written without normalization."""
        (tmp_path / "d").mkdir()

        make_symlink("./d/./", str(tmp_path / "link"))

        assert os.readlink(tmp_path / "link") == "./d/./"
        assert (tmp_path / "link").is_dir()

    def test_pathname_target_rendered(self, tmp_path: Path) -> None:
        """A Pathname target is stored in its rendered form."""
        make_symlink(Pathname.parse("d/x.txt"), str(tmp_path / "link"))

        assert os.readlink(tmp_path / "link") == "d/x.txt"

    def test_existing_link_path(self, tmp_path: Path) -> None:
        """Creating over an existing entry fails."""
        (tmp_path / "taken").write_text("x")

        with pytest.raises(FileExistsError):
            make_symlink("anything", str(tmp_path / "taken"))

    def test_restores_ambient_state(self, tmp_path: Path) -> None:
        """Creation leaves the working directory and default base as they were."""
        before = os.getcwd()

        make_symlink("x", str(tmp_path / "link"))

        assert os.getcwd() == before
        assert default_base() is None


class TestMakeHardLink:
    """Tests for make_hard_link()."""

    def test_shares_inode(self, tmp_path: Path) -> None:
        """A hard link is the same file under another name."""
        target = tmp_path / "target.txt"
        target.write_text("x")

        created = make_hard_link(str(target), str(tmp_path / "alias.txt"))

        assert created == Pathname.parse(f"{tmp_path}/alias.txt")
        assert os.stat(target).st_ino == os.stat(tmp_path / "alias.txt").st_ino
        assert file_kind(created) is EntryKind.FILE

    def test_missing_target(self, tmp_path: Path) -> None:
        """Linking to nothing fails."""
        with pytest.raises(FileNotFoundError):
            make_hard_link(str(tmp_path / "missing"), str(tmp_path / "alias"))


class TestReadLink:
    """Tests for read_link() and resolve_link()."""

    def test_read_raw_target(self, tmp_path: Path) -> None:
        """The stored target is returned unresolved."""
        (tmp_path / "link").symlink_to("../elsewhere/file.txt")

        assert read_link(str(tmp_path / "link")) == Pathname.parse("../elsewhere/file.txt")

    def test_resolve_relative_target(self, tmp_path: Path) -> None:
        """A relative target is merged onto the link's directory."""
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "link").symlink_to("file.txt")

        assert resolve_link(str(tmp_path / "sub" / "link")) == Pathname.parse(f"{tmp_path}/sub/file.txt")

    def test_resolve_absolute_target(self, tmp_path: Path) -> None:
        """An absolute target is returned as it is."""
        (tmp_path / "link").symlink_to("/etc/hosts")

        assert resolve_link(str(tmp_path / "link")) == Pathname.parse("/etc/hosts")

    def test_directory_form_link_path(self, tmp_path: Path) -> None:
        """A directory-form path names the link itself."""
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")

        assert read_link(f"{tmp_path}/link/") == Pathname.parse(str(tmp_path / "real"))

    def test_not_a_link(self, tmp_path: Path) -> None:
        """Reading a regular file fails."""
        (tmp_path / "f").write_text("x")

        with pytest.raises(OSError):
            read_link(str(tmp_path / "f"))
