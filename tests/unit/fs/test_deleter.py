"""Unit tests for recursive deletion.

Tests tree removal, missing roots, symbolic link handling, partial
failure and deletion plans.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from posixfs.errors import NotADirectoryError, RootNotFoundError
from posixfs.fs.deleter import delete_directory_and_files, delete_tree, plan_deletion
from posixfs.fs.walker import MissingRoot
from posixfs.paths.models import Pathname


class TestDeleteTree:
    """Tests for delete_tree()."""

    def test_deletes_scenario_tree(self, sample_tree: Path) -> None:
        """The root and everything below it are removed."""
        removed = delete_tree(sample_tree)

        assert removed == 4
        assert not sample_tree.exists()
        assert sample_tree.parent.exists()

    def test_second_delete_ignored(self, sample_tree: Path) -> None:
        """Deleting a missing root with IGNORE is a no-op."""
        delete_tree(sample_tree)

        assert delete_tree(sample_tree, on_missing_root=MissingRoot.IGNORE) == 0

    def test_second_delete_fails(self, sample_tree: Path) -> None:
        """Deleting a missing root with FAIL raises."""
        delete_tree(sample_tree)

        with pytest.raises(RootNotFoundError):
            delete_tree(sample_tree)

    def test_directory_form_root(self, sample_tree: Path) -> None:
        """A directory-form root is accepted."""
        delete_tree(f"{sample_tree}/")

        assert not sample_tree.exists()

    def test_root_through_parent_component(self, sample_tree: Path) -> None:
        """A root reached through `..` is deleted completely."""
        removed = delete_tree(f"{sample_tree}/sub/..")

        assert removed == 4
        assert not sample_tree.exists()

    def test_relative_root(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A relative root resolves against the working directory."""
        monkeypatch.chdir(sample_tree.parent)

        delete_tree("t")

        assert not sample_tree.exists()

    def test_file_root(self, sample_tree: Path) -> None:
        """A file is not a tree."""
        with pytest.raises(NotADirectoryError):
            delete_tree(sample_tree / "a.txt")

        assert (sample_tree / "a.txt").exists()

    def test_hidden_and_empty_entries(self, tmp_path: Path) -> None:
        """Dot-files and empty directories are removed too."""
        root = tmp_path / "r"
        (root / "empty").mkdir(parents=True)
        (root / ".dot").write_text("x")

        assert delete_tree(root) == 3
        assert not root.exists()

    def test_legacy_alias(self, sample_tree: Path) -> None:
        """delete_directory_and_files is the same operation."""
        assert delete_directory_and_files(sample_tree) == 4
        assert not sample_tree.exists()


class TestDeleteSymlinks:
    """Tests for symbolic links during deletion."""

    def test_links_inside_are_not_followed(self, tmp_path: Path) -> None:
        """A link to a directory outside the tree is unlinked, the target kept."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        root = tmp_path / "root"
        root.mkdir()
        (root / "link").symlink_to(outside)

        delete_tree(root)

        assert not root.exists()
        assert (outside / "keep.txt").read_text() == "keep"

    def test_symlink_root_unlinked(self, tmp_path: Path) -> None:
        """A root that is a link is removed without touching the target."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "f").write_text("x")
        link = tmp_path / "link"
        link.symlink_to(real)

        assert delete_tree(link) == 1
        assert not os.path.lexists(link)
        assert (real / "f").exists()

    def test_directory_form_symlink_root(self, tmp_path: Path) -> None:
        """A trailing separator does not make the deleter follow a root link."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "f").write_text("x")
        link = tmp_path / "link"
        link.symlink_to(real)

        delete_tree(f"{link}/")

        assert not os.path.lexists(link)
        assert (real / "f").exists()

    def test_dangling_link_inside(self, tmp_path: Path) -> None:
        """Dangling links are removed like files."""
        root = tmp_path / "root"
        root.mkdir()
        (root / "dangling").symlink_to(tmp_path / "missing")

        assert delete_tree(root) == 2


class TestDeleteFailure:
    """Tests for failures part-way through a deletion."""

    def test_unlink_failure_propagates(self, sample_tree: Path) -> None:
        """An OS error stops the deletion and is raised."""
        with (
            patch("posixfs.fs.deleter.os.unlink", side_effect=PermissionError("denied")),
            pytest.raises(PermissionError),
        ):
            delete_tree(sample_tree)

        assert sample_tree.exists()


class TestPlanDeletion:
    """Tests for plan_deletion()."""

    def test_plan_in_removal_order(self, sample_tree: Path) -> None:
        """Children come before their directory and the root is last."""
        plan = plan_deletion(sample_tree)
        names = [str(p) for p in plan]

        assert len(plan) == 4
        assert names[-1] == f"{sample_tree}/"
        assert names.index(f"{sample_tree}/sub/b.txt") < names.index(f"{sample_tree}/sub/")
        assert all(p.absolute for p in plan)

    def test_plan_through_parent_component(self, sample_tree: Path) -> None:
        """A `..` root plans canonical paths."""
        plan = [str(p) for p in plan_deletion(f"{sample_tree}/sub/..")]

        assert plan[-1] == f"{sample_tree}/"
        assert all("../" not in p for p in plan)
        assert plan.index(f"{sample_tree}/sub/b.txt") < plan.index(f"{sample_tree}/sub/")

    def test_plan_changes_nothing(self, sample_tree: Path) -> None:
        """Planning does not remove anything."""
        plan_deletion(sample_tree)

        assert (sample_tree / "sub" / "b.txt").exists()

    def test_plan_matches_deletion_count(self, deep_tree: Path) -> None:
        """The plan has one entry per removed entry."""
        planned = len(plan_deletion(deep_tree))

        assert delete_tree(deep_tree) == planned

    def test_plan_missing_root(self, tmp_path: Path) -> None:
        """Missing roots follow the same policy as deletion."""
        assert plan_deletion(tmp_path / "missing", on_missing_root=MissingRoot.IGNORE) == []
        with pytest.raises(RootNotFoundError):
            plan_deletion(tmp_path / "missing")

    def test_plan_symlink_root(self, tmp_path: Path) -> None:
        """A link root plans just the link."""
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")

        assert plan_deletion(tmp_path / "link") == [Pathname.parse(f"{tmp_path}/link")]
