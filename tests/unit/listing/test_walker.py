"""Tests for the recursive walker: ordering, exclusions, filters and paths."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lsrecursive.exclusions import ExclusionSet
from lsrecursive.listing import (
    DirectoryChild,
    TraversalContext,
    join_listing_path,
    list_tree,
    permission_string,
    scan_directory,
    walk,
)


def _build_tree(root: Path) -> None:
    (root / "a").mkdir()
    (root / "a" / "x.txt").write_text("x", encoding="utf-8")
    (root / "a" / "inner").mkdir()
    (root / "a" / "inner" / "deep.txt").write_text("deep", encoding="utf-8")
    (root / "b.txt").write_text("bb", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref\n", encoding="utf-8")


def _relative_paths(entries, root: Path) -> list[str]:
    prefix = str(root) + "/"
    return [entry.path[len(prefix):] for entry in entries]


class WalkOrderTests(unittest.TestCase):
    def test_directory_entries_precede_their_children(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            entries = list_tree(str(root), ExclusionSet())

        self.assertEqual(
            _relative_paths(entries, root),
            ["a", "b.txt", "a/inner", "a/x.txt", "a/inner/deep.txt"],
        )
        self.assertEqual([entry.kind for entry in entries], ["D", "F", "D", "F", "F"])

    def test_fresh_runs_over_unchanged_tree_are_identical(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            first = list_tree(str(root), ExclusionSet())
            second = list_tree(str(root), ExclusionSet())

        self.assertEqual(first, second)

    def test_small_tree_never_prompts(self) -> None:
        prompts: list[str] = []
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            list_tree(str(root), ExclusionSet(), prompt=lambda: prompts.append("asked") or "")

        self.assertEqual(prompts, [])


class WalkExclusionTests(unittest.TestCase):
    def test_excluded_directories_are_not_emitted_or_descended(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)
            (root / "build").mkdir()
            (root / "build" / "out.o").write_text("o", encoding="utf-8")

            entries = list_tree(str(root), ExclusionSet(excluded=(".git", ".idea", "build")))

        paths = _relative_paths(entries, root)
        self.assertNotIn(".git", paths)
        self.assertNotIn(".git/HEAD", paths)
        self.assertNotIn("build", paths)
        self.assertNotIn("build/out.o", paths)
        self.assertIn("a/inner/deep.txt", paths)

    def test_excluded_name_matches_at_any_depth(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            entries = list_tree(str(root), ExclusionSet(excluded=(".git", "inner")))

        self.assertEqual(_relative_paths(entries, root), ["a", "b.txt", "a/x.txt"])


class WalkTypeFilterTests(unittest.TestCase):
    def test_dir_filter_emits_only_directories_at_every_depth(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            entries = list_tree(str(root), ExclusionSet(), type_filter="dir")

        self.assertEqual(_relative_paths(entries, root), ["a", "a/inner"])
        self.assertTrue(all(entry.kind == "D" for entry in entries))

    def test_file_filter_still_descends_into_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)

            entries = list_tree(str(root), ExclusionSet(), type_filter="file")

        self.assertEqual(_relative_paths(entries, root), ["b.txt", "a/x.txt", "a/inner/deep.txt"])


class WalkPathTests(unittest.TestCase):
    def test_dot_root_yields_paths_without_leading_dot_slash(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            _build_tree(root)
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                entries = list_tree(".", ExclusionSet())
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(
            [entry.path for entry in entries],
            ["a", "b.txt", "a/inner", "a/x.txt", "a/inner/deep.txt"],
        )

    def test_join_listing_path(self) -> None:
        self.assertEqual(join_listing_path(".", "foo"), "foo")
        self.assertEqual(join_listing_path("./", "foo"), "foo")
        self.assertEqual(join_listing_path("./src", "a"), "src/a")
        self.assertEqual(join_listing_path("src/", "a"), "src/a")
        self.assertEqual(join_listing_path("/tmp/x", "a"), "/tmp/x/a")
        self.assertEqual(join_listing_path("/", "etc"), "/etc")
        self.assertEqual(join_listing_path(".//", "foo"), "foo")
        self.assertEqual(join_listing_path("src//", "a"), "src/a")
        self.assertEqual(join_listing_path("//", "etc"), "/etc")


class ScanDirectoryTests(unittest.TestCase):
    def test_missing_directory_scans_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            self.assertEqual(scan_directory(str(missing)), [])
            self.assertEqual(list_tree(str(missing), ExclusionSet()), [])

    def test_children_are_sorted_by_name_with_lstat_metadata(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "b.txt").write_text("hello", encoding="utf-8")
            (root / "a").mkdir()
            (root / "B").mkdir()

            children = scan_directory(str(root))

        self.assertEqual([child.name for child in children], ["B", "a", "b.txt"])
        self.assertEqual([child.is_dir for child in children], [True, True, False])
        self.assertEqual(children[2].size, 5)

    def test_symlinked_directory_is_listed_as_file_and_not_followed(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "real" / "inside.txt").write_text("i", encoding="utf-8")
            os.symlink(root / "real", root / "link")

            entries = list_tree(str(root), ExclusionSet())

        paths = _relative_paths(entries, root)
        self.assertEqual(paths, ["link", "real", "real/inside.txt"])
        self.assertEqual(entries[0].kind, "F")

    def test_unreadable_branch_degrades_to_empty(self) -> None:
        listing = {
            "root": [
                DirectoryChild(name="locked", is_dir=True, mode=0o40000, size=0),
                DirectoryChild(name="open", is_dir=True, mode=0o40755, size=0),
            ],
            "root/open": [DirectoryChild(name="f.txt", is_dir=False, mode=0o100644, size=3)],
        }

        entries = walk("root", ExclusionSet(), TraversalContext(), scan=lambda path: listing.get(path, []))

        self.assertEqual([entry.path for entry in entries], ["root/locked", "root/open", "root/open/f.txt"])
        self.assertEqual(entries[0].permissions, "----------")


class EntryFormatTests(unittest.TestCase):
    def test_file_entry_line_has_kind_perms_size_and_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "notes.txt"
            target.write_text("hello", encoding="utf-8")
            target.chmod(0o640)

            entries = list_tree(str(root), ExclusionSet())

        self.assertEqual(entries[0].format(), f"F\t-rw-r-----\t5\t{root}/notes.txt")

    def test_directory_permissions_use_dash_type_column(self) -> None:
        self.assertEqual(permission_string(0o40755), "-rwxr-xr-x")
        self.assertEqual(permission_string(0o104755), "-rwxr-xr-x")


if __name__ == "__main__":
    unittest.main()
