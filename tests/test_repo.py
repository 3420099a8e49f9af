from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_oil.repo import find_git_root


class FindGitRootTests(unittest.TestCase):
    def test_returns_parent_of_git_directory_from_nested_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".git").mkdir()
            nested = root / "src" / "pkg"
            nested.mkdir(parents=True)

            self.assertEqual(find_git_root(nested), root)
            self.assertEqual(find_git_root(root), root)

    def test_accepts_git_file_for_worktrees(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve() / "worktree"
            root.mkdir()
            (root / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n", encoding="utf-8")

            self.assertEqual(find_git_root(str(root / ".")), root)

    def test_nearest_repository_wins_for_nested_repos(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            outer = Path(tmp).resolve()
            (outer / ".git").mkdir()
            inner = outer / "vendor" / "lib"
            (inner / ".git").mkdir(parents=True)

            self.assertEqual(find_git_root(inner / "."), inner)

    def test_file_start_searches_from_its_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".git").mkdir()
            target = root / "README.md"
            target.write_text("x\n", encoding="utf-8")

            self.assertEqual(find_git_root(target), root)

    def test_returns_none_when_no_ancestor_has_git_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            start = Path(tmp).resolve() / "plain"
            start.mkdir()
            # Pretend nothing above the temp dir is a repository either.
            real_exists = Path.exists

            def exists_below_tmp(path: Path) -> bool:
                if path.name == ".git" and not str(path).startswith(str(Path(tmp).resolve())):
                    return False
                return real_exists(path)

            with mock.patch.object(Path, "exists", exists_below_tmp):
                self.assertIsNone(find_git_root(start))


if __name__ == "__main__":
    unittest.main()
