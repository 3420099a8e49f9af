"""Repository discovery for listing directories.

Walks upward from a directory looking for a ``.git`` entry. The search is a
plain filesystem read so it never spawns git.
"""

from __future__ import annotations

from pathlib import Path

GIT_MARKER = ".git"


def find_git_root(start: Path | str) -> Path | None:
    """Return the repository root enclosing ``start``, or ``None``.

    ``.git`` may be a directory or a file (worktrees, submodules). The root is
    the directory holding that entry, never the entry itself.
    """
    current = Path(start).expanduser().resolve()
    if current.exists() and not current.is_dir():
        current = current.parent

    while True:
        if (current / GIT_MARKER).exists():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent
