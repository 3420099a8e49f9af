"""Git status collection for listing overlays.

Runs ``git status --porcelain`` for one repository root and maps each changed
or untracked path to its two-character status code.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

RENAME_SEPARATOR = " -> "

StatusMap = dict[Path, str]


def parse_porcelain_status(output: str, root: Path) -> StatusMap:
    """Parse porcelain v1 lines into absolute path -> status code."""
    status: StatusMap = {}
    for line in output.splitlines():
        if len(line) < 3:
            continue

        code = line[:2]
        path_text = line[3:]

        # Renames list "old -> new"; the listing only shows the new name.
        if code[0] == "R":
            _old, sep, new = path_text.partition(RENAME_SEPARATOR)
            if sep:
                path_text = new

        if path_text.startswith("./"):
            path_text = path_text[2:]

        status[root / path_text] = code
    return status


def run_git_status(
    root: Path,
    timeout_seconds: float | None = None,
) -> subprocess.CompletedProcess[str] | None:
    """Run porcelain status in ``root``; ``None`` when git cannot be spawned.

    Ignored files are not requested: walking ignore rules over large trees is
    the slow part of ``git status``.
    """
    try:
        return subprocess.run(
            ["git", "-C", str(root), "status", "--porcelain"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git status could not run in %s: %s", root, exc)
        return None


def try_fetch_git_status(root: Path, timeout_seconds: float | None = None) -> StatusMap | None:
    """Return the status map for ``root``, or ``None`` if git failed."""
    proc = run_git_status(root, timeout_seconds)
    if proc is None:
        return None
    if proc.returncode != 0:
        logger.debug("git status exited with %d in %s", proc.returncode, root)
        return None
    return parse_porcelain_status(proc.stdout, root)


def fetch_git_status(root: Path, timeout_seconds: float | None = None) -> StatusMap:
    """Return the status map for ``root``; git failures read as no changes."""
    status = try_fetch_git_status(root, timeout_seconds)
    return status if status is not None else {}
