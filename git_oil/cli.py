"""Command-line front door for git-oil.

Prints a directory listing annotated with the same git status highlights and
symbols the editor overlay draws, using the persisted config defaults.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .config import GitOilConfig, load_user_config
from .highlights import ansi_for_color, resolve_highlight
from .status_cache import StatusCache

DIR_COLOR = "\033[1;34m"
RESET = "\033[0m"


def _listing(directory: Path, show_hidden: bool) -> list[tuple[str, bool]]:
    entries: list[tuple[str, bool]] = []
    with os.scandir(directory) as it:
        for child in it:
            if not show_hidden and child.name.startswith("."):
                continue
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            entries.append((child.name, is_dir))
    entries.sort(key=lambda item: (not item[1], item[0].casefold(), item[0]))
    return entries


def render_listing(
    directory: Path,
    config: GitOilConfig,
    *,
    no_color: bool = False,
    show_hidden: bool = False,
    cache: StatusCache | None = None,
) -> str:
    """Render ``directory`` one entry per line with status annotations."""
    directory = directory.resolve()
    if cache is None:
        cache = StatusCache(ttl_ms=config.cache_timeout_ms)
    status = cache.get_status_for_path(directory)

    out: list[str] = []
    for name, is_dir in _listing(directory, show_hidden):
        if is_dir:
            out.append(f"{name}/" if no_color else f"{DIR_COLOR}{name}/{RESET}")
            continue

        group, symbol = resolve_highlight(status.get(directory / name), config.symbols)
        if group is None:
            out.append(name)
        elif no_color:
            out.append(f"{name} {symbol}")
        else:
            color = ansi_for_color(config.highlights.get(group, ""))
            out.append(f"{color}{name}{RESET} {color}{symbol}{RESET}")
    return "".join(f"{line}\n" for line in out)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="List a directory with git status highlights and symbols."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--no-color", action="store_true", help="Print plain names and symbols.")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true", help="Include dotfiles.")
    args = parser.parse_args(argv)

    path = Path(args.path) if args.path is not None else Path.cwd()
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    no_color = args.no_color or not sys.stdout.isatty()
    sys.stdout.write(
        render_listing(path, load_user_config(), no_color=no_color, show_hidden=args.show_hidden)
    )


if __name__ == "__main__":
    main()
