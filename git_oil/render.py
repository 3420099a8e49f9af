"""Draw git status annotations onto a listing buffer.

Every pass clears previous annotations first: line numbers and entries change
between listings, so nothing is diffed incrementally.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .highlights import DEFAULT_SYMBOLS, SymbolSet, resolve_highlight
from .host import EditorHost
from .repo import find_git_root
from .status_cache import StatusCache

logger = logging.getLogger(__name__)


def byte_span(line: str, name: str) -> tuple[int, int] | None:
    """1-based byte column and byte length of ``name``'s first occurrence."""
    idx = line.find(name)
    if idx < 0:
        return None
    col = len(line[:idx].encode("utf-8")) + 1
    return col, len(name.encode("utf-8"))


def define_default_highlights(host: EditorHost, colors: dict[str, str]) -> None:
    """Define groups the colorscheme has not already set."""
    for group, color in colors.items():
        if not host.highlight_exists(group):
            host.define_highlight(group, color)


class GitStatusRenderer:
    def __init__(
        self,
        host: EditorHost,
        cache: StatusCache,
        symbols: SymbolSet = DEFAULT_SYMBOLS,
    ) -> None:
        self.host = host
        self.cache = cache
        self.symbols = symbols

    def clear(self, bufnr: int | None = None) -> None:
        self.host.clear_annotations(self.host.current_buffer() if bufnr is None else bufnr)

    def apply(self, bufnr: int | None = None) -> int:
        """Annotate the listing; return the number of entries marked."""
        if bufnr is None:
            bufnr = self.host.current_buffer()

        current_dir = self.host.listing_dir(bufnr)
        if not current_dir:
            self.clear(bufnr)
            return 0

        listing_dir = Path(current_dir).expanduser().resolve()
        root = find_git_root(listing_dir)
        if root is None:
            self.clear(bufnr)
            return 0

        status = self.cache.get_status(root)
        if not status:
            self.clear(bufnr)
            return 0

        lines = self.host.buffer_lines(bufnr)
        self.clear(bufnr)

        marked = 0
        for lnum, line in enumerate(lines, start=1):
            entry = self.host.entry_on_line(bufnr, lnum)
            if entry is None or not entry.is_file:
                continue

            group, symbol = resolve_highlight(status.get(listing_dir / entry.name), self.symbols)
            if group is None or symbol is None:
                continue

            span = byte_span(line, entry.name)
            if span is None:
                continue
            byte_col, byte_len = span
            self.host.highlight_range(group, lnum, byte_col, byte_len)
            self.host.add_eol_text(bufnr, lnum - 1, f" {symbol}", group)
            marked += 1

        logger.debug("annotated %d entries in %s", marked, listing_dir)
        return marked
