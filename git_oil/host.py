"""Editor-side operations the renderer depends on.

``EditorHost`` is the seam between the portable overlay logic and a concrete
editor. ``git_oil.nvim_host`` implements it over pynvim; tests use fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

ENTRY_TYPE_FILE = "file"
ENTRY_TYPE_DIRECTORY = "directory"


@dataclass(frozen=True)
class ListingEntry:
    """One row of the file browser listing."""

    name: str
    type: str

    @property
    def is_file(self) -> bool:
        return self.type == ENTRY_TYPE_FILE


class EditorHost(Protocol):
    def current_buffer(self) -> int: ...

    def current_filetype(self) -> str: ...

    def listing_dir(self, bufnr: int) -> str | None:
        """Directory shown by the listing buffer, or ``None``."""
        ...

    def buffer_lines(self, bufnr: int) -> list[str]: ...

    def entry_on_line(self, bufnr: int, lnum: int) -> ListingEntry | None:
        """Entry displayed on 1-based line ``lnum``."""
        ...

    def clear_annotations(self, bufnr: int) -> None: ...

    def highlight_range(self, group: str, lnum: int, byte_col: int, byte_len: int) -> None:
        """Highlight bytes on 1-based ``lnum`` starting at 1-based ``byte_col``."""
        ...

    def add_eol_text(self, bufnr: int, line_idx: int, text: str, group: str) -> None:
        """Virtual text after 0-based ``line_idx``."""
        ...

    def highlight_exists(self, group: str) -> bool: ...

    def define_highlight(self, group: str, fg: str) -> None: ...

    def schedule(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the editor's main loop."""
        ...
