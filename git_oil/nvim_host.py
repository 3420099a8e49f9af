"""``EditorHost`` backed by a pynvim session and oil.nvim.

oil.nvim is a Lua plugin, so listing queries go through ``exec_lua``.
Annotations are window matches for the name plus extmark virtual text for the
symbol, both cleared together.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .host import ListingEntry

NAMESPACE = "oil_git_status"

_LUA_CURRENT_DIR = "return require('oil').get_current_dir(...)"
_LUA_ENTRY_ON_LINE = """
local entry = require('oil').get_entry_on_line(...)
if entry == nil then
  return vim.NIL
end
return { name = entry.name, type = entry.type }
"""


class NvimHost:
    def __init__(self, nvim: Any) -> None:
        self.nvim = nvim
        self._namespace: int | None = None

    @property
    def namespace(self) -> int:
        if self._namespace is None:
            self._namespace = self.nvim.api.create_namespace(NAMESPACE)
        return self._namespace

    def current_buffer(self) -> int:
        return self.nvim.current.buffer.number

    def current_filetype(self) -> str:
        return self.nvim.current.buffer.options["filetype"]

    def listing_dir(self, bufnr: int) -> str | None:
        return self.nvim.exec_lua(_LUA_CURRENT_DIR, bufnr) or None

    def buffer_lines(self, bufnr: int) -> list[str]:
        return list(self.nvim.api.buf_get_lines(bufnr, 0, -1, False))

    def entry_on_line(self, bufnr: int, lnum: int) -> ListingEntry | None:
        raw = self.nvim.exec_lua(_LUA_ENTRY_ON_LINE, bufnr, lnum)
        if not raw:
            return None
        return ListingEntry(name=str(raw["name"]), type=str(raw["type"]))

    def clear_annotations(self, bufnr: int) -> None:
        self.nvim.funcs.clearmatches()
        self.nvim.api.buf_clear_namespace(bufnr, self.namespace, 0, -1)

    def highlight_range(self, group: str, lnum: int, byte_col: int, byte_len: int) -> None:
        self.nvim.funcs.matchaddpos(group, [[lnum, byte_col, byte_len]])

    def add_eol_text(self, bufnr: int, line_idx: int, text: str, group: str) -> None:
        self.nvim.api.buf_set_extmark(
            bufnr,
            self.namespace,
            line_idx,
            0,
            {
                "virt_text": [[text, group]],
                "virt_text_pos": "eol",
                "hl_mode": "combine",
            },
        )

    def highlight_exists(self, group: str) -> bool:
        return bool(self.nvim.funcs.hlexists(group))

    def define_highlight(self, group: str, fg: str) -> None:
        self.nvim.api.set_hl(0, group, {"fg": fg})

    def schedule(self, callback: Callable[[], None]) -> None:
        self.nvim.async_call(callback)
