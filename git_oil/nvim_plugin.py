"""pynvim remote-plugin surface for git-oil.

Registers the autocommands, ``:GitOilRefresh`` and ``GitOilSetup({opts})``.
Handlers forward straight to a ``GitOil`` context.
"""

from __future__ import annotations

import logging

import pynvim

from .config import ConfigError, load_user_config
from .nvim_host import NvimHost
from .plugin import GIT_USER_EVENTS, OIL_BUFFER_PATTERN, OIL_FILETYPE, GitOil

logger = logging.getLogger(__name__)


@pynvim.plugin
class GitOilPlugin:
    def __init__(self, nvim: pynvim.Nvim) -> None:
        self.nvim = nvim
        self.git_oil = GitOil(NvimHost(nvim), load_user_config())

    @pynvim.function("GitOilSetup", sync=True)
    def setup(self, args: list) -> None:
        options = args[0] if args else None
        try:
            self.git_oil.setup(options)
        except ConfigError as exc:
            logger.warning("rejected setup options: %s", exc)
            self.nvim.err_write(f"git-oil: {exc}\n")

    @pynvim.command("GitOilRefresh", nargs=0)
    def refresh(self, args: list | None = None) -> None:
        self.git_oil.refresh()

    @pynvim.autocmd("FileType", pattern=OIL_FILETYPE)
    def on_filetype(self) -> None:
        self.git_oil.on_filetype()

    @pynvim.autocmd("BufEnter", pattern=OIL_BUFFER_PATTERN)
    def on_buf_enter(self) -> None:
        self.git_oil.on_buf_enter()

    @pynvim.autocmd("BufLeave", pattern=OIL_BUFFER_PATTERN)
    def on_buf_leave(self) -> None:
        self.git_oil.on_buf_leave()

    @pynvim.autocmd("BufWritePost", pattern=OIL_BUFFER_PATTERN)
    def on_buf_write_post(self) -> None:
        self.git_oil.on_buffer_changed()

    @pynvim.autocmd("TextChanged", pattern=OIL_BUFFER_PATTERN)
    def on_text_changed(self) -> None:
        self.git_oil.on_buffer_changed()

    @pynvim.autocmd("TextChangedI", pattern=OIL_BUFFER_PATTERN)
    def on_text_changed_insert(self) -> None:
        self.git_oil.on_buffer_changed()

    @pynvim.autocmd("FocusGained", pattern=OIL_BUFFER_PATTERN)
    def on_focus_gained(self) -> None:
        self.git_oil.on_focus()

    @pynvim.autocmd("WinEnter", pattern=OIL_BUFFER_PATTERN)
    def on_win_enter(self) -> None:
        self.git_oil.on_focus()

    @pynvim.autocmd("BufWinEnter", pattern=OIL_BUFFER_PATTERN)
    def on_buf_win_enter(self) -> None:
        self.git_oil.on_focus()

    @pynvim.autocmd("TermClose", pattern="*")
    def on_term_close(self) -> None:
        self.git_oil.on_term_close()

    @pynvim.autocmd("User", pattern=",".join(GIT_USER_EVENTS))
    def on_git_event(self) -> None:
        self.git_oil.on_git_event()
