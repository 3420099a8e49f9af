"""Overlay context object and its event handlers.

``GitOil`` owns the cache, symbols, debouncer and renderer for one editor
session. Handlers mirror the editor events the overlay listens to; the
Neovim adapter only forwards autocommands here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .config import GitOilConfig, config_from_options
from .host import EditorHost
from .render import GitStatusRenderer, define_default_highlights
from .scheduler import Debouncer, TimerFactory, threading_timer
from .status_cache import StatusCache

logger = logging.getLogger(__name__)

OIL_FILETYPE = "oil"
OIL_BUFFER_PATTERN = "oil://*"
GIT_USER_EVENTS = ("FugitiveChanged", "GitSignsUpdate", "LazyGitClosed")


class GitOil:
    def __init__(
        self,
        host: EditorHost,
        config: GitOilConfig | None = None,
        *,
        cache: StatusCache | None = None,
        start_timer: TimerFactory = threading_timer,
    ) -> None:
        self.host = host
        self.config = config or GitOilConfig()
        self.cache = cache if cache is not None else StatusCache(ttl_ms=self.config.cache_timeout_ms)
        self.debouncer = Debouncer(self.config.debounce_delay_ms, start_timer=start_timer)
        self.renderer = GitStatusRenderer(host, self.cache, self.config.symbols)
        self.initialized = False
        self._apply_config()

    def _apply_config(self) -> None:
        self.cache.ttl_ms = self.config.cache_timeout_ms
        self.debouncer.delay_ms = self.config.debounce_delay_ms
        self.renderer.symbols = self.config.symbols

    def setup(self, options: Mapping[str, object] | None = None) -> GitOilConfig:
        """Apply ``setup()`` options over the current config, then initialize."""
        self.config = config_from_options(options, base=self.config)
        self._apply_config()
        self.initialize()
        return self.config

    def initialize(self) -> None:
        if self.initialized:
            return
        define_default_highlights(self.host, self.config.highlights)
        self.initialized = True
        logger.debug("git-oil initialized")

    def render(self) -> None:
        self.renderer.apply()

    def render_debounced(self) -> None:
        self.debouncer.trigger(lambda: self.host.schedule(self.render))

    def _in_oil_buffer(self) -> bool:
        return self.host.current_filetype() == OIL_FILETYPE

    def on_filetype(self) -> None:
        self.initialize()

    def on_buf_enter(self) -> None:
        self.host.schedule(self.render)

    def on_buf_leave(self) -> None:
        self.renderer.clear()

    def on_buffer_changed(self) -> None:
        self.render_debounced()

    def on_focus(self) -> None:
        self.render_debounced()

    def on_term_close(self) -> None:
        # A terminal git client (lazygit) may have changed the index.
        self.cache.invalidate_all()
        self.host.schedule(self._render_if_oil)

    def on_git_event(self) -> None:
        self.cache.invalidate_all()
        if self._in_oil_buffer():
            self.host.schedule(self.render)

    def _render_if_oil(self) -> None:
        if self._in_oil_buffer():
            self.render()

    def refresh(self) -> None:
        """Drop every cached status and redraw now."""
        self.cache.invalidate_all()
        self.render()
