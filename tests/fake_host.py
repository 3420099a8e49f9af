"""In-memory ``EditorHost`` and manual timers for overlay tests."""

from __future__ import annotations

from collections.abc import Callable

from git_oil.host import ListingEntry


class FakeHost:
    def __init__(
        self,
        listing_dir: str | None = None,
        lines: list[str] | None = None,
        entries: dict[int, ListingEntry] | None = None,
        filetype: str = "oil",
        existing_highlights: set[str] | None = None,
    ) -> None:
        self.bufnr = 7
        self.dir = listing_dir
        self.lines = list(lines or [])
        self.entries = dict(entries or {})
        self.filetype = filetype
        self.existing_highlights = set(existing_highlights or ())
        self.defined: dict[str, str] = {}
        self.clears: list[int] = []
        self.highlights: list[tuple[str, int, int, int]] = []
        self.eol_texts: list[tuple[int, int, str, str]] = []
        self.scheduled: list[Callable[[], None]] = []
        self.run_scheduled_immediately = True

    def current_buffer(self) -> int:
        return self.bufnr

    def current_filetype(self) -> str:
        return self.filetype

    def listing_dir(self, bufnr: int) -> str | None:
        return self.dir

    def buffer_lines(self, bufnr: int) -> list[str]:
        return list(self.lines)

    def entry_on_line(self, bufnr: int, lnum: int) -> ListingEntry | None:
        return self.entries.get(lnum)

    def clear_annotations(self, bufnr: int) -> None:
        self.clears.append(bufnr)
        self.highlights.clear()
        self.eol_texts.clear()

    def highlight_range(self, group: str, lnum: int, byte_col: int, byte_len: int) -> None:
        self.highlights.append((group, lnum, byte_col, byte_len))

    def add_eol_text(self, bufnr: int, line_idx: int, text: str, group: str) -> None:
        self.eol_texts.append((bufnr, line_idx, text, group))

    def highlight_exists(self, group: str) -> bool:
        return group in self.existing_highlights or group in self.defined

    def define_highlight(self, group: str, fg: str) -> None:
        self.defined[group] = fg

    def schedule(self, callback: Callable[[], None]) -> None:
        if self.run_scheduled_immediately:
            callback()
        else:
            self.scheduled.append(callback)


class _ManualTimer:
    def __init__(self, fire_at: float, callback: Callable[[], None]) -> None:
        self.fire_at = fire_at
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimers:
    """Timer factory driven by ``advance`` instead of wall time (seconds)."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[_ManualTimer] = []

    def __call__(self, delay_seconds: float, callback: Callable[[], None]) -> _ManualTimer:
        timer = _ManualTimer(self.now + delay_seconds, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self) -> list[_ManualTimer]:
        return [timer for timer in self.timers if not timer.cancelled]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for timer in list(self.timers):
            if not timer.cancelled and timer.fire_at <= self.now + 1e-9:
                timer.cancelled = True
                timer.callback()
