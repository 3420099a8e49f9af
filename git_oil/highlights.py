"""Status-code to highlight group and symbol mapping.

Index (staged) state wins over working-tree state: ``"AM"`` shows as added.
Group names match the highlight groups defined in the editor.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import re

OIL_GIT_ADDED = "OilGitAdded"
OIL_GIT_MODIFIED = "OilGitModified"
OIL_GIT_RENAMED = "OilGitRenamed"
OIL_GIT_DELETED = "OilGitDeleted"
OIL_GIT_UNTRACKED = "OilGitUntracked"

HIGHLIGHT_GROUPS = (
    OIL_GIT_ADDED,
    OIL_GIT_MODIFIED,
    OIL_GIT_RENAMED,
    OIL_GIT_DELETED,
    OIL_GIT_UNTRACKED,
)

DEFAULT_HIGHLIGHTS: dict[str, str] = {
    OIL_GIT_ADDED: "#a6e3a1",
    OIL_GIT_MODIFIED: "#f9e2af",
    OIL_GIT_RENAMED: "#cba6f7",
    OIL_GIT_DELETED: "#f38ba8",
    OIL_GIT_UNTRACKED: "#89b4fa",
}

_HEX_COLOR_RE = re.compile(r"#([0-9a-fA-F]{6})")


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs appended after annotated entries."""

    added: str = "+"
    modified: str = "~"
    renamed: str = "→"
    deleted: str = "✗"
    untracked: str = "?"

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        return tuple(field.name for field in fields(cls))

    def with_overrides(self, overrides: dict[str, str]) -> SymbolSet:
        return replace(self, **overrides)


DEFAULT_SYMBOLS = SymbolSet()


def resolve_highlight(
    status_code: str | None,
    symbols: SymbolSet = DEFAULT_SYMBOLS,
) -> tuple[str, str] | tuple[None, None]:
    """Return ``(group, symbol)`` for a porcelain code, first rule wins."""
    if not status_code:
        return None, None

    first_char = status_code[:1]
    second_char = status_code[1:2]

    if first_char == "A":
        return OIL_GIT_ADDED, symbols.added
    if first_char == "M":
        return OIL_GIT_MODIFIED, symbols.modified
    if first_char == "R":
        return OIL_GIT_RENAMED, symbols.renamed
    if first_char == "D":
        return OIL_GIT_DELETED, symbols.deleted

    if second_char == "M":
        return OIL_GIT_MODIFIED, symbols.modified
    if second_char == "D":
        return OIL_GIT_DELETED, symbols.deleted

    if status_code == "??":
        return OIL_GIT_UNTRACKED, symbols.untracked

    return None, None


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and _HEX_COLOR_RE.fullmatch(value) is not None


def ansi_for_color(color: str) -> str:
    """Truecolor foreground SGR for ``#rrggbb``; empty for anything else."""
    match = _HEX_COLOR_RE.fullmatch(color)
    if match is None:
        return ""
    value = match.group(1)
    red, green, blue = (int(value[idx : idx + 2], 16) for idx in (0, 2, 4))
    return f"\033[38;2;{red};{green};{blue}m"
