"""Git status overlay for oil.nvim directory listings.

The portable pieces (repository lookup, porcelain parsing, status cache,
highlight resolution, debounce) live in submodules; ``git_oil.nvim_plugin``
wires them into Neovim.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
