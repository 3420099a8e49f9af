"""Neovim remote-plugin entry; run ``:UpdateRemotePlugins`` after install."""

from git_oil.nvim_plugin import GitOilPlugin

__all__ = ["GitOilPlugin"]
