"""Neovim UI redraw event parsing and an editor grid model that emits draw commands."""

__version__ = "0.1.0"