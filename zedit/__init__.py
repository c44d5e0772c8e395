"""Rope text storage, undo history, file loading and regex syntax highlighting for editors."""

__version__ = "0.1.0"