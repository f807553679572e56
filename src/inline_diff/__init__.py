"""Inline (unified) rendering of line-level diffs."""

__version__ = "0.1.0"
