"""Spliminal - a split-pane shell front-end for the terminal."""

__version__ = "0.1.0"
