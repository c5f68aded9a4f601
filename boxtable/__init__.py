"""Render text tables with box-drawing borders, column spans, wrapping and ANSI styling."""

__version__ = "0.1.0"