"""Detect exposed AI provider API keys in text, cache results and draw them in a curses dashboard."""

__version__ = "0.1.0"