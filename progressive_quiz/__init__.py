"""Adaptive, progressive interview question selection."""

__version__ = "0.1.0"
