"""Streaming XML event writer with optional indentation; see xmlemit.writer."""

__version__ = "0.1.0"
__all__ = ["writer"]