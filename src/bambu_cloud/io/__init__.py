"""I/O utilities for writing exported task tables."""

from . import writers

__all__ = ["writers"]
