"""Small interactive pygame demos whose game logic runs without a window."""

__version__ = "0.1.0"