"""A hand-built game loop with a gradient renderer, square-wave audio and simple physics."""

__version__ = "0.1.0"