"""A tiny 2D engine: pixel canvas, physics, particles, input mapping, immediate-mode UI and pygame demos."""

__version__ = "0.1.0"