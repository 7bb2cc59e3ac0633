"""Tick-based simulation core for a top-down 2D battle game: units, bullets, obstacles and particles."""

__version__ = "0.1.0"