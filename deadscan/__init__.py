"""Heuristic dead class and method detection for Laravel applications."""

__version__ = "0.1.0"
