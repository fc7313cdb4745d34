"""Artificial-life simulation of grazing bugs, hunting bugs, food and a diffusing scent field."""

__version__ = "0.1.0"
__all__ = ["angrybug", "bug", "food", "game", "smellmap"]