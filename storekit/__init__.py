"""Inventory API request builders and a themeable UI builder model."""

__version__ = "4.0.0"