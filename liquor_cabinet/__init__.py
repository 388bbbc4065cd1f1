"""Liquor Cabinet: bottle inventory and cocktail suggestions API."""

__version__ = "1.0.0"
