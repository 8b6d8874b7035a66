"""Flask frontend for the fuzzy line finder."""
from .web import app, main

__all__ = ["app", "main"]
