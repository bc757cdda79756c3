"""Flask front-end for the anagram engine."""
from .web import app, main

__all__ = ["app", "main"]
