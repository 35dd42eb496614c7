"""Verify quiz questions with rustc, render them to JavaScript, and serve the site."""

__version__ = "0.0.6"

__all__ = ["__version__"]