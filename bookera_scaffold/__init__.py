"""Scaffold new Bookera modules by cloning a template repository and filling in its placeholders."""

__version__ = "0.1.0"

__all__ = ["__version__"]