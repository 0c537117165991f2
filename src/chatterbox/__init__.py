# src/chatterbox/__init__.py

"""Chatterbox: a line-oriented task manager backed by a flat text file."""

__version__ = "0.3.0"
