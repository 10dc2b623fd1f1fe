"""Runnable examples of six object-oriented design patterns."""

__version__ = "1.0.0"
