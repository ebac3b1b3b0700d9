"""Relative-path header insertion for files changed in a pull request."""

__version__ = "0.3.0"
