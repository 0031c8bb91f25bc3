"""Pylint plugin enforcing the structure of marker-tagged value classes."""

__version__ = "0.1.0"
