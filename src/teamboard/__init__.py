"""Teamboard: discussion posts for team collaboration."""

__version__ = "0.1.0"
