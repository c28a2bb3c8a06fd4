"""Ride sharing fare demonstration."""

__version__ = "0.1.0"
