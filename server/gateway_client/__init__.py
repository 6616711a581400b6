"""Typed decoding of payment gateway responses."""

__version__ = "0.1.0"
