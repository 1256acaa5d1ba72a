"""Namespaced, fixed-size shares: splitting transactions into compact shares and parsing them back."""

__version__ = "0.1.0"