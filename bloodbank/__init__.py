"""Donor records, donation appointments and an interactive terminal menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]