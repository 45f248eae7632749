"""Barbell plate loader: plates per side for a target weight."""

__version__ = "1.0.0"
