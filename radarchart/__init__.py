"""Radar chart validation and geometry engine."""

__version__ = "0.1.0"
