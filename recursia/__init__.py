"""Geometry, colours, fonts, the recursive flag, chi-squared testing, text and graph layout, and console helpers."""

__version__ = "0.1.0"