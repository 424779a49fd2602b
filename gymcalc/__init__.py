"""Barbell plate and one-rep-max calculator."""

__version__ = "0.1.0"
