"""Savanna Tale: a looping lion and monkey vignette rendered with Pillow."""

__version__ = "0.1.0"
