"""Libris: an interactive narrative set in a library of lost memories."""

__version__ = "0.1.0"
