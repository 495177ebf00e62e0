"""Salon website backend: pages, uploads and JSON-file record storage."""

__version__ = "1.0.0"
