"""Minimal e-commerce backend: token auth plus a product catalog."""

__version__ = "0.1.0"
