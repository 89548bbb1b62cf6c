"""Build EPP command documents and parse EPP responses."""

__version__ = "0.1.0"