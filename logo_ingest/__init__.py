"""Bank logo ingestion: validate, match, publish and clean up logo images."""

__version__ = "0.1.0"
