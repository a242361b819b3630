"""Shared helpers: logging, validation, unit scaling and output formatting."""
