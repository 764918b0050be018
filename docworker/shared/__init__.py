"""Shared utilities: logging, errors, time."""
