"""Shared enums."""

from enum import Enum


class DocumentType(str, Enum):
    """Output kind requested by a job."""
    PDF = "pdf"
    IMAGE = "image"
