"""Storage module - S3 uploads."""

from .service import CONTENT_TYPES, StorageService, content_type_for

__all__ = ["CONTENT_TYPES", "StorageService", "content_type_for"]
