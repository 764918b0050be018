"""
Storage service - upload rendered documents to S3.
"""

import asyncio
from typing import Any

import boto3

from docworker.config import Settings
from docworker.shared.logging import get_logger
from docworker.shared.types import DocumentType

logger = get_logger(__name__)


# Image uploads are always labelled PNG, whatever format was rendered
CONTENT_TYPES = {
    DocumentType.PDF: "application/pdf",
    DocumentType.IMAGE: "image/png",
}


def content_type_for(document_type: DocumentType | str) -> str:
    return CONTENT_TYPES[DocumentType(document_type)]


class StorageService:
    """
    Upload bytes to the configured S3 bucket and return their public URL.

    The client is created once and shared; each upload runs in a worker
    thread.
    """

    def __init__(self, settings: Settings, client: Any = None) -> None:
        self.bucket = settings.s3_bucket_name
        self.endpoint_url = settings.s3_endpoint_url
        self.client = client or boto3.client(
            "s3",
            region_name=settings.aws_region,
            endpoint_url=settings.s3_endpoint_url,
        )

    def public_url(self, key: str) -> str:
        """Public address of an object; derived, no request needed."""
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.amazonaws.com/{key}"

    async def upload(self, key: str, data: bytes, document_type: DocumentType | str) -> str:
        """
        Store ``data`` under ``key``.

        Args:
            key: Object key inside the bucket
            data: Document bytes
            document_type: Determines the Content-Type

        Returns:
            Public URL of the stored object

        Raises:
            botocore.exceptions.BotoCoreError, ClientError: propagated as-is
        """
        content_type = content_type_for(document_type)

        logger.info(
            "Uploading to S3",
            extra={
                "bucket": self.bucket,
                "key": key,
                "bytes": len(data),
                "content_type": content_type,
            },
        )

        await asyncio.to_thread(
            self.client.put_object,
            Bucket=self.bucket,
            Key=key,
            Body=data,
            ContentType=content_type,
        )

        url = self.public_url(key)
        logger.info("S3 upload successful", extra={"bucket": self.bucket, "key": key, "url": url})
        return url
