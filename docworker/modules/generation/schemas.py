"""
Generation job payloads and results.

Wire names are camelCase and shared with the job producer; do not rename.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter

from docworker.modules.render.schemas import ImageOptions, PdfOptions


# =============================================================================
# JOBS
# =============================================================================

class DocumentJobBase(BaseModel):
    """Fields common to every document job."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_id: str = Field(..., alias="userId")
    html_content: str = Field(..., alias="htmlContent")
    storage_key: str = Field(
        ...,
        alias="s3Key",
        validation_alias=AliasChoices("s3Key", "storageKey", "storage_key"),
        description="Destination key in the bucket",
    )
    meta_data: dict[str, Any] | None = Field(None, alias="metaData")


class PdfDocumentJob(DocumentJobBase):
    document_type: Literal["pdf"] = Field(..., alias="documentType")
    pdf_options: PdfOptions | None = Field(None, alias="pdfOptions")


class ImageDocumentJob(DocumentJobBase):
    document_type: Literal["image"] = Field(..., alias="documentType")
    image_options: ImageOptions | None = Field(None, alias="imageOptions")


DocumentJob = Annotated[
    Union[PdfDocumentJob, ImageDocumentJob],
    Field(discriminator="document_type"),
]

_document_job_adapter: TypeAdapter[DocumentJob] = TypeAdapter(DocumentJob)


def parse_document_job(data: Any) -> PdfDocumentJob | ImageDocumentJob:
    """Validate raw queue data into a typed job (raises ValidationError)."""
    return _document_job_adapter.validate_python(data)


# =============================================================================
# RESULTS
# =============================================================================

class JobResult(BaseModel):
    """Value stored by the queue when a job succeeds."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    url: str
    user_id: str = Field(..., alias="userId")
    completed_at: str = Field(..., alias="completedAt")
    meta_data: dict[str, Any] | None = Field(None, alias="metaData")

    def to_payload(self) -> dict[str, Any]:
        """Wire form; ``metaData`` is left out entirely when absent."""
        payload = self.model_dump(by_alias=True, exclude={"meta_data"})
        if self.meta_data is not None:
            payload["metaData"] = self.meta_data
        return payload
