"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List, Literal

from emailtools.core.results import ExtractionResult, ValidationResult


class TextRequest(BaseModel):
    """Request model for the text-based extract and validate endpoints."""
    text: str = Field("", description="Pasted text or email list")


class ExportRequest(BaseModel):
    """Request model for the export endpoint."""
    emails: List[str] = Field(default_factory=list, description="Addresses to export")
    category: str = Field("extracted", pattern=r"^[a-z_]+$", description="Used in the file name")
    format: Literal["csv", "txt"] = "csv"


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    version: str


__all__ = [
    "TextRequest",
    "ExportRequest",
    "HealthResponse",
    "ExtractionResult",
    "ValidationResult",
]
