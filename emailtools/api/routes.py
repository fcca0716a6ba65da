"""API routes for the email list tools."""

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import PlainTextResponse

from emailtools.core.config import settings
from emailtools.core.logger import get_logger
from emailtools.api.models import (
    ExportRequest,
    ExtractionResult,
    HealthResponse,
    TextRequest,
    ValidationResult,
)
from emailtools.services.email_extractor import EmailExtractor
from emailtools.services.exporter import export_filename, render
from emailtools.services.list_validator import EmailListValidator
from emailtools.services.text_source import decode_upload

logger = get_logger(__name__)
router = APIRouter()

extractor = EmailExtractor()
validator = EmailListValidator()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=settings.app_version)


@router.post("/api/v1/extract", response_model=ExtractionResult)
def extract(request: TextRequest) -> ExtractionResult:
    """Extract unique email addresses from free-form text."""
    return extractor.extract_emails(request.text)


@router.post("/api/v1/extract/upload", response_model=ExtractionResult)
async def extract_upload(file: UploadFile = File(...)) -> ExtractionResult:
    """Extract email addresses from an uploaded .txt/.csv file."""
    text = decode_upload(await file.read(), file.filename)
    return extractor.extract_emails(text)


@router.post("/api/v1/validate", response_model=ValidationResult)
def validate(request: TextRequest) -> ValidationResult:
    """
    Validate a pasted email list.
    
    Args:
        request: List of addresses separated by newlines, commas or spaces
        
    Returns:
        Valid, invalid and risky buckets with duplicate counts
    """
    return validator.validate_emails(request.text)


@router.post("/api/v1/validate/upload", response_model=ValidationResult)
async def validate_upload(file: UploadFile = File(...)) -> ValidationResult:
    """Validate an email list from an uploaded .txt/.csv file."""
    text = decode_upload(await file.read(), file.filename)
    logger.info("Validating uploaded list", filename=file.filename)
    return validator.validate_emails(text)


@router.post("/api/v1/export", response_class=PlainTextResponse)
def export(request: ExportRequest) -> PlainTextResponse:
    """Render a result list as a CSV or plain-text download."""
    filename = export_filename(request.category, request.format)
    media_type = "text/csv" if request.format == "csv" else "text/plain"
    return PlainTextResponse(
        content=render(request.emails, request.format),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
