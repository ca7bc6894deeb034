"""Statement upload and extraction routes."""

from fastapi import APIRouter, File, UploadFile

from balance_sheet_pro.config import load_settings
from balance_sheet_pro.models.document import ExtractionResponse
from balance_sheet_pro.services.document_ingestion import DocumentIngestionService
from balance_sheet_pro.services.extraction_service import FinancialExtractionService
from balance_sheet_pro.services.pattern_rules import PATTERN_VERSION

router = APIRouter(prefix="/extraction", tags=["extraction"])

# Initialize services
settings = load_settings()
extraction_service = FinancialExtractionService(settings=settings)
ingestion_service = DocumentIngestionService(extraction_service)


@router.post("/upload", response_model=ExtractionResponse)
async def upload_statement(file: UploadFile = File(...)):
    """Upload a statement PDF and extract its figures.

    Args:
        file: The PDF to analyse

    Returns:
        Extracted interest rate, bank charges and loan amount with diagnostics.
        Unreadable PDFs come back with every figure empty, not as an error.
    """
    return await ingestion_service.ingest_document(file)


@router.get("/settings")
async def get_extraction_settings():
    """Current scan tunables and rule table version."""
    return {
        "page_cap": settings.page_cap,
        "marker_window": settings.marker_window,
        "scale_prefix_chars": settings.scale_prefix_chars,
        "max_upload_bytes": settings.max_upload_bytes,
        "pattern_version": PATTERN_VERSION
    }
