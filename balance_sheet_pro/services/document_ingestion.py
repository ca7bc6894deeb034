"""Ingestion of uploaded statements for extraction."""

import logging
from pathlib import Path

from fastapi import HTTPException, UploadFile

from balance_sheet_pro.models.document import (
    DocumentFormat,
    DocumentMetadata,
    ExtractionResponse,
)
from balance_sheet_pro.services.extraction_service import FinancialExtractionService

logger = logging.getLogger(__name__)

MANUAL_ENTRY_MESSAGE = "Could not extract automatically, please verify manually."


class DocumentIngestionService:
    """Validates uploads and hands their bytes to the extraction pipeline."""

    SUPPORTED_FORMATS = {
        ".pdf": DocumentFormat.PDF,
    }

    def __init__(self, extraction_service: FinancialExtractionService):
        """Initialize the ingestion service.

        Args:
            extraction_service: Pipeline run on every accepted upload
        """
        self.extraction_service = extraction_service
        self.max_file_size = extraction_service.settings.max_upload_bytes

    async def ingest_document(self, file: UploadFile) -> ExtractionResponse:
        """Validate an uploaded statement and extract its figures.

        Args:
            file: The uploaded file

        Returns:
            Metadata and extraction outcome; an unreadable PDF still returns
            a response, with every figure empty

        Raises:
            HTTPException: If file validation fails
        """
        await self._validate_file(file)

        await file.seek(0)
        content = await file.read()
        if len(content) > self.max_file_size:
            raise HTTPException(status_code=413, detail=self._too_large_detail())

        metadata = DocumentMetadata(
            filename=file.filename,
            file_size=len(content),
            format=self.SUPPORTED_FORMATS[Path(file.filename).suffix.lower()]
        )
        logger.info("Extracting figures from %s (%d bytes)", metadata.filename, metadata.file_size)

        outcome = await self.extraction_service.extract_with_details(content, filename=file.filename)
        message = "Figures extracted successfully"
        if outcome.result.is_empty():
            message = MANUAL_ENTRY_MESSAGE

        return ExtractionResponse(metadata=metadata, outcome=outcome, message=message)

    async def _validate_file(self, file: UploadFile) -> None:
        """Validate uploaded file.

        Raises:
            HTTPException: If validation fails
        """
        if not file.filename:
            raise HTTPException(status_code=400, detail="No filename provided")

        if file.size is not None and file.size > self.max_file_size:
            raise HTTPException(status_code=413, detail=self._too_large_detail())

        file_extension = Path(file.filename).suffix.lower()
        if file_extension not in self.SUPPORTED_FORMATS:
            supported = ", ".join(self.SUPPORTED_FORMATS.keys())
            raise HTTPException(
                status_code=415,
                detail=f"Unsupported file format. Supported formats: {supported}"
            )

    def _too_large_detail(self) -> str:
        return f"File too large. Maximum size: {self.max_file_size / 1024 / 1024:.0f}MB"
