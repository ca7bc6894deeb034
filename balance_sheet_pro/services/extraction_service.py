"""Extraction pipeline: PDF bytes to normalized statement figures."""

import logging
from typing import Callable, Optional

from balance_sheet_pro.config import ExtractionSettings
from balance_sheet_pro.models.document import (
    ExtractionOutcome,
    ExtractionResult,
    FailureKind,
    UnitScale,
)
from balance_sheet_pro.services.field_extractor import FieldExtractionService
from balance_sheet_pro.services.normalization_service import NormalizationService
from balance_sheet_pro.services.page_scanner import PageScanner
from balance_sheet_pro.services.pattern_rules import LOAN_AMOUNT, PATTERN_VERSION
from balance_sheet_pro.services.pdf_reader import DocumentDecodeError, open_pdf
from balance_sheet_pro.services.unit_scale import detect_unit_scale

logger = logging.getLogger(__name__)


class FinancialExtractionService:
    """Runs scan, unit detection, field extraction and normalization.

    Never raises: any failure is logged and turned into an all-empty result so
    callers can fall back to manual entry.
    """

    def __init__(
        self,
        settings: Optional[ExtractionSettings] = None,
        document_opener: Callable = open_pdf,
        field_extractor: Optional[FieldExtractionService] = None,
        normalization_service: Optional[NormalizationService] = None
    ):
        """Initialize the pipeline.

        Args:
            settings: Scan and detection tunables (defaults when omitted)
            document_opener: Callable turning raw bytes into a document with
                ``page_count`` and ``async get_page_text(n)``
            field_extractor: Rule-based field extractor
            normalization_service: Literal normalizer
        """
        self.settings = settings or ExtractionSettings()
        self.document_opener = document_opener
        self.scanner = PageScanner(
            page_cap=self.settings.page_cap,
            marker_window=self.settings.marker_window
        )
        self.field_extractor = field_extractor or FieldExtractionService()
        self.normalization_service = normalization_service or NormalizationService()

    async def extract(self, raw_bytes: bytes) -> ExtractionResult:
        """Extract interest rate, bank charges and loan amount from a PDF.

        Args:
            raw_bytes: Raw PDF file content

        Returns:
            ExtractionResult; all fields ``None`` when nothing was found or the
            document could not be read
        """
        outcome = await self.extract_with_details(raw_bytes)
        return outcome.result

    async def extract_with_details(self, raw_bytes: bytes, filename: Optional[str] = None) -> ExtractionOutcome:
        """Same pipeline as ``extract`` but keeps the diagnostics.

        Args:
            raw_bytes: Raw PDF file content
            filename: Used in logs and source references

        Returns:
            ExtractionOutcome with result, scale, matched facts and metadata
        """
        name = filename or "document"
        try:
            document = self.document_opener(raw_bytes)
            try:
                scan = await self.scanner.scan(document)
            finally:
                close = getattr(document, "close", None)
                if close is not None:
                    close()
        except DocumentDecodeError as e:
            logger.warning("Could not decode %s, returning empty result: %s", name, e)
            return self._empty_outcome(FailureKind.DECODE_FAILED, str(e))
        except Exception as e:
            logger.warning("Extraction failed for %s, returning empty result: %s", name, e, exc_info=True)
            return self._empty_outcome(FailureKind.ERROR, str(e))

        outcome = self.extract_from_text(scan.text, filename=filename)
        outcome.processing_metadata.update({
            "pages_scanned": scan.pages_scanned,
            "total_pages": scan.total_pages,
            "marker_page": scan.marker_page,
            "stopped_early": scan.stopped_early,
        })
        return outcome

    def extract_from_text(self, text: str, filename: Optional[str] = None) -> ExtractionOutcome:
        """Run unit detection, field extraction and normalization on scanned text.

        Args:
            text: Concatenated page text
            filename: Used in logs and source references

        Returns:
            ExtractionOutcome for the text
        """
        name = filename or "document"
        try:
            scale = detect_unit_scale(text, self.settings.scale_prefix_chars)
            facts = self.field_extractor.extract(text, filename=filename)
            result = self.normalization_service.to_result(facts, scale)
        except Exception as e:
            logger.warning("Extraction failed for %s, returning empty result: %s", name, e, exc_info=True)
            return self._empty_outcome(FailureKind.ERROR, str(e))

        loan_fact = facts.get(LOAN_AMOUNT)
        if loan_fact is not None and loan_fact.rule and loan_fact.rule.endswith("total_fallback"):
            logger.warning(
                "Loan amount for %s taken from a bare 'Total' line (%s); verify manually",
                name, loan_fact.value
            )

        failure = FailureKind.NONE
        if result.is_empty():
            failure = FailureKind.NOTHING_MATCHED
            logger.info("No financial fields matched in %s", name)

        return ExtractionOutcome(
            result=result,
            unit_scale=scale,
            facts=list(facts.values()),
            processing_metadata={
                "pattern_version": PATTERN_VERSION,
                "unit_scale": scale.name.lower(),
                "failure": failure.value,
            }
        )

    @staticmethod
    def _empty_outcome(failure: FailureKind, detail: str) -> ExtractionOutcome:
        return ExtractionOutcome(
            result=ExtractionResult(),
            unit_scale=UnitScale.ABSOLUTE,
            processing_metadata={
                "pattern_version": PATTERN_VERSION,
                "failure": failure.value,
                "error": detail,
            }
        )
