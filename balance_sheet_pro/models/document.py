"""Document and extraction models for the balance sheet application."""

from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class DocumentFormat(str, Enum):
    """Supported document formats."""
    PDF = "pdf"


class UnitScale(IntEnum):
    """Multiplier declared by a statement's units heading."""
    ABSOLUTE = 1
    THOUSANDS = 1_000
    LAKHS = 100_000
    CRORES = 10_000_000


class FailureKind(str, Enum):
    """Why an extraction came back empty."""
    NONE = "none"
    DECODE_FAILED = "decode_failed"
    NOTHING_MATCHED = "nothing_matched"
    ERROR = "error"


class DocumentMetadata(BaseModel):
    """Metadata for uploaded statements."""
    filename: str
    file_size: int
    format: DocumentFormat = DocumentFormat.PDF
    upload_timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ExtractedFact(BaseModel):
    """A single figure picked out of the statement text."""
    key: str
    value: str
    confidence: float = Field(ge=0.0, le=1.0)
    rule: Optional[str] = None  # name of the rule that matched
    source_text: Optional[str] = None
    source_reference: Optional[str] = None  # filename + character span


class ScanResult(BaseModel):
    """Text accumulated by the page scanner."""
    pages: List[str] = Field(default_factory=list)
    total_pages: int = 0
    marker_page: Optional[int] = None  # 1-based page of the first section marker
    stopped_early: bool = False

    @property
    def pages_scanned(self) -> int:
        return len(self.pages)

    @property
    def text(self) -> str:
        return "".join(f"{page}\n" for page in self.pages)


class ExtractionResult(BaseModel):
    """Figures extracted from one statement.

    ``interest_rate`` is the raw percentage literal. ``bank_charges`` and
    ``loan_amount`` are decimal strings already multiplied by the unit scale.
    ``None`` means no rule matched.
    """
    model_config = ConfigDict(populate_by_name=True)

    interest_rate: Optional[str] = Field(default=None, alias="interestRate")
    bank_charges: Optional[str] = Field(default=None, alias="bankCharges")
    loan_amount: Optional[str] = Field(default=None, alias="loanAmount")

    def is_empty(self) -> bool:
        return self.interest_rate is None and self.bank_charges is None and self.loan_amount is None


class ExtractionOutcome(BaseModel):
    """Extraction result together with the diagnostics behind it."""
    result: ExtractionResult = Field(default_factory=ExtractionResult)
    unit_scale: UnitScale = UnitScale.ABSOLUTE
    facts: List[ExtractedFact] = Field(default_factory=list)
    processing_metadata: Dict[str, Any] = Field(default_factory=dict)


class ExtractionResponse(BaseModel):
    """Response for a statement upload."""
    metadata: DocumentMetadata
    outcome: ExtractionOutcome
    message: str
