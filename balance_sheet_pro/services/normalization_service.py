"""Service for normalizing extracted literals into arithmetic-ready values."""

import math
import re
from decimal import Decimal
from typing import Mapping, Optional

from balance_sheet_pro.models.document import ExtractedFact, ExtractionResult, UnitScale
from balance_sheet_pro.services.pattern_rules import (
    BANK_CHARGES,
    INTEREST_RATE,
    LOAN_AMOUNT,
    SCALED_FIELDS,
)

# Float noise from scaling ("12.3" lakhs) is dropped past this many places
SCALE_PRECISION = 6


class NormalizationService:
    """Cleans captured literals and applies the statement's unit scale."""

    # Thousands separators and whitespace from cells split across lines
    SEPARATOR_PATTERN = re.compile(r"[,\s]+")

    def parse_number(self, raw: Optional[str]) -> float:
        """Parse a numeric literal, treating anything unparsable as zero.

        Args:
            raw: Literal such as "1,23,456.50" or "5 000"

        Returns:
            Parsed value, 0.0 for empty or malformed input
        """
        if raw is None:
            return 0.0

        cleaned = self.SEPARATOR_PATTERN.sub("", str(raw))
        try:
            value = float(cleaned)
        except ValueError:
            return 0.0

        if not math.isfinite(value):
            return 0.0
        return value

    def normalize_amount(self, raw: Optional[str], scale: UnitScale = UnitScale.ABSOLUTE) -> str:
        """Normalize a currency literal and multiply it by the unit scale.

        Args:
            raw: Captured literal
            scale: Unit scale detected for the document

        Returns:
            Plain decimal string, e.g. "5000000" or "1234.5"
        """
        value = self.parse_number(raw) * int(scale)
        return self._format_decimal(round(value, SCALE_PRECISION))

    def normalize_rate(self, raw: Optional[str]) -> Optional[str]:
        """Pass a percentage literal through unscaled."""
        if raw is None:
            return None
        return raw.strip()

    def to_result(self, facts: Mapping[str, ExtractedFact], scale: UnitScale) -> ExtractionResult:
        """Assemble the extraction result from per-field facts.

        Currency fields are scaled, the interest rate is kept as captured and
        fields without a fact stay ``None``.
        """
        values = {}
        for field, fact in facts.items():
            if field in SCALED_FIELDS:
                values[field] = self.normalize_amount(fact.value, scale)
            else:
                values[field] = self.normalize_rate(fact.value)

        return ExtractionResult(
            interest_rate=values.get(INTEREST_RATE),
            bank_charges=values.get(BANK_CHARGES),
            loan_amount=values.get(LOAN_AMOUNT),
        )

    @staticmethod
    def _format_decimal(value: float) -> str:
        if value == 0:
            return "0"
        # repr keeps the shortest round-tripping digits; 'f' avoids exponents
        return format(Decimal(repr(value)).normalize(), "f")
