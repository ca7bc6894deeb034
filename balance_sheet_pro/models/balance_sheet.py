"""Liability calculator models."""

from datetime import date
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field

from balance_sheet_pro.models.document import ExtractionResult


class LiabilityInput(BaseModel):
    """Form values feeding the liability calculator."""
    address: str = ""
    loan_amount: float = Field(default=0.0, ge=0.0)
    expenses_percent: float = Field(default=5.0, ge=0.0)
    interest_rate: float = Field(default=0.0, ge=0.0)  # percent per annum
    bank_charges: float = Field(default=0.0, ge=0.0)


class BalanceSheet(BaseModel):
    """Derived balance sheet figures."""
    address: str = ""
    as_of: date = Field(default_factory=date.today)
    loan_amount: float = 0.0
    interest_rate: float = 0.0
    expenses_percent: float = 0.0
    estimated_interest: float = 0.0
    bank_charges: float = 0.0
    calculated_expenses: float = 0.0
    total_liabilities: float = 0.0
    total_assets: float = 0.0

    def liability_rows(self) -> List[Tuple[str, float]]:
        """Rows of the liabilities side, in template order."""
        return [
            ("Principal Loan Amount", self.loan_amount),
            ("Outstanding Interest", self.estimated_interest),
            ("Bank Charges", self.bank_charges),
            ("Operating Expenses", self.calculated_expenses),
        ]

    def chart_rows(self) -> List[Tuple[str, float, str]]:
        """Non-zero components for the dashboard charts as (label, value, colour)."""
        rows = [
            ("Loan Principal", self.loan_amount, "#3b82f6"),
            ("Interest", self.estimated_interest, "#38bdf8"),
            ("Charges", self.bank_charges, "#f43f5e"),
            ("Expenses", self.calculated_expenses, "#10b981"),
        ]
        return [row for row in rows if row[1] > 0]


class JsonExportRequest(BaseModel):
    """Form values plus the extraction they were filled from, if any."""
    form: LiabilityInput
    extraction: Optional[ExtractionResult] = None
