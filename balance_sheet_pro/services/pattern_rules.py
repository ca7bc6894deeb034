"""Ordered recognizer tables for statement figures.

Each field owns a tuple of rules tried in order; the first rule that matches
anywhere in the text wins. Every pattern has exactly one capturing group
holding the numeric or percentage literal. New phrasings are added here, not
in the scan or extraction code.
"""

import re
from typing import Dict, NamedTuple, Pattern, Tuple

from balance_sheet_pro.models.document import UnitScale

PATTERN_VERSION = "4"


class FieldRule(NamedTuple):
    name: str
    pattern: Pattern


def _rule(name: str, regex: str) -> FieldRule:
    return FieldRule(name, re.compile(regex, re.IGNORECASE))


# Common fragments
SEP = r"[\s:\-–]*"  # label/value separator
CURRENCY = r"(?:₹|₨|`|\$|Rs\.?|INR)?\s*"
# "5,000", "1,234.50", "2,50, 000" (cells split after a separator)
AMOUNT = r"(\d+(?:,\d+)*(?:,\s+\d+(?:,\d+)*)*(?:\.\d+)?)"
PERCENT = r"(\d+(?:\.\d+)?)\s*%"
# Tabular rates sometimes drop the % sign; refuse years and amounts
LOOSE_PERCENT = r"(\d{1,2}(?:\.\d+)?)(?:\s*%|(?!\d|[.,]\d))"

INTEREST_RATE = "interest_rate"
BANK_CHARGES = "bank_charges"
LOAN_AMOUNT = "loan_amount"


FIELD_RULES: Dict[str, Tuple[FieldRule, ...]] = {

    # === 1. INTEREST RATE (raw percentage, never scaled) ===
    INTEREST_RATE: (
        # Bank annual reports: "Yield on advances (%) 8.45"
        _rule("interest_rate.yield_on_advances", r"yield\s+on\s+(?:average\s+)?advances[^\d]{0,40}?" + LOOSE_PERCENT),
        _rule("interest_rate.interest_rate", r"interest\s*rate" + SEP + PERCENT),
        _rule("interest_rate.roi", r"\bROI\b" + SEP + PERCENT),
        _rule("interest_rate.rate_of_interest", r"rate\s*of\s*interest" + SEP + PERCENT),
    ),

    # === 2. BANK CHARGES ===
    BANK_CHARGES: (
        _rule("bank_charges.bank_charges", r"bank\s*charges" + SEP + CURRENCY + AMOUNT),
        _rule("bank_charges.service_fee", r"service\s*(?:fees?|charges?)" + SEP + CURRENCY + AMOUNT),
        _rule("bank_charges.processing_fee", r"processing\s*fees?" + SEP + CURRENCY + AMOUNT),
        _rule("bank_charges.total_charges", r"total\s*charges" + SEP + CURRENCY + AMOUNT),
    ),

    # === 3. LOAN / ADVANCES AMOUNT ===
    LOAN_AMOUNT: (
        # Bank balance sheets
        _rule("loan_amount.total_advances", r"total\s+advances" + SEP + CURRENCY + AMOUNT),
        _rule("loan_amount.loans_and_advances", r"loans\s*(?:and|&)\s*advances" + SEP + CURRENCY + AMOUNT),
        _rule("loan_amount.net_advances", r"net\s+advances" + SEP + CURRENCY + AMOUNT),
        # Loan statements and sanction letters
        _rule("loan_amount.loan_amount", r"loan\s*amount" + SEP + CURRENCY + AMOUNT),
        _rule("loan_amount.principal_amount", r"principal\s*(?:loan\s*)?amount" + SEP + CURRENCY + AMOUNT),
        _rule("loan_amount.sanctioned_amount", r"sanctioned\s*(?:loan\s*)?amount" + SEP + CURRENCY + AMOUNT),
        _rule("loan_amount.outstanding", r"outstanding\s*(?:loan\s*)?(?:amount|balance)" + SEP + CURRENCY + AMOUNT),
    ),
}

# Tried only when every rule of the field failed. "Total <number>" has no
# guard against unrelated totals (page counts, footnote subtotals).
FALLBACK_RULES: Dict[str, Tuple[FieldRule, ...]] = {
    LOAN_AMOUNT: (
        _rule("loan_amount.total_fallback", r"\btotal" + SEP + CURRENCY + AMOUNT),
    ),
}

# Fields whose values are currency amounts and get multiplied by the unit scale
SCALED_FIELDS = (BANK_CHARGES, LOAN_AMOUNT)


# Headings that open the balance sheet / schedules region of a long filing
SECTION_MARKERS: Tuple[Pattern, ...] = (
    re.compile(r"standalone\s+balance\s+sheet", re.IGNORECASE),
    re.compile(r"schedules?\s+forming\s+part\s+of", re.IGNORECASE),
    re.compile(r"capital\s+and\s+liabilities", re.IGNORECASE),
)


_RUPEE = r"(?:₹|₨|`|Rs\.?|INR)"

# Priority order: crores, lakhs, thousands
UNIT_SCALE_RULES: Tuple[Tuple[UnitScale, Pattern], ...] = (
    (UnitScale.CRORES, re.compile(
        rf"\bin\s+(?:{_RUPEE}\s*)?crores?\b|\(\s*{_RUPEE}\s*crores?\s*\)", re.IGNORECASE)),
    (UnitScale.LAKHS, re.compile(
        rf"\bin\s+(?:{_RUPEE}\s*)?la(?:kh|c)s?\b|\(\s*{_RUPEE}\s*la(?:kh|c)s?\s*\)", re.IGNORECASE)),
    (UnitScale.THOUSANDS, re.compile(
        rf"\bin\s+(?:{_RUPEE}\s*)?thousands?\b|\(\s*{_RUPEE}?\s*(?:in\s+)?['’]000s?\s*\)", re.IGNORECASE)),
)
