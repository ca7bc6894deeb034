"""Liability calculator behind the dashboard and the balance sheet exports."""

from balance_sheet_pro.models.balance_sheet import BalanceSheet, LiabilityInput
from balance_sheet_pro.models.document import ExtractionResult
from balance_sheet_pro.services.normalization_service import NormalizationService

_normalizer = NormalizationService()


def calculate_balance_sheet(form: LiabilityInput) -> BalanceSheet:
    """Derive interest, expenses and totals from the form values.

    Args:
        form: Loan amount, expenses %, interest rate and bank charges

    Returns:
        BalanceSheet with principal + interest + charges + expenses as total
        liabilities and the loan principal as total assets
    """
    estimated_interest = form.loan_amount * (form.interest_rate / 100)
    calculated_expenses = form.loan_amount * (form.expenses_percent / 100)
    total_liabilities = form.loan_amount + estimated_interest + form.bank_charges + calculated_expenses

    return BalanceSheet(
        address=form.address,
        loan_amount=form.loan_amount,
        interest_rate=form.interest_rate,
        expenses_percent=form.expenses_percent,
        estimated_interest=estimated_interest,
        bank_charges=form.bank_charges,
        calculated_expenses=calculated_expenses,
        total_liabilities=total_liabilities,
        total_assets=form.loan_amount,
    )


def merge_extraction(form: LiabilityInput, extraction: ExtractionResult) -> LiabilityInput:
    """Fold extracted figures into the form.

    Interest rate and charges always come from the extraction (missing ones
    count as zero). The loan amount is replaced, rounded to whole rupees, only
    when one was extracted; otherwise the typed-in value stays.
    """
    loan_amount = form.loan_amount
    if extraction.loan_amount:
        loan_amount = float(round(_normalizer.parse_number(extraction.loan_amount)))

    return form.model_copy(update={
        "loan_amount": loan_amount,
        "interest_rate": _normalizer.parse_number(extraction.interest_rate),
        "bank_charges": _normalizer.parse_number(extraction.bank_charges),
    })
