"""Main Streamlit application for Balance Sheet Pro."""

import os

import requests
import streamlit as st
from dotenv import load_dotenv

from balance_sheet_pro.models.balance_sheet import LiabilityInput
from balance_sheet_pro.models.document import ExtractionResult
from balance_sheet_pro.services.liability_calculator import calculate_balance_sheet, merge_extraction
from balance_sheet_pro.ui.components import (
    show_export_options,
    show_extraction_summary,
    show_liability_charts,
    show_stat_cards,
    show_statement_preview,
)

load_dotenv()

# Configure page
st.set_page_config(
    page_title="Balance Sheet Pro",
    page_icon="📑",
    layout="wide"
)

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api/v1")


def _init_state():
    defaults = {
        "loan_amount": 0.0,
        "interest_rate": 0.0,
        "bank_charges": 0.0,
        "extraction": None,
        "extraction_details": None,
        "processed_file": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def process_statement(file):
    """Send an uploaded statement to the API and fold the figures into the form."""
    with st.spinner("Extracting data..."):
        try:
            files = {"file": (file.name, file.getvalue(), "application/pdf")}
            response = requests.post(f"{API_BASE_URL}/extraction/upload", files=files, timeout=120)
        except requests.RequestException as e:
            st.error(f"❌ Could not reach the extraction API: {e}")
            return

    st.session_state.processed_file = file.name

    if response.status_code != 200:
        detail = response.json().get("detail", response.status_code) if response.content else response.status_code
        st.error(f"❌ Upload rejected: {detail}")
        return

    details = response.json()["outcome"]
    extraction = ExtractionResult.model_validate(details["result"])
    st.session_state.extraction = extraction
    st.session_state.extraction_details = details

    merged = merge_extraction(LiabilityInput(loan_amount=st.session_state.loan_amount), extraction)
    st.session_state.loan_amount = merged.loan_amount
    st.session_state.interest_rate = merged.interest_rate
    st.session_state.bank_charges = merged.bank_charges


def show_sidebar() -> LiabilityInput:
    """Form inputs; returns the current calculator input."""
    with st.sidebar:
        st.title("Balance Sheet Pro")
        st.caption("Modern Loan Renewal Automation")

        uploaded = st.file_uploader(
            "Bank Statement (PDF)",
            type=["pdf"],
            help="Bank statement or annual report; figures are filled in automatically"
        )
        if uploaded is not None and uploaded.name != st.session_state.processed_file:
            process_statement(uploaded)

        address = st.text_input(
            "📍 Business Address",
            placeholder="e.g. 101 Financial District, Mumbai",
            help="Full legal address of the entity"
        )
        loan_amount = st.number_input(
            "💰 Loan Amount",
            min_value=0.0,
            step=1000.0,
            key="loan_amount",
            help="Total principal amount for renewal"
        )
        expenses_percent = st.number_input(
            "📉 Expenses %",
            min_value=0.0,
            value=5.0,
            step=0.5,
            help="Annual operating expenses as % of loan"
        )

        st.write(f"**Bank interest rate:** {st.session_state.interest_rate:g}%")
        st.write(f"**Bank charges:** ₹{st.session_state.bank_charges:,.2f}")

    return LiabilityInput(
        address=address,
        loan_amount=loan_amount,
        expenses_percent=expenses_percent,
        interest_rate=st.session_state.interest_rate,
        bank_charges=st.session_state.bank_charges,
    )


def main():
    """Main application function."""
    _init_state()
    form = show_sidebar()
    sheet = calculate_balance_sheet(form)

    header_col, export_col = st.columns([3, 2])
    with header_col:
        st.header("Overview")
        st.caption("Live financial snapshot based on inputs")
    with export_col:
        show_export_options(sheet, st.session_state.extraction)

    show_extraction_summary(st.session_state.extraction, st.session_state.extraction_details)
    show_stat_cards(sheet)
    show_liability_charts(sheet)
    show_statement_preview(sheet)


if __name__ == "__main__":
    main()
