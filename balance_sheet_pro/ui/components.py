"""UI components for the Streamlit dashboard."""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from typing import Any, Dict, Optional

from balance_sheet_pro.models.balance_sheet import BalanceSheet
from balance_sheet_pro.models.document import ExtractionResult
from balance_sheet_pro.services.export_service import EXCEL_FILENAME, JSON_FILENAME, PDF_FILENAME, ExportService


def _inr(value: float) -> str:
    return f"₹{value:,.0f}"


def show_stat_cards(sheet: BalanceSheet):
    """Display the headline totals."""
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Total Loan", _inr(sheet.loan_amount))

    with col2:
        st.metric(f"Interest ({sheet.interest_rate:g}%)", _inr(sheet.estimated_interest))

    with col3:
        st.metric("Expenses", _inr(sheet.calculated_expenses))

    with col4:
        st.metric("Total Liability", _inr(sheet.total_liabilities))


def show_liability_charts(sheet: BalanceSheet):
    """Bar and donut charts of the non-zero liability components."""
    rows = sheet.chart_rows()
    if not rows:
        st.info("Enter a loan amount or upload a statement to see the breakdown.")
        return

    labels = [label for label, _, _ in rows]
    values = [value for _, value, _ in rows]
    palette = [color for _, _, color in rows]

    col1, col2 = st.columns([3, 2])

    with col1:
        st.subheader("📊 Liability Breakdown")
        bar = go.Figure(go.Bar(x=labels, y=values, marker_color=palette))
        bar.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10))
        st.plotly_chart(bar, use_container_width=True)

    with col2:
        st.subheader("🥧 Ratio")
        donut = go.Figure(go.Pie(labels=labels, values=values, hole=0.6, marker=dict(colors=palette)))
        donut.update_layout(height=320, margin=dict(l=10, r=10, t=10, b=10), legend=dict(orientation="h"))
        st.plotly_chart(donut, use_container_width=True)


def show_statement_preview(sheet: BalanceSheet):
    """Table preview of the liabilities side."""
    st.subheader("🧾 Statement Preview")

    rows = [
        {"Description": "Principal Loan Amount", "Amount": _inr(sheet.loan_amount)},
        {"Description": "Estimated Bank Interest", "Amount": _inr(sheet.estimated_interest)},
        {"Description": "Extracted Bank Charges", "Amount": _inr(sheet.bank_charges)},
        {"Description": f"Calculated Expenses ({sheet.expenses_percent:g}%)", "Amount": _inr(sheet.calculated_expenses)},
        {"Description": "Total Liabilities", "Amount": _inr(sheet.total_liabilities)},
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def show_extraction_summary(extraction: Optional[ExtractionResult], details: Optional[Dict[str, Any]] = None):
    """Show what was pulled out of the uploaded statement."""
    if extraction is None:
        return

    if extraction.is_empty():
        st.warning("⚠️ Could not extract automatically, please verify manually.")
        return

    st.success("✅ Figures extracted from statement")
    st.write(f"• **Interest rate:** {extraction.interest_rate or 'Not found'}")
    st.write(f"• **Bank charges:** {extraction.bank_charges or 'Not found'}")
    st.write(f"• **Loan amount:** {extraction.loan_amount or 'Not found'}")

    if details:
        with st.expander("🔍 Evidence"):
            metadata = details.get("processing_metadata", {})
            st.write(f"Pages scanned: {metadata.get('pages_scanned', 'N/A')} "
                     f"(unit scale: {metadata.get('unit_scale', 'N/A')})")
            for fact in details.get("facts", []):
                st.write(f"**{fact.get('key')}** via `{fact.get('rule')}` "
                         f"(confidence {fact.get('confidence', 0):.2f})")
                st.caption(fact.get("source_text") or "")


def show_export_options(sheet: BalanceSheet, extraction: Optional[ExtractionResult] = None):
    """Download buttons for the balance sheet."""
    col1, col2, col3 = st.columns(3)

    with col1:
        st.download_button(
            label="💾 Export PDF",
            data=ExportService.generate_balance_sheet_pdf(sheet),
            file_name=PDF_FILENAME,
            mime="application/pdf"
        )

    with col2:
        st.download_button(
            label="📈 Export Excel",
            data=ExportService.generate_balance_sheet_excel(sheet),
            file_name=EXCEL_FILENAME,
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )

    with col3:
        st.download_button(
            label="🧾 Export JSON",
            data=ExportService.generate_json_export(sheet, extraction),
            file_name=JSON_FILENAME,
            mime="application/json"
        )
