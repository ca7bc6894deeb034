"""Export service for generating the balance sheet in various formats."""

import io
import json
from datetime import datetime, timezone
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from balance_sheet_pro.models.balance_sheet import BalanceSheet
from balance_sheet_pro.models.document import ExtractionResult

PDF_FILENAME = "Balance_Sheet.pdf"
EXCEL_FILENAME = "Balance_Sheet.xlsx"
JSON_FILENAME = "Balance_Sheet.json"

FOOTER_LINES = (
    "This document is generated automatically for loan renewal purposes.",
    "Confidential - For Bank Use Only",
)

PRIMARY = colors.Color(37 / 255, 99 / 255, 235 / 255)
HEADER_FILL = colors.Color(240 / 255, 245 / 255, 1)


class ExportService:
    """Service for exporting the computed balance sheet."""

    @staticmethod
    def generate_balance_sheet_pdf(sheet: BalanceSheet) -> bytes:
        """Generate the balance sheet PDF.

        Args:
            sheet: Computed balance sheet

        Returns:
            PDF file content
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=56,
            leftMargin=56,
            topMargin=56,
            bottomMargin=56,
            title="Balance Sheet"
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "Title",
            fontSize=22,
            leading=26,
            alignment=TA_CENTER,
            textColor=PRIMARY,
            fontName="Helvetica-Bold"
        )
        subtitle_style = ParagraphStyle(
            "Subtitle",
            fontSize=10,
            leading=14,
            alignment=TA_CENTER,
            textColor=colors.grey
        )
        footer_style = ParagraphStyle(
            "Footer",
            fontSize=8,
            leading=11,
            alignment=TA_CENTER,
            textColor=colors.grey
        )

        story = [
            Paragraph("BALANCE SHEET", title_style),
            Paragraph(f"As of {sheet.as_of.strftime('%d %b %Y')}", subtitle_style),
            Spacer(1, 18),
            Paragraph("Entity Information", styles["Heading3"]),
            Paragraph(f"Address: {sheet.address or 'N/A'}", styles["Normal"]),
            Spacer(1, 18),
        ]

        liabilities = [["LIABILITIES", "Amount (INR)"]]
        liabilities += [[label, _fmt(value)] for label, value in sheet.liability_rows()]
        liabilities.append(["TOTAL LIABILITIES", _fmt(sheet.total_liabilities)])
        story.append(_section_table(liabilities))
        story.append(Spacer(1, 18))

        assets = [
            ["ASSETS", "Amount (INR)"],
            ["Loan Principal (Asset)", _fmt(sheet.loan_amount)],
            ["TOTAL ASSETS", _fmt(sheet.total_assets)],
        ]
        story.append(_section_table(assets))
        story.append(Spacer(1, 36))

        for line in FOOTER_LINES:
            story.append(Paragraph(line, footer_style))

        doc.build(story)
        return buffer.getvalue()

    @staticmethod
    def generate_balance_sheet_excel(sheet: BalanceSheet) -> bytes:
        """Generate the balance sheet spreadsheet.

        Args:
            sheet: Computed balance sheet

        Returns:
            XLSX file content
        """
        wb = Workbook()
        ws = wb.active
        ws.title = "Balance Sheet"

        rows = [
            ["BALANCE SHEET"],
            ["Generated on:", sheet.as_of.strftime("%d/%m/%Y")],
            ["Address:", sheet.address or "N/A"],
            [],
            ["LIABILITIES", "AMOUNT (₹)"],
        ]
        rows += [[label, value] for label, value in sheet.liability_rows()]
        rows += [
            ["TOTAL LIABILITIES", sheet.total_liabilities],
            [],
            ["ASSETS", "AMOUNT (₹)"],
            ["Loan Principal", sheet.loan_amount],
            ["TOTAL ASSETS", sheet.total_assets],
        ]
        for row in rows:
            ws.append(row)

        ws["A1"].font = Font(size=14, bold=True, color="2563EB")
        header_fill = PatternFill(start_color="F0F5FF", end_color="F0F5FF", fill_type="solid")
        for row in ws.iter_rows(min_row=1, max_col=2):
            label = row[0].value
            if label in ("LIABILITIES", "ASSETS"):
                for cell in row:
                    cell.font = Font(bold=True, color="2563EB")
                    cell.fill = header_fill
            elif label in ("TOTAL LIABILITIES", "TOTAL ASSETS"):
                for cell in row:
                    cell.font = Font(bold=True)
            if isinstance(row[1].value, (int, float)):
                row[1].number_format = "#,##0.00"
                row[1].alignment = Alignment(horizontal="right")

        ws.column_dimensions["A"].width = 28
        ws.column_dimensions["B"].width = 20

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def generate_json_export(sheet: BalanceSheet, extraction: Optional[ExtractionResult] = None) -> str:
        """Generate JSON export of the balance sheet and the figures it came from.

        Args:
            sheet: Computed balance sheet
            extraction: Extraction result used to fill the form, if any

        Returns:
            JSON data as string
        """
        export_data = {
            'export_metadata': {
                'export_date': datetime.now(timezone.utc).isoformat(),
                'export_type': 'balance_sheet'
            },
            'balance_sheet': sheet.model_dump(mode="json"),
            'extracted_figures': extraction.model_dump(by_alias=True) if extraction else None
        }
        return json.dumps(export_data, indent=2, default=str)


def _fmt(value: float) -> str:
    return f"{value:,.2f}"


def _section_table(data) -> Table:
    table = Table(data, colWidths=[300, 140])
    table.setStyle(
        TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
            ("TEXTCOLOR", (0, 0), (-1, 0), PRIMARY),
            ("FONT", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONT", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("LINEABOVE", (0, -1), (-1, -1), 0.75, colors.black),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ])
    )
    return table
