"""Balance sheet computation and export routes."""

from fastapi import APIRouter
from fastapi.responses import Response

from balance_sheet_pro.models.balance_sheet import BalanceSheet, JsonExportRequest, LiabilityInput
from balance_sheet_pro.services.export_service import EXCEL_FILENAME, JSON_FILENAME, PDF_FILENAME, ExportService
from balance_sheet_pro.services.liability_calculator import calculate_balance_sheet

router = APIRouter(prefix="/balance-sheet", tags=["balance-sheet"])

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.post("/compute", response_model=BalanceSheet)
async def compute_balance_sheet(form: LiabilityInput):
    """Compute interest, expenses and totals for the given form values."""
    return calculate_balance_sheet(form)


@router.post("/export/pdf")
async def export_pdf(form: LiabilityInput):
    """Download the balance sheet as PDF."""
    content = ExportService.generate_balance_sheet_pdf(calculate_balance_sheet(form))
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'}
    )


@router.post("/export/xlsx")
async def export_xlsx(form: LiabilityInput):
    """Download the balance sheet as a spreadsheet."""
    content = ExportService.generate_balance_sheet_excel(calculate_balance_sheet(form))
    return Response(
        content=content,
        media_type=XLSX_MIME,
        headers={"Content-Disposition": f'attachment; filename="{EXCEL_FILENAME}"'}
    )


@router.post("/export/json")
async def export_json(request: JsonExportRequest):
    """Export the balance sheet and its extracted figures as JSON."""
    sheet = calculate_balance_sheet(request.form)
    return {
        "status": "success",
        "format": "json",
        "data": ExportService.generate_json_export(sheet, request.extraction),
        "filename": JSON_FILENAME
    }
