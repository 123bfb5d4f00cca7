from fastapi import APIRouter, Depends, HTTPException, Query, Response
from typing import Optional
from urllib.parse import quote

from mealpack.api.routes.orders import row_filters, select_rows
from mealpack.infra.excel_io import export_filename, export_rows_to_excel, export_reports_to_excel
from mealpack.infra.pdf_utils import generate_orders_pdf
from mealpack.infra.sample_data import build_sample_workbook
from mealpack.logic.reporting.summaries import production_summary, packing_summary
from mealpack.utilities.constants import DEFAULT_GROUP_BY
from mealpack.utilities.validators import RowFilters

router = APIRouter(prefix="/api")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _attachment(content: bytes, filename: str, media_type: str) -> Response:
    # Hebrew file names need the RFC 5987 form
    disposition = f"attachment; filename*=UTF-8''{quote(filename)}"
    return Response(content=content, media_type=media_type, headers={"Content-Disposition": disposition})


def _rows_or_404(q, filters):
    rows = select_rows(q, filters)
    if not rows:
        raise HTTPException(status_code=404, detail="No data to export")
    return rows


@router.get("/export/excel")
def export_excel(q: Optional[str] = Query(default=None), filters: RowFilters = Depends(row_filters)):
    rows = _rows_or_404(q, filters)
    return _attachment(export_rows_to_excel(rows), export_filename("xlsx"), XLSX_MEDIA_TYPE)


@router.get("/export/pdf")
def export_pdf(q: Optional[str] = Query(default=None), filters: RowFilters = Depends(row_filters)):
    rows = _rows_or_404(q, filters)
    return _attachment(generate_orders_pdf(rows), export_filename("pdf"), "application/pdf")


@router.get("/export/reports")
def export_reports(production_group_by: str = Query(default=DEFAULT_GROUP_BY),
                   packing_group_by: str = Query(default=DEFAULT_GROUP_BY),
                   q: Optional[str] = Query(default=None),
                   filters: RowFilters = Depends(row_filters)):
    """Both reports in one workbook, each with its own grouping."""
    rows = _rows_or_404(q, filters)
    content = export_reports_to_excel(production_summary(rows, production_group_by),
                                      packing_summary(rows, packing_group_by))
    return _attachment(content, export_filename("xlsx").replace(".xlsx", "_reports.xlsx"), XLSX_MEDIA_TYPE)


@router.get("/sample")
def sample_workbook():
    return _attachment(build_sample_workbook(), "sample_orders.xlsx", XLSX_MEDIA_TYPE)
