from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.encoders import jsonable_encoder
from typing import List, Optional
import logging

from mealpack.api.state import get_state
from mealpack.domain.OrderLine import OrderLine
from mealpack.infra.excel_io import EmptyWorkbookError, read_order_rows
from mealpack.logic.search.filters import search_rows, apply_filters, filter_options, find_order_card
from mealpack.utilities.validators import OrderRowsInput, RowFilters, filters_dict

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def row_filters(branch: Optional[str] = Query(default=None),
                city: Optional[str] = Query(default=None),
                customer_type: Optional[str] = Query(default=None),
                category: Optional[str] = Query(default=None)) -> RowFilters:
    return RowFilters(branch=branch, city=city, customer_type=customer_type, category=category)


def select_rows(q: Optional[str], filters: RowFilters) -> List[OrderLine]:
    """Loaded rows matching the search text and the dropdown filters, in file order."""
    rows = get_state().book.get_rows()
    return apply_filters(search_rows(rows, q), filters_dict(filters))


def _loaded(count: int):
    state = get_state()
    return {"status": "ok", "rows": count, "allow_overage": state.book.allow_overage,
            "filters": filter_options(state.book.get_rows())}


@router.post("/orders/upload")
async def upload_orders(file: UploadFile = File(...)):
    """Replace the loaded orders with the first sheet of an uploaded .xlsx file."""
    content = await file.read()
    try:
        raw_rows = read_order_rows(content)
    except EmptyWorkbookError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to read workbook {file.filename}: {e}")
        raise HTTPException(status_code=400, detail="Could not read the uploaded workbook")
    get_state().book.load(raw_rows)
    return _loaded(len(raw_rows))


@router.post("/orders")
def load_orders(payload: OrderRowsInput):
    """Replace the loaded orders with rows posted as JSON."""
    get_state().book.load(payload.rows)
    return _loaded(len(payload.rows))


@router.get("/orders")
def list_orders(q: Optional[str] = Query(default=None), filters: RowFilters = Depends(row_filters)):
    rows = select_rows(q, filters)
    return jsonable_encoder({
        "count": len(rows),
        "total": len(get_state().book),
        "rows": [row.to_dict() for row in rows],
        "order_card": find_order_card(rows, q),
    })


@router.get("/filters")
def list_filter_options():
    return filter_options(get_state().book.get_rows())
