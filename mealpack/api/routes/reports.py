from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from mealpack.api.routes.orders import row_filters, select_rows
from mealpack.logic.reporting.summaries import aggregate, group_field
from mealpack.utilities.constants import DEFAULT_GROUP_BY, GROUP_BY_FIELDS, REPORT_PRODUCTION, REPORT_PACKING
from mealpack.utilities.validators import RowFilters

router = APIRouter(prefix="/api/reports")


@router.get("/{kind}")
def report(kind: str,
           group_by: str = Query(default=DEFAULT_GROUP_BY),
           q: Optional[str] = Query(default=None),
           rounded: bool = Query(default=True),
           filters: RowFilters = Depends(row_filters)):
    """Production or packing totals per group, over the rows matching the search and filters."""
    if kind not in (REPORT_PRODUCTION, REPORT_PACKING):
        raise HTTPException(status_code=404, detail=f"Unknown report: {kind}")
    field = group_field(group_by)
    selector = group_by if group_by in GROUP_BY_FIELDS else DEFAULT_GROUP_BY
    summaries = aggregate(select_rows(q, filters), selector, kind)
    return {
        "report": kind,
        "group_by": selector,
        "field": field,
        "groups": [s.to_dict(rounded=rounded) for s in summaries],
    }
