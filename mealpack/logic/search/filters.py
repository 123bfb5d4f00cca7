"""Free-text search and dropdown filters over order lines.

All helpers keep the input row order.
"""
from typing import Any, Dict, Iterable, List, Optional

from mealpack.domain.OrderLine import OrderLine
from mealpack.utilities.constants import FILTER_FIELDS

__all__ = ["search_rows", "apply_filters", "filter_options", "find_order_card"]

_SEARCH_CONTAINS = ("customer_number", "customer_name", "phone")


def _matches(row: OrderLine, term: str) -> bool:
    if row.label("order_number").lower() == term:
        return True
    return any(term in row.label(field).lower() for field in _SEARCH_CONTAINS)


def search_rows(rows: Iterable[OrderLine], query: Optional[str]) -> List[OrderLine]:
    """Rows whose order number equals the query or whose customer number/name/phone contain it."""
    rows = list(rows)
    if not query or not query.strip():
        return rows
    term = query.strip().lower()
    return [row for row in rows if _matches(row, term)]


def apply_filters(rows: Iterable[OrderLine], filters: Optional[Dict[str, Any]]) -> List[OrderLine]:
    """Keep rows equal to every non-empty filter value (branch, city, customer_type, category)."""
    active = {FILTER_FIELDS[k]: str(v) for k, v in (filters or {}).items()
              if k in FILTER_FIELDS and v not in (None, "")}
    return [row for row in rows
            if all(row.label(field) == value for field, value in active.items())]


def filter_options(rows: Iterable[OrderLine]) -> Dict[str, List[str]]:
    rows = list(rows)
    options = {}
    for key, field in FILTER_FIELDS.items():
        values = {row.label(field) for row in rows}
        values.discard("")
        options[key] = sorted(values)
    return options


def find_order_card(rows: List[OrderLine], query: Optional[str]) -> Optional[Dict[str, Any]]:
    """Order header card when the query is exactly the first row's order number."""
    if not query or not query.strip() or not rows:
        return None
    first = rows[0]
    if first.label("order_number") != query.strip():
        return None
    return {
        "order_number": first.order_number,
        "order_date": first.order_date,
        "customer_name": first.customer_name,
        "city": first.city,
        "branch": first.branch,
        "order_type": first.order_type,
        "kashrut": first.kashrut,
        "customer_type": first.customer_type,
    }
