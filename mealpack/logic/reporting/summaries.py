"""Grouped production and packing reports over order lines.

Rows are grouped by one of the GROUP_BY_FIELDS selectors in first-encounter
order. Order-level meal counts (total / allergenic / vegetarian) repeat on
every line of an order, so the production report reads them from the first
line of each order only.
"""
import logging
from typing import Dict, Iterable, List, Union

from mealpack.domain.OrderLine import OrderLine, OptimizationStatus
from mealpack.domain.Summary import ProductionSummary, PackingSummary
from mealpack.utilities.constants import (
    GROUP_BY_FIELDS, DEFAULT_GROUP_BY, NO_VALUE_LABEL, REPORT_PRODUCTION, REPORT_PACKING
)

logger = logging.getLogger(__name__)

__all__ = ["group_field", "group_rows", "production_summary", "packing_summary", "aggregate"]


def group_field(group_key: str) -> str:
    """OrderLine attribute for a grouping selector (unknown selectors fall back to SKU)."""
    field = GROUP_BY_FIELDS.get(group_key)
    if field is None:
        logger.warning(f"Unknown grouping '{group_key}', grouping by {DEFAULT_GROUP_BY}")
        field = GROUP_BY_FIELDS[DEFAULT_GROUP_BY]
    return field


def group_rows(rows: Iterable[OrderLine], group_key: str) -> Dict[str, List[OrderLine]]:
    field = group_field(group_key)
    groups: Dict[str, List[OrderLine]] = {}
    for row in rows:
        key = row.label(field) or NO_VALUE_LABEL
        groups.setdefault(key, []).append(row)
    return groups


def _first_line_per_order(rows: List[OrderLine]) -> List[OrderLine]:
    firsts: Dict[str, OrderLine] = {}
    for row in rows:
        firsts.setdefault(row.label("order_number"), row)
    return list(firsts.values())


def production_summary(rows: Iterable[OrderLine], group_key: str) -> List[ProductionSummary]:
    summaries = []
    for label, group in group_rows(rows, group_key).items():
        summary = ProductionSummary(label)
        for row in group:
            summary.total_quantity += row.quantity_value()
            summary.total_meals_per_line += row.meals_per_line_value()
        for first in _first_line_per_order(group):
            summary.total_meals_today += first.total_meals_value()
            summary.total_allergenic += first.allergenic_meals_value()
            summary.total_vegetarian += first.vegetarian_meals_value()
        summaries.append(summary)
    return summaries


def packing_summary(rows: Iterable[OrderLine], group_key: str) -> List[PackingSummary]:
    summaries = []
    for label, group in group_rows(rows, group_key).items():
        summary = PackingSummary(label)
        for row in group:
            derived = row.derived
            if derived is not None:
                summary.total_packs_a += derived.packs_a
                summary.total_packs_b += derived.packs_b
                summary.total_overage += derived.overage
                if derived.status == OptimizationStatus.NO_SOLUTION:
                    summary.no_solution_count += 1
            if row.is_tray_packed():
                summary.total_trays += row.container_count_value()
            else:
                summary.total_containers += row.container_count_value()
        summaries.append(summary)
    return summaries


def aggregate(rows: Iterable[OrderLine], group_key: str,
              report_kind: str) -> List[Union[ProductionSummary, PackingSummary]]:
    if report_kind == REPORT_PRODUCTION:
        return production_summary(rows, group_key)
    if report_kind == REPORT_PACKING:
        return packing_summary(rows, group_key)
    raise ValueError(f"Unknown report kind: {report_kind}")
