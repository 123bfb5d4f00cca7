"""Per-row derived packing fields.

compute_derived_fields(row, allow_overage) fills ``row.derived``;
recompute_all(rows, allow_overage) is the full pass run whenever data is
loaded or the overage policy changes.
"""
import logging
import math
from typing import Iterable, List

from mealpack.domain.OrderLine import OrderLine, DerivedFields, OptimizationStatus
from mealpack.logic.packing.optimizer import optimize
from mealpack.utilities.numbers import as_label

logger = logging.getLogger(__name__)

__all__ = ["compute_derived_fields", "recompute_all"]


def compute_derived_fields(row: OrderLine, allow_overage: bool) -> DerivedFields:
    quantity = row.quantity_value()
    units_per_pack = row.units_per_pack_value()

    derived = DerivedFields(
        container_count=row.container_count_value(),
        container_type=as_label(row.container_code),
        packing_method=as_label(row.packing_method),
    )

    if units_per_pack <= 0 or row.is_tray_packed():
        derived.status = (OptimizationStatus.SKIPPED_TRAY_PACKING if row.is_tray_packed()
                          else OptimizationStatus.MISSING_DIVISOR)
        row.derived = derived
        return derived

    target = quantity / units_per_pack
    target_floor = math.floor(target)
    derived.target_meals = target
    derived.target_meals_floor = target_floor

    result = None
    if target_floor > 0:
        result = optimize(target_floor, allow_overage)

    # Second, independent attempt on the rounded-up target
    if result is None and allow_overage and target > 0:
        result = optimize(math.ceil(target), True)

    if result is not None:
        derived.packs_a = result.packs_a
        derived.packs_b = result.packs_b
        derived.overage = result.overage
        if result.exact:
            derived.status = OptimizationStatus.EXACT
        elif result.overage > 0:
            derived.status = OptimizationStatus.OVERAGE
        else:
            derived.status = OptimizationStatus.NO_SOLUTION
    else:
        derived.status = OptimizationStatus.NO_SOLUTION

    logger.debug(f"{row.sku}: quantity={quantity:g}, units_per_pack={units_per_pack:g}, "
                 f"target={target:g} -> {derived}")
    row.derived = derived
    return derived


def recompute_all(rows: Iterable[OrderLine], allow_overage: bool) -> List[OrderLine]:
    """Recompute derived fields for every row under one overage policy."""
    rows = list(rows)
    for row in rows:
        compute_derived_fields(row, allow_overage)
    logger.info(f"Recomputed packing for {len(rows)} rows (allow_overage={allow_overage})")
    return rows
