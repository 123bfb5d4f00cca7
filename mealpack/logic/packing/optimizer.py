"""Pack decomposition optimizer.

Splits a meal count into packs of two fixed sizes (PACK_SIZE_A / PACK_SIZE_B).
Provides try_exact(n) and optimize(target, allow_overage).
"""
import logging
from typing import Optional, Tuple

from mealpack.domain.PackResult import PackResult
from mealpack.utilities.constants import PACK_SIZE_A, PACK_SIZE_B, OVERAGE_SEARCH_LIMIT

logger = logging.getLogger(__name__)

__all__ = ["try_exact", "optimize"]


def try_exact(n: int, sizes: Tuple[int, int] = (PACK_SIZE_A, PACK_SIZE_B)) -> Optional[PackResult]:
    """Exact decomposition of ``n`` with the fewest size-A packs, or None.

    Scans the size-A count upward from 0 and returns the first one whose
    remainder divides evenly into size-B packs.
    """
    size_a, size_b = sizes
    for a in range(0, n // size_a + 1):
        remainder = n - size_a * a
        if remainder % size_b == 0:
            return PackResult(a, remainder // size_b, exact=True, overage=0)
    return None


def optimize(target: int, allow_overage: bool = False, *,
             sizes: Tuple[int, int] = (PACK_SIZE_A, PACK_SIZE_B),
             search_limit: int = OVERAGE_SEARCH_LIMIT) -> Optional[PackResult]:
    """Decompose ``target`` meals into packs.

    Args:
        target: Meal count to pack (non-negative integer).
        allow_overage: When no exact decomposition exists, accept the smallest
            larger count (up to ``target + search_limit``) that has one.
        sizes: The two pack sizes.
        search_limit: How far above the target the overage scan goes.

    Returns:
        PackResult (exact, or inexact with ``overage = n - target``) or None
        when no decomposition was found.
    """
    exact = try_exact(target, sizes)
    logger.debug(f"Exact decomposition for {target}: {exact}")
    if exact:
        return exact

    if not allow_overage:
        return None

    for n in range(target + 1, target + search_limit + 1):
        solution = try_exact(n, sizes)
        if solution:
            logger.debug(f"Decomposition with overage for {target}: {n} -> {solution}")
            return solution.with_overage(n - target)

    logger.debug(f"No decomposition for {target} up to {target + search_limit}")
    return None
