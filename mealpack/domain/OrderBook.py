"""OrderBook aggregate: the loaded order lines together with the overage policy they were computed under."""
import logging
from typing import Any, Dict, Iterable, List

from mealpack.domain.OrderLine import OrderLine
from mealpack.logic.packing.derived_fields import recompute_all

logger = logging.getLogger(__name__)


class OrderBook:
    def __init__(self, allow_overage: bool = False):
        self.rows: List[OrderLine] = []
        self.allow_overage = allow_overage

    def load(self, raw_rows: Iterable[Dict[str, Any]]):
        '''
        Replaces the whole row set with freshly parsed rows and computes their packing.
        '''
        self.rows = recompute_all((OrderLine.from_dict(r) for r in raw_rows), self.allow_overage)
        logger.info(f"Loaded {len(self.rows)} order lines")
        return self

    def set_allow_overage(self, allow_overage: bool):
        '''
        Changes the overage policy; every row is recomputed when it actually changes.
        '''
        allow_overage = bool(allow_overage)
        if allow_overage != self.allow_overage:
            self.allow_overage = allow_overage
            self.recalculate()
        return self

    def recalculate(self):
        recompute_all(self.rows, self.allow_overage)
        return self

    def get_rows(self) -> List[OrderLine]:
        return self.rows

    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        return f"OrderBook({len(self.rows)} lines, allow_overage={self.allow_overage})"

    __repr__ = __str__
