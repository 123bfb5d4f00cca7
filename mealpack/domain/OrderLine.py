"""OrderLine domain entity: one spreadsheet row of an order, plus its derived packing fields."""
from enum import Enum
from typing import Any, Dict, Optional

from mealpack.utilities.constants import COLUMNS, DERIVED_COLUMNS, TRAY_PACKING_METHOD
from mealpack.utilities.numbers import to_number, as_label


class OptimizationStatus(str, Enum):
    EXACT = "exact"
    OVERAGE = "overage"
    NO_SOLUTION = "no-solution"
    SKIPPED_TRAY_PACKING = "skipped-tray-packing"
    MISSING_DIVISOR = "missing-divisor"

    @property
    def label(self) -> str:
        '''Display text used in exported sheets.'''
        return STATUS_LABELS[self]


STATUS_LABELS = {
    OptimizationStatus.EXACT: "מדויק",
    OptimizationStatus.OVERAGE: "עודף",
    OptimizationStatus.NO_SOLUTION: "אין פתרון",
    OptimizationStatus.SKIPPED_TRAY_PACKING: "דילג (חמגשיות)",
    OptimizationStatus.MISSING_DIVISOR: "ללא פרמטר 8",
}

# header -> attribute, for rows keyed by the spreadsheet headers
_HEADER_TO_FIELD = {header: field for field, header in COLUMNS.items()}


class DerivedFields:
    def __init__(self, target_meals: float = 0.0, target_meals_floor: int = 0,
                 packs_a: int = 0, packs_b: int = 0, overage: int = 0,
                 status: OptimizationStatus = OptimizationStatus.NO_SOLUTION,
                 container_count: float = 0.0, container_type: str = "", packing_method: str = ""):
        self.target_meals = target_meals
        self.target_meals_floor = target_meals_floor
        self.packs_a = packs_a
        self.packs_b = packs_b
        self.overage = overage
        self.status = status
        self.container_count = container_count
        self.container_type = container_type
        self.packing_method = packing_method

    @property
    def total_packs(self) -> int:
        return self.packs_a + self.packs_b

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivedFields):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return (f"{self.status.value}: target {self.target_meals:g} -> "
                f"{self.packs_a}x A + {self.packs_b}x B (overage {self.overage})")

    __repr__ = __str__

    def to_dict(self):
        return {
            "target_meals": self.target_meals,
            "target_meals_floor": self.target_meals_floor,
            "packs_a": self.packs_a,
            "packs_b": self.packs_b,
            "total_packs": self.total_packs,
            "overage": self.overage,
            "status": self.status.value,
            "container_count": self.container_count,
            "container_type": self.container_type,
            "packing_method": self.packing_method,
        }

    def to_columns(self):
        '''Derived values keyed by their spreadsheet headers (status as display text).'''
        values = self.to_dict()
        values["status"] = self.status.label
        return {DERIVED_COLUMNS[k]: v for k, v in values.items()}


class OrderLine:
    def __init__(self, order_number: Any = "", sku: Any = "", quantity: Any = 0, units_per_pack: Any = 0,
                 packing_method: str = "", extra: Optional[Dict[str, Any]] = None, **fields: Any):
        self.order_number = order_number
        self.sku = sku
        self.quantity = quantity
        self.units_per_pack = units_per_pack
        self.packing_method = packing_method
        for name in COLUMNS:
            if not hasattr(self, name):
                setattr(self, name, fields.pop(name, ""))
        if fields:
            raise TypeError(f"Unknown order line fields: {', '.join(sorted(fields))}")
        # Business columns the core does not use, passed through to exports
        self.extra = dict(extra) if extra else {}
        self.derived: Optional[DerivedFields] = None

    # --- Numeric readers (blank / garbled cells count as 0) ---------------
    def quantity_value(self) -> float: return to_number(self.quantity)
    def units_per_pack_value(self) -> float: return to_number(self.units_per_pack)
    def container_count_value(self) -> float: return to_number(self.container_count)
    def meals_per_line_value(self) -> float: return to_number(self.meals_per_line)
    def total_meals_value(self) -> float: return to_number(self.total_meals)
    def allergenic_meals_value(self) -> float: return to_number(self.allergenic_meals)
    def vegetarian_meals_value(self) -> float: return to_number(self.vegetarian_meals)

    def is_tray_packed(self) -> bool:
        return as_label(self.packing_method) == TRAY_PACKING_METHOD

    def label(self, field: str) -> str:
        '''Text value of an attribute, as used for grouping and filtering.'''
        return as_label(getattr(self, field, ""))

    def __str__(self) -> str:
        return f"Order {self.order_number} - {self.sku} x {self.quantity}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an OrderLine from a raw row keyed by spreadsheet headers or attribute names.

        Keys that are neither are kept in ``extra``.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        fields: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in d.items():
            name = str(key).strip()
            if name in COLUMNS:
                fields[name] = value
            elif name in _HEADER_TO_FIELD:
                fields[_HEADER_TO_FIELD[name]] = value
            else:
                extra[name] = value
        for name in COLUMNS:
            value = fields.get(name)
            fields[name] = "" if value is None else value
        return OrderLine(extra=extra, **fields)

    def to_dict(self):
        '''Attribute-keyed view of the row (derived values nested under "derived").'''
        data = {name: getattr(self, name) for name in COLUMNS}
        data["extra"] = dict(self.extra)
        data["derived"] = self.derived.to_dict() if self.derived else None
        return data

    def to_row(self):
        '''Header-keyed flat row for spreadsheet export: raw columns, pass-through columns, derived columns.'''
        row = {header: getattr(self, name) for name, header in COLUMNS.items()}
        row.update(self.extra)
        if self.derived:
            row.update(self.derived.to_columns())
        return row
