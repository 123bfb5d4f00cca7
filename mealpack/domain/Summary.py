"""Report rows: per-group production and packing totals.

Totals accumulate unrounded; ``to_dict(rounded=True)`` is the presentation form.
"""
from mealpack.utilities.numbers import round_half_up


class ProductionSummary:
    FIELDS = ("total_quantity", "total_meals_per_line", "total_meals_today",
              "total_allergenic", "total_vegetarian")

    def __init__(self, label: str, total_quantity: float = 0.0, total_meals_per_line: float = 0.0,
                 total_meals_today: float = 0.0, total_allergenic: float = 0.0, total_vegetarian: float = 0.0):
        self.label = label
        self.total_quantity = total_quantity
        self.total_meals_per_line = total_meals_per_line
        self.total_meals_today = total_meals_today
        self.total_allergenic = total_allergenic
        self.total_vegetarian = total_vegetarian

    def __str__(self) -> str:
        return f"{self.label}: quantity {self.total_quantity:g}, meals today {self.total_meals_today:g}"

    __repr__ = __str__

    def to_dict(self, rounded: bool = False):
        data = {"label": self.label}
        for name in self.FIELDS:
            value = getattr(self, name)
            data[name] = round_half_up(value) if rounded else value
        return data


class PackingSummary:
    FIELDS = ("total_packs_a", "total_packs_b", "total_packs", "total_containers",
              "total_trays", "no_solution_count", "total_overage")

    def __init__(self, label: str, total_packs_a: float = 0, total_packs_b: float = 0,
                 total_containers: float = 0.0, total_trays: float = 0.0,
                 no_solution_count: int = 0, total_overage: float = 0):
        self.label = label
        self.total_packs_a = total_packs_a
        self.total_packs_b = total_packs_b
        self.total_containers = total_containers
        self.total_trays = total_trays
        self.no_solution_count = no_solution_count
        self.total_overage = total_overage

    @property
    def total_packs(self):
        return self.total_packs_a + self.total_packs_b

    def __str__(self) -> str:
        return f"{self.label}: {self.total_packs} packs, {self.no_solution_count} without solution"

    __repr__ = __str__

    def to_dict(self, rounded: bool = False):
        data = {"label": self.label}
        for name in self.FIELDS:
            value = getattr(self, name)
            data[name] = round_half_up(value) if rounded else value
        return data
