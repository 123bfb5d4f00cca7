"""PackResult domain entity: decomposition of a meal count into size A / size B packs."""


class PackResult:
    def __init__(self, packs_a: int = 0, packs_b: int = 0, exact: bool = True, overage: int = 0):
        self.packs_a = packs_a
        self.packs_b = packs_b
        self.exact = exact
        self.overage = overage if not exact else 0

    @property
    def total(self) -> int:
        return self.packs_a + self.packs_b

    def with_overage(self, overage: int) -> "PackResult":
        '''Returns a copy marked as inexact, covering ``overage`` meals above the target.'''
        return PackResult(self.packs_a, self.packs_b, exact=False, overage=overage)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackResult):
            return NotImplemented
        return (self.packs_a, self.packs_b, self.exact, self.overage) == \
            (other.packs_a, other.packs_b, other.exact, other.overage)

    def __str__(self) -> str:
        kind = "exact" if self.exact else f"overage {self.overage}"
        return f"PackResult(a={self.packs_a}, b={self.packs_b}, {kind})"

    __repr__ = __str__
