import unittest
from mealpack.domain.OrderLine import OrderLine, OptimizationStatus
from mealpack.logic.packing.derived_fields import compute_derived_fields, recompute_all
from mealpack.utilities.constants import TRAY_PACKING_METHOD


def make_row(quantity, units_per_pack, packing_method="מגשים", **fields):
    return OrderLine.from_dict({"sku": "501", "quantity": quantity, "units_per_pack": units_per_pack,
                                "packing_method": packing_method, **fields})


class TestComputeDerivedFields(unittest.TestCase):

    def test_exact_decomposition(self):
        row = make_row(35, 7)
        derived = compute_derived_fields(row, False)
        self.assertIs(row.derived, derived)
        self.assertEqual(derived.target_meals, 5)
        self.assertEqual(derived.target_meals_floor, 5)
        self.assertEqual((derived.packs_a, derived.packs_b, derived.overage), (1, 0, 0))
        self.assertEqual(derived.status, OptimizationStatus.EXACT)

    def test_no_solution_without_overage(self):
        derived = compute_derived_fields(make_row(11, 1), False)
        self.assertEqual(derived.status, OptimizationStatus.NO_SOLUTION)
        self.assertEqual((derived.packs_a, derived.packs_b, derived.total_packs, derived.overage), (0, 0, 0, 0))
        self.assertEqual(derived.target_meals, 11)

    def test_overage_when_allowed(self):
        derived = compute_derived_fields(make_row(11, 1), True)
        self.assertEqual(derived.status, OptimizationStatus.OVERAGE)
        self.assertEqual((derived.packs_a, derived.packs_b, derived.overage), (1, 1, 1))
        self.assertEqual(derived.total_packs, 2)

    def test_tray_packing_is_skipped(self):
        for quantity, units in ((35, 7), (0, 0), ("x", "")):
            derived = compute_derived_fields(make_row(quantity, units, TRAY_PACKING_METHOD), True)
            self.assertEqual(derived.status, OptimizationStatus.SKIPPED_TRAY_PACKING)
            self.assertEqual(derived.target_meals, 0)
            self.assertEqual(derived.total_packs, 0)

    def test_missing_divisor(self):
        for units in ("", None, "abc", 0, -2):
            derived = compute_derived_fields(make_row(35, units), True)
            self.assertEqual(derived.status, OptimizationStatus.MISSING_DIVISOR, units)
            self.assertEqual(derived.target_meals, 0)
            self.assertEqual(derived.total_packs, 0)

    def test_non_numeric_quantity_counts_as_zero(self):
        derived = compute_derived_fields(make_row("lots", 7), True)
        self.assertEqual(derived.target_meals, 0)
        self.assertEqual(derived.status, OptimizationStatus.NO_SOLUTION)

    def test_quantity_too_large_for_float_counts_as_zero(self):
        derived = compute_derived_fields(make_row(10 ** 400, 1), True)
        self.assertEqual(derived.target_meals, 0)
        self.assertEqual(derived.status, OptimizationStatus.NO_SOLUTION)

    def test_numeric_strings(self):
        derived = compute_derived_fields(make_row("35", " 7 "), False)
        self.assertEqual(derived.status, OptimizationStatus.EXACT)

    def test_fractional_target_uses_floor(self):
        derived = compute_derived_fields(make_row(25, 2), False)
        self.assertEqual(derived.target_meals, 12.5)
        self.assertEqual(derived.target_meals_floor, 12)
        self.assertEqual((derived.packs_a, derived.packs_b), (1, 1))
        self.assertEqual(derived.status, OptimizationStatus.EXACT)

    def test_ceiling_retry_below_one_meal(self):
        # Half a meal floors to zero; only the rounded-up retry can pack it
        row = make_row(1, 2)
        self.assertEqual(compute_derived_fields(row, False).status, OptimizationStatus.NO_SOLUTION)
        derived = compute_derived_fields(row, True)
        self.assertEqual(derived.status, OptimizationStatus.OVERAGE)
        self.assertEqual((derived.packs_a, derived.packs_b), (1, 0))
        self.assertEqual(derived.overage, 4)
        self.assertEqual(derived.target_meals_floor, 0)

    def test_container_fields_are_copied(self):
        row = make_row(35, 7, container_count="4", container_code="M7")
        derived = compute_derived_fields(row, False)
        self.assertEqual(derived.container_count, 4)
        self.assertEqual(derived.container_type, "M7")
        self.assertEqual(derived.packing_method, "מגשים")

    def test_idempotent(self):
        for allow in (False, True):
            row = make_row(23, 2)
            first = compute_derived_fields(row, allow).to_dict()
            second = compute_derived_fields(row, allow).to_dict()
            self.assertEqual(first, second)


class TestRecomputeAll(unittest.TestCase):

    def test_policy_change_recomputes_every_row(self):
        rows = [make_row(11, 1), make_row(35, 7), make_row(13, 1)]
        recompute_all(rows, False)
        self.assertEqual([r.derived.status for r in rows],
                         [OptimizationStatus.NO_SOLUTION, OptimizationStatus.EXACT, OptimizationStatus.NO_SOLUTION])
        recompute_all(rows, True)
        self.assertEqual([r.derived.status for r in rows],
                         [OptimizationStatus.OVERAGE, OptimizationStatus.EXACT, OptimizationStatus.OVERAGE])
        self.assertEqual([r.derived.overage for r in rows], [1, 0, 1])

    def test_returns_rows_in_order(self):
        rows = [make_row(5, 1, sku="a"), make_row(7, 1, sku="b")]
        self.assertEqual([r.sku for r in recompute_all(iter(rows), False)], ["a", "b"])


if __name__ == '__main__':
    unittest.main()
