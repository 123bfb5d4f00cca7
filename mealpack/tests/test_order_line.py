import unittest
from mealpack.domain.OrderLine import OrderLine, OptimizationStatus
from mealpack.domain.OrderBook import OrderBook
from mealpack.logic.packing.derived_fields import compute_derived_fields
from mealpack.utilities.constants import COLUMNS, DERIVED_COLUMNS
from mealpack.utilities.numbers import to_number, round_half_up


class TestOrderLine(unittest.TestCase):

    def test_from_dict_with_headers(self):
        row = OrderLine.from_dict({"הזמנה": "1001", 'מק"ט': "501", "כמות מוצר": "35",
                                   "פרמטר 8 למוצר": 7, " הערות ": "ללא בוטנים"})
        self.assertEqual(row.order_number, "1001")
        self.assertEqual(row.sku, "501")
        self.assertEqual(row.quantity_value(), 35)
        self.assertEqual(row.units_per_pack_value(), 7)
        self.assertEqual(row.extra, {"הערות": "ללא בוטנים"})
        self.assertEqual(row.city, "")

    def test_from_dict_with_attribute_names(self):
        row = OrderLine.from_dict({"order_number": "7", "quantity": None, "packing_method": None})
        self.assertEqual(row.quantity_value(), 0)
        self.assertEqual(row.packing_method, "")

    def test_unknown_keyword_rejected(self):
        with self.assertRaises(TypeError):
            OrderLine(colour="red")

    def test_to_row_keeps_extra_and_derived_columns(self):
        row = OrderLine.from_dict({"הזמנה": "1", "כמות מוצר": 35, "פרמטר 8 למוצר": 7, "הערות": "x"})
        compute_derived_fields(row, False)
        flat = row.to_row()
        self.assertEqual(flat["הערות"], "x")
        self.assertEqual(flat[COLUMNS["quantity"]], 35)
        self.assertEqual(flat[DERIVED_COLUMNS["status"]], OptimizationStatus.EXACT.label)
        self.assertEqual(flat[DERIVED_COLUMNS["packs_a"]], 1)
        self.assertEqual(flat[DERIVED_COLUMNS["total_packs"]], 1)

    def test_to_dict(self):
        row = OrderLine.from_dict({"sku": "9"})
        self.assertIsNone(row.to_dict()["derived"])
        compute_derived_fields(row, False)
        self.assertEqual(row.to_dict()["derived"]["status"], "missing-divisor")


class TestNumbers(unittest.TestCase):

    def test_to_number(self):
        self.assertEqual(to_number("12.5"), 12.5)
        self.assertEqual(to_number("1,200"), 1200)
        self.assertEqual(to_number(""), 0)
        self.assertEqual(to_number(None), 0)
        self.assertEqual(to_number("abc"), 0)
        self.assertEqual(to_number(float("nan")), 0)
        self.assertEqual(to_number(float("inf")), 0)
        self.assertEqual(to_number(True), 0)

    def test_to_number_huge_integer(self):
        self.assertEqual(to_number(10 ** 400), 0)
        self.assertEqual(to_number(-10 ** 400), 0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertEqual(round_half_up(-2.5), -2)


class TestOrderBook(unittest.TestCase):

    def setUp(self):
        self.raw = [{"sku": "a", "quantity": 11, "units_per_pack": 1},
                    {"sku": "b", "quantity": 35, "units_per_pack": 7}]

    def test_load_computes_rows(self):
        book = OrderBook().load(self.raw)
        self.assertEqual(len(book), 2)
        self.assertEqual(book.get_rows()[0].derived.status, OptimizationStatus.NO_SOLUTION)

    def test_policy_change_recomputes(self):
        book = OrderBook().load(self.raw)
        book.set_allow_overage(True)
        self.assertTrue(book.allow_overage)
        self.assertEqual(book.get_rows()[0].derived.status, OptimizationStatus.OVERAGE)

    def test_load_replaces_rows(self):
        book = OrderBook(allow_overage=True).load(self.raw)
        book.load(self.raw[1:])
        self.assertEqual([r.sku for r in book.get_rows()], ["b"])
        self.assertFalse(OrderBook().load([]).get_rows())


if __name__ == '__main__':
    unittest.main()
