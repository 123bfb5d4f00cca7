import io
import tempfile
import unittest
from pathlib import Path

import pandas as pd

from mealpack.domain.OrderBook import OrderBook
from mealpack.infra.excel_io import (
    EmptyWorkbookError, read_order_rows, export_rows_to_excel, export_reports_to_excel, export_filename
)
from mealpack.infra.pdf_utils import generate_orders_pdf
from mealpack.infra.sample_data import build_sample_workbook, SAMPLE_ROWS
from mealpack.logic.reporting.summaries import production_summary, packing_summary
from mealpack.utilities.constants import COLUMNS, DERIVED_COLUMNS, EXPORT_SHEET_NAME


class TestExcelIO(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_read_sample_workbook(self):
        path = build_sample_workbook(self.tmp / "sample.xlsx")
        rows = read_order_rows(path)
        self.assertEqual(len(rows), len(SAMPLE_ROWS))
        self.assertEqual(set(rows[0]), set(SAMPLE_ROWS[0]))
        self.assertEqual(rows[3][COLUMNS["units_per_pack"]], "")

    def test_blank_headers_dropped_and_cells_defaulted(self):
        frame = pd.DataFrame({" הזמנה ": ["1", "2"], "": ["x", "y"], "כמות מוצר": [5, None]})
        buf = io.BytesIO()
        frame.to_excel(buf, index=False)
        rows = read_order_rows(buf.getvalue())
        self.assertEqual(rows, [{"הזמנה": "1", "כמות מוצר": 5}, {"הזמנה": "2", "כמות מוצר": ""}])

    def test_empty_workbook(self):
        buf = io.BytesIO()
        pd.DataFrame(columns=["הזמנה"]).to_excel(buf, index=False)
        with self.assertRaises(EmptyWorkbookError):
            read_order_rows(buf.getvalue())

    def test_sample_end_to_end(self):
        book = OrderBook().load(read_order_rows(build_sample_workbook()))
        statuses = [r.derived.status.value for r in book.get_rows()]
        self.assertEqual(statuses, ["exact", "no-solution", "skipped-tray-packing", "missing-divisor"])

        [north, center] = production_summary(book.get_rows(), "branch")
        self.assertEqual(north.to_dict(rounded=True), {
            "label": "צפון", "total_quantity": 66, "total_meals_per_line": 80,
            "total_meals_today": 80, "total_allergenic": 3, "total_vegetarian": 25,
        })
        self.assertEqual(center.total_meals_today, 84)

        packing = {s.label: s for s in packing_summary(book.get_rows(), "sku")}
        self.assertEqual(list(packing), ["501", "612", "733"])
        self.assertEqual(packing["501"].total_containers, 4)
        self.assertEqual(packing["501"].total_trays, 12)
        self.assertEqual(packing["612"].no_solution_count, 1)

    def test_export_rows(self):
        book = OrderBook().load(read_order_rows(build_sample_workbook()))
        content = export_rows_to_excel(book.get_rows())
        frame = pd.read_excel(io.BytesIO(content), sheet_name=EXPORT_SHEET_NAME)
        self.assertEqual(len(frame), 4)
        self.assertEqual(frame[DERIVED_COLUMNS["status"]].tolist()[0], "מדויק")
        self.assertIn(COLUMNS["sku"], frame.columns)

        written = export_rows_to_excel(book.get_rows(), self.tmp / "out.xlsx")
        self.assertTrue(written.exists())

    def test_export_nothing(self):
        with self.assertRaises(ValueError):
            export_rows_to_excel([])

    def test_export_reports(self):
        rows = OrderBook().load(SAMPLE_ROWS).get_rows()
        content = export_reports_to_excel(production_summary(rows, "sku"), packing_summary(rows, "branch"))
        sheets = pd.read_excel(io.BytesIO(content), sheet_name=None)
        self.assertEqual(set(sheets), {"production", "packing"})
        self.assertEqual(sheets["packing"]["label"].tolist(), ["צפון", "מרכז"])

    def test_export_filename(self):
        self.assertTrue(export_filename("xlsx").endswith(".xlsx"))

    def test_pdf(self):
        rows = OrderBook().load(SAMPLE_ROWS).get_rows()
        self.assertTrue(generate_orders_pdf(rows).startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
