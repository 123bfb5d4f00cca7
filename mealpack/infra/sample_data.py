"""Demonstration order workbook.

Covers the interesting cases: an exact split, a count that needs overage,
a multi-line order, tray packing and a missing units-per-pack value.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from mealpack.utilities.constants import COLUMNS, TRAY_PACKING_METHOD

logger = logging.getLogger(__name__)

_C = COLUMNS

SAMPLE_ROWS = [
    {_C["order_number"]: "1001", _C["order_date"]: "2025-01-05", _C["customer_number"]: "C-17",
     _C["customer_name"]: "גן חובה אלון", _C["phone"]: "050-1234567", _C["customer_type"]: "גן",
     _C["kashrut"]: "רגיל", _C["city"]: "חיפה", _C["branch"]: "צפון", _C["order_type"]: "משלוח",
     _C["sku"]: "501", _C["product_description"]: "שניצל עוף", _C["category"]: "עיקריות",
     _C["department"]: "בשר", _C["quantity"]: 35, _C["units_per_pack"]: 7,
     _C["packing_method"]: "מגשים", _C["container_count"]: 4, _C["container_code"]: "M7",
     _C["meals_per_line"]: 35, _C["total_meals"]: 60, _C["allergenic_meals"]: 2, _C["vegetarian_meals"]: 5},
    {_C["order_number"]: "1001", _C["order_date"]: "2025-01-05", _C["customer_number"]: "C-17",
     _C["customer_name"]: "גן חובה אלון", _C["phone"]: "050-1234567", _C["customer_type"]: "גן",
     _C["kashrut"]: "רגיל", _C["city"]: "חיפה", _C["branch"]: "צפון", _C["order_type"]: "משלוח",
     _C["sku"]: "612", _C["product_description"]: "אורז", _C["category"]: "תוספות",
     _C["department"]: "מטבח חם", _C["quantity"]: 11, _C["units_per_pack"]: 1,
     _C["packing_method"]: "מגשים", _C["container_count"]: 2, _C["container_code"]: "M5",
     _C["meals_per_line"]: 25, _C["total_meals"]: 60, _C["allergenic_meals"]: 2, _C["vegetarian_meals"]: 5},
    {_C["order_number"]: "1002", _C["order_date"]: "2025-01-05", _C["customer_number"]: "C-23",
     _C["customer_name"]: "בית ספר הדר", _C["phone"]: "052-7654321", _C["customer_type"]: "בית ספר",
     _C["kashrut"]: "מהדרין", _C["city"]: "תל אביב", _C["branch"]: "מרכז", _C["order_type"]: "איסוף",
     _C["sku"]: "501", _C["product_description"]: "שניצל עוף", _C["category"]: "עיקריות",
     _C["department"]: "בשר", _C["quantity"]: 84, _C["units_per_pack"]: 1,
     _C["packing_method"]: TRAY_PACKING_METHOD, _C["container_count"]: 12, _C["container_code"]: "T1",
     _C["meals_per_line"]: 84, _C["total_meals"]: 84, _C["allergenic_meals"]: 0, _C["vegetarian_meals"]: 10},
    {_C["order_number"]: "1003", _C["order_date"]: "2025-01-06", _C["customer_number"]: "C-31",
     _C["customer_name"]: "מעון רימון", _C["phone"]: "054-1112233", _C["customer_type"]: "מעון",
     _C["kashrut"]: "רגיל", _C["city"]: "חיפה", _C["branch"]: "צפון", _C["order_type"]: "משלוח",
     _C["sku"]: "733", _C["product_description"]: "קציצות ירק", _C["category"]: "עיקריות",
     _C["department"]: "צמחוני", _C["quantity"]: 20, _C["units_per_pack"]: "",
     _C["packing_method"]: "מגשים", _C["container_count"]: 3, _C["container_code"]: "M5",
     _C["meals_per_line"]: 20, _C["total_meals"]: 20, _C["allergenic_meals"]: 1, _C["vegetarian_meals"]: 20},
]


def build_sample_workbook(destination: Optional[Union[str, Path]] = None):
    """Write the sample orders workbook; returns bytes, or the path when ``destination`` is given."""
    frame = pd.DataFrame.from_records(SAMPLE_ROWS)
    target = destination if destination is not None else io.BytesIO()
    frame.to_excel(target, index=False, engine='openpyxl')
    logger.info(f"Sample workbook with {len(SAMPLE_ROWS)} rows created")
    if destination is None:
        return target.getvalue()
    return Path(destination)
