"""Spreadsheet ingestion and export (pandas + openpyxl).

read_order_rows turns the first sheet of an order workbook into raw row
mappings keyed by header; export_* write enriched rows and report tables back
out as .xlsx.
"""
import io
import logging
from datetime import date
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Optional, Union

import pandas as pd

from mealpack.domain.OrderLine import OrderLine
from mealpack.utilities.constants import EXPORT_SHEET_NAME, EXPORT_FILE_PREFIX

logger = logging.getLogger(__name__)

__all__ = ["EmptyWorkbookError", "read_order_rows", "export_filename",
           "export_rows_to_excel", "summaries_to_frame", "export_reports_to_excel"]


class EmptyWorkbookError(ValueError):
    """The workbook has no header row or no data rows."""


def read_order_rows(source: Union[str, Path, BinaryIO, bytes]) -> List[Dict[str, Any]]:
    """Read the first sheet of an order workbook.

    Header names are stripped, columns without a header are dropped and empty
    cells become ''. Values are otherwise returned as stored in the sheet.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    df = pd.read_excel(source, sheet_name=0, dtype=object, engine='openpyxl')
    df.columns = [str(c).strip() for c in df.columns]
    keep = [c for c in df.columns if c and not c.startswith('Unnamed:')]
    df = df[keep]
    if df.empty or not keep:
        raise EmptyWorkbookError("The workbook is empty or has no data rows")
    df = df.astype(object).where(pd.notna(df), '')
    rows = df.to_dict(orient='records')
    logger.info(f"Read {len(rows)} rows with {len(keep)} columns from workbook")
    return rows


def export_filename(extension: str, day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"{EXPORT_FILE_PREFIX}_{day.isoformat()}.{extension}"


def _write(frames: Dict[str, pd.DataFrame], destination: Optional[Union[str, Path]]):
    target = destination if destination is not None else io.BytesIO()
    with pd.ExcelWriter(target, engine='openpyxl') as writer:
        for sheet_name, frame in frames.items():
            frame.to_excel(writer, sheet_name=sheet_name, index=False)
    if destination is None:
        return target.getvalue()
    return Path(destination)


def export_rows_to_excel(rows: Iterable[OrderLine], destination: Optional[Union[str, Path]] = None):
    """Write enriched rows to a single-sheet workbook.

    Returns the workbook bytes, or the written path when ``destination`` is given.
    """
    records = [row.to_row() for row in rows]
    if not records:
        raise ValueError("No rows to export")
    frame = pd.DataFrame.from_records(records)
    logger.info(f"Exporting {len(records)} rows to Excel")
    return _write({EXPORT_SHEET_NAME: frame}, destination)


def summaries_to_frame(summaries: Iterable[Any], rounded: bool = True) -> pd.DataFrame:
    """Report rows as a table, rounded for display by default."""
    return pd.DataFrame.from_records([s.to_dict(rounded=rounded) for s in summaries])


def export_reports_to_excel(production: Iterable[Any], packing: Iterable[Any],
                            destination: Optional[Union[str, Path]] = None):
    """Both report tables in one workbook, one sheet each."""
    frames = {
        "production": summaries_to_frame(production),
        "packing": summaries_to_frame(packing),
    }
    return _write(frames, destination)
