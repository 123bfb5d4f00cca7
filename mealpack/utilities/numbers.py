"""Numeric helpers shared by the domain and the reports.

Spreadsheet cells arrive as strings, numbers, blanks or NaN. Every numeric
reader in the project goes through ``to_number`` so that a missing or garbled
cell silently counts as zero.
"""
import math
from typing import Any


def to_number(value: Any) -> float:
    """Return ``value`` as a finite float, or 0.0 when it cannot be read as one."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        text = str(value).strip().replace(',', '')
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (display rounding)."""
    return int(math.floor(to_number(value) + 0.5))


def as_label(value: Any) -> str:
    """Text form of a cell used as a grouping or filter key ('' when blank)."""
    if value is None:
        return ''
    if isinstance(value, float):
        if math.isnan(value):
            return ''
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


__all__ = ['to_number', 'round_half_up', 'as_label']
