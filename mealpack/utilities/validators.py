"""
Input validation schemas using Pydantic for the HTTP API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from mealpack.utilities.constants import FILTER_FIELDS


class RowFilters(BaseModel):
    """Dropdown filters; empty values match every row."""
    branch: Optional[str] = None
    city: Optional[str] = None
    customer_type: Optional[str] = None
    category: Optional[str] = None

    @field_validator('branch', 'city', 'customer_type', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; blank means no filter."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class SettingsInput(BaseModel):
    """Schema for settings updates."""
    allow_overage: bool
    filters: Optional[RowFilters] = None


class OrderRowsInput(BaseModel):
    """Raw order rows posted as JSON, keyed by spreadsheet header or field name."""
    rows: List[Dict[str, Any]] = Field(..., min_length=1)

    @field_validator('rows')
    @classmethod
    def drop_empty_rows(cls, v):
        """Ignore rows with no values at all."""
        rows = [r for r in v if any(val not in (None, '') for val in r.values())]
        if not rows:
            raise ValueError('At least one non-empty row is required')
        return rows


def filters_dict(filters: Optional[RowFilters]) -> Dict[str, str]:
    """Active filters only, keyed as FILTER_FIELDS."""
    if filters is None:
        return {}
    return {k: v for k, v in filters.model_dump().items() if k in FILTER_FIELDS and v}
