"""Scalar value parsing shared by type inference and statistics."""

from __future__ import annotations

import math
import warnings

import pandas as pd

from tabprobe.core.models import CellValue

BOOLEAN_LITERALS = frozenset({"true", "false"})
# pandas resolves these to the current clock rather than a calendar date
RELATIVE_DATE_KEYWORDS = frozenset({"now", "today"})


def parse_number(value: CellValue) -> float | None:
    """Parse a cell as a finite float.

    Accepts int/float cells and numeric strings (surrounding whitespace
    ignored). Booleans, blank strings, NaN and infinities are not numbers.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        text = value.strip()
        # float() accepts digit separators and non-ASCII digits; tabular text uses neither
        if not text or "_" in text or not text.isascii():
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def is_boolean(value: CellValue) -> bool:
    """True for boolean cells and case-insensitive "true"/"false" text."""
    if isinstance(value, bool):
        return True
    return isinstance(value, str) and value.lower() in BOOLEAN_LITERALS


def is_date(value: CellValue) -> bool:
    """True when a text cell parses to a valid calendar date/time."""
    if not isinstance(value, str) or not value.strip():
        return False
    if value.strip().lower() in RELATIVE_DATE_KEYWORDS:
        return False
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            parsed = pd.to_datetime(value, errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return False
    return not pd.isna(parsed)
