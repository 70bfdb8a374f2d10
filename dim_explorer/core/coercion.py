"""
Value coercion for raw node attributes.

Every function here is total: unparsable or absent input degrades to
"missing" (None) instead of raising, and consumers handle missing explicitly.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

MISSING_LABEL = "(no value)"

_DECIMAL_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

# RFC 3339 date or date-time, optional fractional seconds and offset
_ISO_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"([Tt ]\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?([Zz]|[+-]\d{2}:\d{2})?)?$",
    re.ASCII,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY = 86_400_000

# Representable range of datetime (years 1..9999) in epoch milliseconds
_MIN_MS = (datetime(1, 1, 1, tzinfo=timezone.utc) - _EPOCH) / timedelta(milliseconds=1)
_MAX_MS = (datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc) - _EPOCH) / timedelta(milliseconds=1)


def is_missing(value: Any) -> bool:
    """None, blank strings and non-finite floats all mean "no value"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, float):
        return not math.isfinite(value)
    return False


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a numeric attribute value
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _finite_float(value: Any) -> Optional[float]:
    # ints from JSON are unbounded; past float range they are missing
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def to_number(value: Any) -> Optional[float]:
    if _is_number(value):
        return _finite_float(value)

    if isinstance(value, str):
        text = value.strip()
        if not text or not _DECIMAL_RE.match(text):
            return None
        return _finite_float(text)

    return None


def _datetime_to_ms(dt: datetime) -> float:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - _EPOCH) / timedelta(milliseconds=1)


def _in_range(ms: Optional[float]) -> Optional[float]:
    if ms is None or not _MIN_MS <= ms <= _MAX_MS:
        return None
    return ms


def to_timestamp(value: Any) -> Optional[float]:
    """
    Parse a value into epoch milliseconds (UTC).

    Accepted:
    - RFC 3339 / ISO-8601 calendar dates ("2024-03-01") and date-times
      ("2024-03-01T10:30:00Z", "2024-03-01T10:30+02:00"); naive values are UTC
    - datetime.date / datetime.datetime instances
    - finite numbers, read as epoch milliseconds

    Results outside UTC years 1..9999 are missing.
    """
    if isinstance(value, datetime):
        return _in_range(_datetime_to_ms(value))

    if isinstance(value, date):
        return _in_range(_datetime_to_ms(datetime(value.year, value.month, value.day)))

    if _is_number(value):
        return _in_range(_finite_float(value))

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or not _ISO_RE.match(text):
        return None

    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        # e.g. "2024-02-30": right shape, not a real calendar date
        return None
    return _in_range(_datetime_to_ms(parsed))


def day_start(timestamp: float) -> float:
    """Truncate an epoch-ms timestamp to the start of its UTC day."""
    return math.floor(timestamp / MS_PER_DAY) * MS_PER_DAY


def format_number(value: float) -> str:
    """Canonical string form: integral values drop the trailing '.0'."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_date(timestamp: float) -> str:
    """Epoch-ms timestamp -> 'YYYY-MM-DD' (UTC)."""
    dt = _EPOCH + timedelta(milliseconds=timestamp)
    return dt.date().isoformat()


def to_label(value: Any) -> str:
    if is_missing(value):
        return MISSING_LABEL
    if _is_number(value):
        return format_number(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
