"""Date Normalization — loose Y/M/D strings to fixed-width YYYY/MM/DD.

Invariants:
    - Output is always exactly 10 chars matching ####/##/## (or an exception)
    - Idempotent: normalize_date(normalize_date(x)) == normalize_date(x)
    - No range validation: "2023/13/45" is returned as-is
    - Malformed input raises InvalidDateError, never returns a partial value

Design Decisions:
    - Canonical form keeps slashes: stored order_date values are matched by substring,
      so the search fragment and the stored text must share one shape
"""

from orders_api.core.domain_types import CanonicalDate
from orders_api.core.errors import InvalidDateError

_YEAR_DIGITS = 4
_MAX_PART_DIGITS = 2


def normalize_date(raw_date: str) -> CanonicalDate:
    """Normalize "2023/5/1" to "2023/05/01".

    Raises InvalidDateError when the input is not three slash-separated
    digit groups with a 4-digit year and 1-2 digit month and day.
    """
    if not isinstance(raw_date, str):
        raise InvalidDateError(raw_date)
    parts = raw_date.split("/")
    if len(parts) != 3:
        raise InvalidDateError(raw_date)
    year, month, day = parts
    if len(year) != _YEAR_DIGITS or not _is_digits(year):
        raise InvalidDateError(raw_date)
    for part in (month, day):
        if not 1 <= len(part) <= _MAX_PART_DIGITS or not _is_digits(part):
            raise InvalidDateError(raw_date)
    return CanonicalDate(f"{year}/{month.zfill(2)}/{day.zfill(2)}")


def _is_digits(value: str) -> bool:
    """ASCII digits only (str.isdigit accepts superscripts and other scripts)."""
    return value.isascii() and value.isdigit()
