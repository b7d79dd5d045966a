from __future__ import annotations

import re
from datetime import datetime, timezone

DATE_FORMAT = "%m/%d/%Y %H:%M:%S"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^([+-]?)(\d*)\.?(\d*)$")


def format_amount(base_units: int | str, decimals: int) -> str:
    """Convert an integer amount of base units into a display decimal string.

    Pure integer arithmetic: ``12345678900`` at 9 decimals is ``"12.3456789"``,
    ``1000000000`` at 9 decimals is ``"1"``.
    """
    if isinstance(base_units, str):
        text = base_units.strip()
        if not _INTEGER_RE.match(text):
            raise ValueError(f"not an integer amount: {base_units!r}")
        value = int(text)
    else:
        value = int(base_units)

    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(value), 10**decimals)
    if decimals == 0 or fraction == 0:
        return f"{sign}{whole}"
    fraction_str = str(fraction).zfill(decimals).rstrip("0")
    return f"{sign}{whole}.{fraction_str}"


def normalize_decimal(text: str) -> str:
    """Canonicalize an amount that an indexer already returned in display units."""
    match = _DECIMAL_RE.match(text.strip())
    if not match or not (match.group(2) or match.group(3)):
        raise ValueError(f"not a decimal amount: {text!r}")
    sign, whole, fraction = match.groups()
    whole = whole.lstrip("0") or "0"
    fraction = fraction.rstrip("0")
    if whole == "0" and not fraction:
        sign = ""
    if sign == "+":
        sign = ""
    return f"{sign}{whole}.{fraction}" if fraction else f"{sign}{whole}"


def parse_amount(text: str | None, decimals: int) -> str:
    """Base-unit integer strings are scaled, anything with a point is taken as already scaled."""
    if text is None:
        raise ValueError("missing amount")
    text = text.strip()
    if "." in text:
        return normalize_decimal(text)
    return format_amount(text, decimals)


def is_zero_amount(amount: str | None) -> bool:
    if not amount:
        return True
    try:
        return normalize_decimal(amount) == "0"
    except ValueError:
        return True


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).replace(microsecond=0)


def format_date(dt: datetime) -> str:
    return as_utc(dt).strftime(DATE_FORMAT)


def short(address: str | None, length: int = 8) -> str:
    return f"{(address or '')[:length]}..."
