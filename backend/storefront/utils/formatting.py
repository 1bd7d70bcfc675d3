from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

NAIRA = "₦"
INVALID_DATE = "Invalid Date"

FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB")

_NON_DIGIT = re.compile(r"[^0-9]")


def _round_half_up(value, places: int = 2) -> Decimal | None:
    try:
        d = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not d.is_finite():
        return None
    with localcontext() as ctx:
        # precision must cover every integer digit plus the decimals
        ctx.prec = max(ctx.prec, d.adjusted() + places + 2)
        q = d.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        # avoid rendering "-0"
        return q if q != 0 else abs(q)


def _drop_trailing_zeros(s: str) -> str:
    if "." not in s:
        return s
    return s.rstrip("0").rstrip(".")


def format_price(amount) -> str:
    """Render an amount in Naira: "₦1,234.5" (grouped, 0-2 decimals)."""
    q = _round_half_up(amount or 0)
    if q is None:
        return f"{NAIRA}{amount}"
    return f"{NAIRA}{_drop_trailing_zeros(f'{q:,.2f}')}"


def _coerce_date(value) -> date | None:
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def format_date(value: date | str) -> str:
    """Long form date, e.g. "19 October 2026"."""
    d = _coerce_date(value)
    if d is None:
        return INVALID_DATE
    return f"{d.day} {d:%B %Y}"


def format_datetime(value: date | str) -> str:
    """Short month plus 24h time, e.g. "19 Oct 2026, 14:05"."""
    d = _coerce_date(value)
    if d is None:
        return INVALID_DATE
    return f"{d.day} {d:%b %Y}, {d:%H:%M}"


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'} ago"


def get_relative_time(value: date | str, now: datetime | None = None) -> str:
    """Coarse "N units ago" phrase; older than a week falls back to format_date.

    Future timestamps have negative elapsed time and read as "just now".
    Mixing naive and aware values treats the naive one as local time.
    """
    d = _coerce_date(value)
    if d is None:
        return format_date(value)
    if not isinstance(d, datetime):
        d = datetime(d.year, d.month, d.day)
    if now is None:
        now = datetime.now(d.tzinfo)
    elif (d.tzinfo is None) != (now.tzinfo is None):
        # naive values are local wall-clock time
        d, now = d.astimezone(), now.astimezone()

    diff_secs = math.floor((now - d).total_seconds())
    diff_mins = diff_secs // 60
    diff_hours = diff_mins // 60
    diff_days = diff_hours // 24

    if diff_secs < 60:
        return "just now"
    if diff_mins < 60:
        return _plural(diff_mins, "minute")
    if diff_hours < 24:
        return _plural(diff_hours, "hour")
    if diff_days < 7:
        return _plural(diff_days, "day")
    return format_date(d)


def format_file_size(num_bytes: float) -> str:
    """Base-1024 size with up to two decimals: 1536 -> "1.5 KB"."""
    if num_bytes == 0:
        return "0 Bytes"
    size = float(num_bytes)
    i = 0
    # clamp at the largest unit instead of running off the table
    while abs(size) >= 1024 and i < len(FILE_SIZE_UNITS) - 1:
        size /= 1024
        i += 1
    q = _round_half_up(size)
    if q is None:
        return f"{num_bytes} Bytes"
    return f"{_drop_trailing_zeros(f'{q:.2f}')} {FILE_SIZE_UNITS[i]}"


def format_nigerian_phone(phone: str) -> str:
    """Pretty-print a Nigerian number; unknown shapes are returned untouched.

    "2348031234567" -> "+234 803 123 4567"
    "08031234567"   -> "0803 123 4567"
    """
    cleaned = _NON_DIGIT.sub("", phone or "")
    if cleaned.startswith("234"):
        return f"+234 {cleaned[3:6]} {cleaned[6:9]} {cleaned[9:]}"
    if cleaned.startswith("0"):
        return f"{cleaned[:4]} {cleaned[4:7]} {cleaned[7:]}"
    return phone
