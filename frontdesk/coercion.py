"""
Conversions between the store's JSON-shaped records and Python values.

Records carry dates as ISO-8601 strings and money as strings; services work
with ``date``, aware ``datetime`` and ``Decimal``.
"""
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

CENTS = Decimal("0.01")


def to_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def to_int(value):
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not an integer: {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Not an integer: {value!r}")


def to_decimal(value):
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value).strip()).quantize(CENTS)
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}")


def to_datetime(value):
    """Parse to an aware datetime. Naive values are taken as local time."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        text = str(value).strip()
        parsed = parse_datetime(text)
        if parsed is None:
            day = parse_date(text)
            if day is None:
                raise ValueError(f"Not a datetime: {value!r}")
            parsed = datetime.combine(day, time.min)

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def to_date(value):
    """Parse to a date. Datetimes keep their local calendar day."""
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return timezone.localtime(to_datetime(value)).date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    day = parse_date(text)
    if day is not None:
        return day
    return to_date(to_datetime(text))


def split_list(value) -> list:
    """Comma-joined text to a list of trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        items = value
    else:
        items = str(value).split(",")
    return [str(item).strip() for item in items if str(item).strip()]


def join_list(value) -> str:
    return ",".join(split_list(value))


def to_boundary(value):
    """Python value to the form records carry across the store boundary."""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value
