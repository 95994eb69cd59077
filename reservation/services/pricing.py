from datetime import date
from decimal import Decimal
from typing import Optional

from frontdesk.coercion import CENTS


def calculate_nights(check_in: date, check_out: date) -> int:
    return (check_out - check_in).days


def calculate_total(rate, check_in: Optional[date], check_out: Optional[date]) -> Optional[Decimal]:
    """Stay price: nights times the nightly rate. None until the stay is at least one night."""
    if rate is None or check_in is None or check_out is None:
        return None

    nights = calculate_nights(check_in, check_out)
    if nights <= 0:
        return None
    return (Decimal(str(rate)) * nights).quantize(CENTS)
