"""Date manipulation utilities"""

import calendar
import re
from datetime import date
from typing import List
from dateutil.relativedelta import relativedelta

from intellicard.domain.exceptions import InvalidMonthError

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, pulling day back to the last day of the month when it overflows"""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(max(day, 1), last_day))


def month_start(d: date) -> date:
    """First day of the month containing d"""
    return date(d.year, d.month, 1)


def add_months(d: date, months: int) -> date:
    """Shift d by whole calendar months (day clamped by relativedelta)"""
    return d + relativedelta(months=months)


def generate_month_range(start: date, count: int) -> List[date]:
    """Generate month starts beginning at start's month"""
    first = month_start(start)
    return [add_months(first, i) for i in range(count)]


def month_key(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}"


def parse_month_key(key: str) -> date:
    """Parse 'YYYY-MM' into the first day of that month"""
    match = _MONTH_KEY.match(key.strip())
    if not match:
        raise InvalidMonthError(f"Invalid month '{key}', expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidMonthError(f"Invalid month '{key}', month must be 01-12")
    if year < 1:
        raise InvalidMonthError(f"Invalid month '{key}', year must be 0001 or later")
    return date(year, month, 1)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start's month to end's month (negative if end is earlier)"""
    return (end.year - start.year) * 12 + (end.month - start.month)
