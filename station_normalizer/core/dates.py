from datetime import date, datetime, timezone
from typing import Union


def utc_midnight(d: date) -> datetime:
    # Daily readings are stamped at 00:00 UTC of their day.
    return datetime(d.year, d.month, d.day, 0, 0, 0, tzinfo=timezone.utc)


def day_of_year(value: Union[date, datetime]) -> int:
    """
    Return the ordinal day of the year (1-366) for a date or datetime.
    """
    return value.timetuple().tm_yday


def day_of_year_str(date_str: str) -> int:
    """
    Return the day of the year for a `YYYY-MM-DD` string.

    Raises:
        ValueError: if the string is not a valid calendar date in that format.
    """
    try:
        parsed = datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("Invalid date format") from None
    return day_of_year(parsed)
