"""Calendar date <-> day number conversion.

Day 1 is February 1 of the base year, the start of the admission season.
Earlier dates map to day 0 and below; the engine only relies on ordering.
"""

from datetime import date, timedelta


def base_date(base_year: int | None = None) -> date:
    """Return February 1 of ``base_year`` (default: the current year)."""
    year = base_year if base_year is not None else date.today().year
    return date(year, 2, 1)


def date_to_day(value: date, base_year: int | None = None) -> int:
    """Convert a calendar date to a day number (Feb 1 = day 1)."""
    return (value - base_date(base_year)).days + 1


def day_to_date(day: int, base_year: int | None = None) -> date:
    """Convert a day number back to a calendar date."""
    return base_date(base_year) + timedelta(days=day - 1)


def parse_day(text: str, base_year: int | None = None) -> int:
    """Parse either a plain day number or an ISO date (YYYY-MM-DD).

    An ISO date uses its own year as the base year unless one is given.
    """
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    value = date.fromisoformat(text)
    return date_to_day(value, base_year if base_year is not None else value.year)
