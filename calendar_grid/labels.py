"""Label normalization and calendar date helpers shared by the grid and aggregator."""
import calendar
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime]

FALLBACK_LOCATION = "Evento"

# Sunday-first, matching the grid's column order
WEEKDAY_HEADERS = ("DOM", "SEG", "TER", "QUA", "QUI", "SEX", "SAB")

MONTH_NAMES = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

MONTH_ABBREVIATIONS = (
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
)


def normalize_location(city: Optional[str]) -> str:
    """
    Normalize a city into a location grouping label.

    The value is trimmed, then capitalized: the first character in title
    case and the rest lower-cased. Missing or blank cities map to FALLBACK_LOCATION.

    Args:
        city: Raw city value from the event, possibly None

    Returns:
        Location label
    """
    label = (city or "").strip() or FALLBACK_LOCATION
    return label.capitalize()


def month_label(value: DateLike) -> str:
    """Return the "<month> <year>" grouping label, e.g. "março 2024"."""
    return f"{MONTH_NAMES[value.month - 1]} {value.year}"


def month_key(value: DateLike) -> str:
    """Return the YYYY-MM identity of a month."""
    return f"{value.year:04d}-{value.month:02d}"


def calendar_date(value: DateLike) -> date:
    """Strip the time-of-day from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def same_day(a: DateLike, b: DateLike) -> bool:
    return calendar_date(a) == calendar_date(b)


def same_month(a: DateLike, b: DateLike) -> bool:
    return (a.year, a.month) == (b.year, b.month)


def sunday_weekday(value: DateLike) -> int:
    """Weekday index with Sunday = 0 through Saturday = 6."""
    return (value.weekday() + 1) % 7


def shift_month(reference: DateLike, offset: int) -> date:
    """
    Move a date by a number of whole months.

    The day of month is clamped to the length of the target month, so
    shifting January 31 by one month lands on the last day of February.

    Args:
        reference: Starting date
        offset: Months to move, negative for earlier months

    Returns:
        Shifted date

    Raises:
        ValueError: If the target month is outside years 1 through 9999
    """
    month_index = reference.year * 12 + (reference.month - 1) + offset
    year, month = divmod(month_index, 12)
    month += 1
    day = min(reference.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def navigation_key(reference: DateLike, offset: int) -> str:
    """YYYY-MM key of a shifted month, or "" past the first or last representable month."""
    try:
        return month_key(shift_month(reference, offset))
    except ValueError:
        return ''


def parse_month(text: str) -> date:
    """
    Parse a YYYY-MM string into the first day of that month.

    Raises:
        ValueError: If text is not a valid YYYY-MM month
    """
    return datetime.strptime(text.strip(), '%Y-%m').date()
