# utils/ethiopian_calendar.py
"""
Gregorian <-> Ethiopian calendar conversion.

Everything here works on proleptic Gregorian ordinals (``date.toordinal()``),
so the arithmetic stays in integers. The Ethiopian year has 12 months of 30
days followed by Pagume, which has 6 days in a leap year and 5 otherwise.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime

from utils.errors import InvalidDate, InvalidMonth
from utils.geez import AMHARIC, ENGLISH, month_name, to_geez, weekday_name

logger = logging.getLogger("zemenbar_logger")

# Ordinal of Meskerem 1, year 1 (Amete Mihret epoch)
EPOCH_ORDINAL = 2796
# That day was a Wednesday (Sunday = 0)
EPOCH_WEEKDAY = 3

PAGUME = 13
DAYS_IN_REGULAR_MONTH = 30


def is_ethiopian_leap_year(year):
    """Leap years follow the Julian cycle: 3, 7, 11, ... 2015, 2019"""
    return (year + 1) % 4 == 0


def days_in_month(year, month):
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= PAGUME:
        raise InvalidMonth(f"Month must be between 1 and 13, got {month!r}")
    if month == PAGUME:
        return 6 if is_ethiopian_leap_year(year) else 5
    return DAYS_IN_REGULAR_MONTH


def _validate(year, month, day):
    if isinstance(year, bool) or not isinstance(year, int) or year < 1:
        raise InvalidDate(f"Ethiopian year must be a positive integer, got {year!r}")
    limit = days_in_month(year, month)
    if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= limit:
        raise InvalidDate(f"Day {day!r} is not valid for month {month} of {year} (1..{limit})")


def _new_year_ordinal(year):
    # Every year before `year` contributes 365 days, and year // 4 of them were leap
    return EPOCH_ORDINAL + 365 * (year - 1) + year // 4


def _elapsed_days(year, month, day):
    return _new_year_ordinal(year) - EPOCH_ORDINAL + (month - 1) * DAYS_IN_REGULAR_MONTH + (day - 1)


@dataclass(frozen=True)
class EthiopianDate:
    """A validated date in the Ethiopian calendar."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        _validate(self.year, self.month, self.day)

    @property
    def day_geez(self):
        return to_geez(self.day)

    @property
    def year_geez(self):
        return to_geez(self.year)

    @property
    def is_leap_year(self):
        return is_ethiopian_leap_year(self.year)

    @property
    def days_in_month(self):
        return days_in_month(self.year, self.month)

    @property
    def weekday(self):
        return weekday(self)

    @property
    def amharic_month(self):
        return month_name(self.month, AMHARIC)

    @property
    def english_month(self):
        return month_name(self.month, ENGLISH)

    @property
    def amharic_weekday(self):
        return weekday_name(self.weekday, AMHARIC)

    @property
    def english_weekday(self):
        return weekday_name(self.weekday, ENGLISH)

    def to_gregorian(self):
        return ethiopian_to_gregorian((self.year, self.month, self.day))

    def to_dict(self):
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "day_geez": self.day_geez,
        }

    def __str__(self):
        return f"{self.day}/{self.month}/{self.year}"


def _as_gregorian(dt):
    if isinstance(dt, str):
        try:
            return datetime.strptime(dt, '%Y-%m-%d').date()
        except ValueError as e:
            raise InvalidDate(f"Expected a YYYY-MM-DD date, got {dt!r}") from e
    if isinstance(dt, datetime):
        return dt.date()
    if isinstance(dt, date):
        return dt
    raise InvalidDate(f"Expected a date, datetime or YYYY-MM-DD string, got {dt!r}")


def gregorian_to_ethiopian(dt):
    """Convert a Gregorian date (date, datetime or 'YYYY-MM-DD') to an EthiopianDate"""
    greg = _as_gregorian(dt)
    ordinal = greg.toordinal()

    # Meskerem 1 falls in September, so January..August belong to the year
    # that started in the previous Gregorian September
    year = greg.year - 8
    if ordinal >= _new_year_ordinal(year + 1):
        year += 1
    if year < 1:
        raise InvalidDate(f"{greg.isoformat()} is before the first Ethiopian year")

    offset = ordinal - _new_year_ordinal(year)
    month, day = divmod(offset, DAYS_IN_REGULAR_MONTH)
    eth = EthiopianDate(year, month + 1, day + 1)
    logger.debug(f"Converted {greg.isoformat()} -> {eth}")
    return eth


def ethiopian_to_gregorian(eth_dt):
    """Convert an Ethiopian date ('YYYY-MM-DD', (year, month, day) or EthiopianDate) to a Gregorian date"""
    if isinstance(eth_dt, EthiopianDate):
        year, month, day = eth_dt.year, eth_dt.month, eth_dt.day
    elif isinstance(eth_dt, str):
        try:
            year, month, day = map(int, eth_dt.split('-'))
        except ValueError as e:
            raise InvalidDate(f"Expected a YYYY-MM-DD Ethiopian date, got {eth_dt!r}") from e
    elif isinstance(eth_dt, (tuple, list)) and len(eth_dt) == 3:
        year, month, day = eth_dt
    else:
        raise InvalidDate("Input must be string in YYYY-MM-DD format or (year, month, day) tuple")

    _validate(year, month, day)
    return date.fromordinal(EPOCH_ORDINAL + _elapsed_days(year, month, day))


def weekday(eth_date):
    """Day of the week, 0 = Sunday .. 6 = Saturday"""
    return (EPOCH_WEEKDAY + _elapsed_days(eth_date.year, eth_date.month, eth_date.day)) % 7


def today(clock):
    """Today's Ethiopian date according to `clock` (a callable returning a date or datetime)"""
    return gregorian_to_ethiopian(clock())
