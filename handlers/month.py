# handlers/month.py
import logging
from dataclasses import dataclass

import config
from utils.errors import InvalidDate
from utils.ethiopian_calendar import EthiopianDate, days_in_month, gregorian_to_ethiopian, today
from utils.geez import AMHARIC, ENGLISH, month_name, to_geez, weekday_name

logger = logging.getLogger("zemenbar_logger")

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 13


@dataclass(frozen=True)
class CalendarDay:
    day: int
    day_geez: str
    is_today: bool
    weekday: int
    weekday_name_amharic: str
    weekday_name_english: str

    def to_dict(self):
        return {
            "day": self.day,
            "day_geez": self.day_geez,
            "is_today": self.is_today,
            "weekday": self.weekday,
            "weekday_name_amharic": self.weekday_name_amharic,
            "weekday_name_english": self.weekday_name_english,
        }


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    year_geez: str
    month: int
    month_name_amharic: str
    month_name_english: str
    days: tuple
    first_day_weekday: int

    @property
    def leading_blanks(self):
        # Weeks start on Sunday (0), so the weekday of day 1 is the blank count
        return self.first_day_weekday

    @property
    def today(self):
        return next((d for d in self.days if d.is_today), None)

    def weeks(self):
        """Rows of 7 cells, with None for the blanks before day 1 and after the last day."""
        cells = [None] * self.leading_blanks + list(self.days)
        cells += [None] * (-len(cells) % DAYS_PER_WEEK)
        return [cells[i:i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]

    def to_dict(self):
        return {
            "year": self.year,
            "year_geez": self.year_geez,
            "month": self.month,
            "month_name_amharic": self.month_name_amharic,
            "month_name_english": self.month_name_english,
            "days": [d.to_dict() for d in self.days],
            "first_day_weekday": self.first_day_weekday,
        }


def build_month(year, month, clock=None):
    """
    Build the day grid for an Ethiopian month.

    Today is read from the clock once, so every cell in one grid is tagged
    against the same date even if the clock ticks over mid-build.
    """
    first_day = EthiopianDate(year, month, 1)
    count = days_in_month(year, month)
    current = today(clock or config.system_clock)

    days = []
    for day in range(1, count + 1):
        date = EthiopianDate(year, month, day)
        wd = date.weekday
        days.append(CalendarDay(
            day=day,
            day_geez=to_geez(day),
            is_today=(date == current),
            weekday=wd,
            weekday_name_amharic=weekday_name(wd, AMHARIC),
            weekday_name_english=weekday_name(wd, ENGLISH),
        ))

    logger.debug(f"Built month {month}/{year}: {count} days, starts on weekday {first_day.weekday}")
    return CalendarMonth(
        year=year,
        year_geez=to_geez(year),
        month=month,
        month_name_amharic=month_name(month, AMHARIC),
        month_name_english=month_name(month, ENGLISH),
        days=tuple(days),
        first_day_weekday=first_day.weekday,
    )


def month_containing(dt, clock=None):
    """Grid for the Ethiopian month that contains a Gregorian date."""
    eth = dt if isinstance(dt, EthiopianDate) else gregorian_to_ethiopian(dt)
    return build_month(eth.year, eth.month, clock)


def navigate_month(year, month, step=1):
    """Move `step` months forward (or back when negative); Pagume rolls over to Meskerem."""
    days_in_month(year, month)
    index = (year * MONTHS_PER_YEAR + (month - 1)) + step
    new_year, new_month = divmod(index, MONTHS_PER_YEAR)
    if new_year < 1:
        raise InvalidDate(f"Cannot navigate before year 1 (from {month}/{year}, step {step})")
    return new_year, new_month + 1
