# handlers/tray.py
"""
Tray and detail-view text for today's date.

The tray only has a narrow strip of the menu bar, so `format_tray` measures
the full text with a caller-supplied callback and falls back to a compact
"month-abbreviation day" form when it does not fit. `format_full` is the
unconstrained text used by the detail view.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache

from PIL import ImageFont

import config
from utils.errors import InvalidDate, MissingCurrentDate
from utils.geez import (
    AMETE_MIHRET, AMHARIC, ENGLISH, QEN,
    abbreviate_month, month_name, to_geez,
)

logger = logging.getLogger("zemenbar_logger")

CALENDAR_ICON = "📅"


@dataclass(frozen=True)
class TextStyle:
    font_family: str = config.DEFAULT_FONT_FAMILY
    font_size: int = config.DEFAULT_FONT_SIZE

    @classmethod
    def from_config(cls, tray=None):
        tray = tray or config.TRAY
        return cls(font_family=tray.font_family, font_size=tray.font_size)


@lru_cache(maxsize=16)
def load_font(font_family, font_size):
    """
    Load a TrueType font by file name or path at `font_size` pixels.

    Pillow searches the system font directories for bare file names such as
    "DejaVuSans.ttf". When the family cannot be found, Pillow's bundled
    default font is used at the same size.
    """
    try:
        return ImageFont.truetype(font_family, font_size)
    except OSError as e:
        logger.warning(f"Failed to load font {font_family!r}: {e}, using default font")
    try:
        return ImageFont.load_default(size=font_size)
    except (TypeError, OSError, ImportError):
        # Pillow without FreeType (or older than 10.1) only has the fixed bitmap font
        return ImageFont.load_default()


def measure_text_width(text, style):
    """Rendered advance width of `text` in pixels for the font described by `style`."""
    return load_font(style.font_family, style.font_size).getlength(text)


def _check(date, today_month):
    if date is None:
        raise MissingCurrentDate("A current date is required to format the tray text")
    if today_month is not None and (today_month.year, today_month.month) != (date.year, date.month):
        raise InvalidDate(
            f"Month metadata {today_month.month}/{today_month.year} does not match {date}"
        )


def _month_text(date, today_month, settings):
    if today_month is not None:
        return today_month.month_name_amharic if settings.use_amharic else today_month.month_name_english
    return month_name(date.month, AMHARIC if settings.use_amharic else ENGLISH)


def _day_text(date, settings):
    return to_geez(date.day) if settings.use_geez_numbers else str(date.day)


def _year_text(date, today_month, settings):
    if not settings.use_geez_numbers:
        return str(date.year)
    return today_month.year_geez if today_month is not None else to_geez(date.year)


def format_numeric(date):
    """DD/MM/YYYY with Arabic digits"""
    return f"{date.day:02d}/{date.month:02d}/{date.year:04d}"


def format_compact(date, settings):
    """Abbreviated month plus day; never carries the year or suffixes."""
    lang = AMHARIC if settings.use_amharic else ENGLISH
    return f"{abbreviate_month(date.month, lang)} {_day_text(date, settings)}"


def format_full(date, today_month, settings):
    """Full, unabbreviated date text for the detail view."""
    _check(date, today_month)
    if settings.use_numeric_format:
        return format_numeric(date)

    month = _month_text(date, today_month, settings)
    day = _day_text(date, settings)
    year = _year_text(date, today_month, settings)

    text = f"{month} {day} {year}"
    if settings.use_amharic:
        if settings.show_qen:
            text = f"{month} {day} {QEN} {year}"
        if settings.show_amete_mihret:
            text = f"{text} {AMETE_MIHRET}"
    return text


def format_tray(date, today_month, settings, available_width_px, measure, style=None):
    """Full text if it fits in `available_width_px` according to `measure`, else the compact text."""
    _check(date, today_month)
    if settings.use_numeric_format:
        return format_numeric(date)
    if not settings.show_date_in_tray:
        return CALENDAR_ICON

    full = format_full(date, today_month, settings)
    width = measure(full, style or TextStyle.from_config())
    if width <= available_width_px:
        return full

    compact = format_compact(date, settings)
    logger.debug(f"Tray text {full!r} is {width}px wide, budget {available_width_px}px; using {compact!r}")
    return compact
