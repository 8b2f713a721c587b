# zemenbar.py
"""
Operations the tray shell calls into.

Each operation takes plain request values and returns the core's value
types; `invoke` is the transport entry point that takes a command name and
a dict payload and returns JSON-ready data.
"""
import logging
from datetime import date as gregorian_date

import config
from config import DisplaySettings
from handlers import month, tray
from utils.errors import InvalidDate, UnknownCommand, ZemenbarError
from utils.ethiopian_calendar import EthiopianDate, gregorian_to_ethiopian, today

logger = logging.getLogger("zemenbar_logger")


def get_current_ethiopian_date(clock=None):
    return today(clock or config.system_clock)


def get_ethiopian_calendar_month(year, month_no, clock=None):
    return month.build_month(year, month_no, clock)


def convert_gregorian_to_ethiopian(year, month_no, day):
    try:
        greg = gregorian_date(year, month_no, day)
    except (TypeError, ValueError) as e:
        raise InvalidDate(f"Invalid Gregorian date {year}-{month_no}-{day}: {e}") from e
    return gregorian_to_ethiopian(greg)


def format_tray_text(date, today_month=None, settings=None, available_width_px=None,
                     measure=None, style=None):
    """Tray text; width defaults to the configured tray budget, measure to the configured font via Pillow."""
    width = config.TRAY.width_px if available_width_px is None else available_width_px
    return tray.format_tray(
        date, today_month, settings or DisplaySettings(), width,
        measure or tray.measure_text_width,
        style,
    )


def format_full_text(date, today_month=None, settings=None):
    return tray.format_full(date, today_month, settings or DisplaySettings())


# Payload parsing for invoke()

def _date_from_payload(value):
    if value is None or isinstance(value, EthiopianDate):
        return value
    if isinstance(value, dict):
        try:
            return EthiopianDate(value["year"], value["month"], value["day"])
        except KeyError as e:
            raise InvalidDate(f"Date payload is missing {e.args[0]!r}") from e
    raise InvalidDate(f"Unsupported date payload: {value!r}")


def _month_from_payload(value, clock):
    if value is None or isinstance(value, month.CalendarMonth):
        return value
    if isinstance(value, dict):
        try:
            return month.build_month(value["year"], value["month"], clock)
        except KeyError as e:
            raise InvalidDate(f"Month payload is missing {e.args[0]!r}") from e
    raise InvalidDate(f"Unsupported month payload: {value!r}")


def _settings_from_payload(value):
    if isinstance(value, DisplaySettings):
        return value
    return DisplaySettings.from_dict(value)


def _cmd_current_date(payload, clock):
    return get_current_ethiopian_date(clock).to_dict()


def _cmd_calendar_month(payload, clock):
    return get_ethiopian_calendar_month(payload.get("year"), payload.get("month"), clock).to_dict()


def _cmd_convert(payload, clock):
    return convert_gregorian_to_ethiopian(payload.get("year"), payload.get("month"), payload.get("day")).to_dict()


def _cmd_tray_text(payload, clock):
    return format_tray_text(
        _date_from_payload(payload.get("date")),
        _month_from_payload(payload.get("todayMonthMeta"), clock),
        _settings_from_payload(payload.get("settings")),
        payload.get("availableWidthPx"),
    )


def _cmd_full_text(payload, clock):
    return format_full_text(
        _date_from_payload(payload.get("date")),
        _month_from_payload(payload.get("todayMonthMeta"), clock),
        _settings_from_payload(payload.get("settings")),
    )


COMMANDS = {
    "get_current_ethiopian_date": _cmd_current_date,
    "get_ethiopian_calendar_month": _cmd_calendar_month,
    "convert_gregorian_to_ethiopian": _cmd_convert,
    "format_tray_text": _cmd_tray_text,
    "format_full_text": _cmd_full_text,
}


def invoke(command, payload=None, clock=None):
    """Run a named operation with a dict payload and return JSON-ready data."""
    handler = COMMANDS.get(command)
    if handler is None:
        logger.error(f"Unknown command: {command!r}")
        raise UnknownCommand(f"Unknown command: {command!r}")

    logger.info(f"{command} triggered")
    try:
        return handler(payload or {}, clock)
    except ZemenbarError as e:
        logger.error(f"{command} failed: {e}")
        raise
