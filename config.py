# config.py
import logging
import os
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv

from utils.errors import InvalidSettings

load_dotenv()

# Configure logger
logger = logging.getLogger("zemenbar_logger")

if not logger.hasHandlers():
    logger.setLevel(getattr(logging, os.getenv("ZEMENBAR_LOG_LEVEL", "INFO").strip().upper(), logging.INFO))

    # Terminal (console) logging only
    stream_handler = logging.StreamHandler()
    stream_formatter = logging.Formatter('%(levelname)s - %(message)s')
    stream_handler.setFormatter(stream_formatter)

    logger.addHandler(stream_handler)


DEFAULT_TRAY_WIDTH = 180
DEFAULT_FONT_FAMILY = "DejaVuSans.ttf"
DEFAULT_FONT_SIZE = 13


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={raw!r} must be positive, using {default}")
        return default
    return value


@dataclass(frozen=True)
class DisplaySettings:
    """User-chosen display options. Every combination is legal."""

    use_amharic: bool = True
    use_geez_numbers: bool = False
    use_numeric_format: bool = False
    show_qen: bool = False
    show_amete_mihret: bool = False
    show_date_in_tray: bool = True

    @classmethod
    def from_dict(cls, data):
        """Build settings from a loosely-typed mapping; missing keys take defaults."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise InvalidSettings(f"Settings must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidSettings(f"Unknown settings: {', '.join(map(str, unknown))}")

        for key, value in data.items():
            if not isinstance(value, bool):
                raise InvalidSettings(f"Setting {key!r} must be true or false, got {value!r}")
        return cls(**data)

    def to_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class TrayConfig:
    width_px: int = DEFAULT_TRAY_WIDTH
    font_family: str = DEFAULT_FONT_FAMILY
    font_size: int = DEFAULT_FONT_SIZE
    timezone: Optional[str] = None

    @classmethod
    def from_env(cls):
        tz = os.getenv("ZEMENBAR_TIMEZONE")
        return cls(
            width_px=_env_int("ZEMENBAR_TRAY_WIDTH", DEFAULT_TRAY_WIDTH),
            font_family=os.getenv("ZEMENBAR_FONT_FAMILY", DEFAULT_FONT_FAMILY).strip() or DEFAULT_FONT_FAMILY,
            font_size=_env_int("ZEMENBAR_FONT_SIZE", DEFAULT_FONT_SIZE),
            timezone=tz.strip() if tz and tz.strip() else None,
        )


def make_clock(timezone=None):
    """Return a zero-argument callable giving the current date, optionally in an IANA zone."""
    if timezone is None:
        return lambda: datetime.now().date()

    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {timezone!r}, falling back to local time")
        return lambda: datetime.now().date()
    return lambda: datetime.now(zone).date()


TRAY = TrayConfig.from_env()
system_clock = make_clock(TRAY.timezone)
