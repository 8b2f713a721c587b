"""Tests for the tray/full text formatter."""

from itertools import product
from unittest.mock import Mock

import pytest
from PIL import ImageFont

from config import DisplaySettings
from handlers.month import build_month
from handlers.tray import (
    CALENDAR_ICON,
    TextStyle,
    load_font,
    measure_text_width,
    format_compact,
    format_full,
    format_tray,
)
from utils.errors import InvalidDate, MissingCurrentDate
from utils.ethiopian_calendar import EthiopianDate

NEW_YEAR = EthiopianDate(2017, 1, 1)


def char_count(text, style):
    """10px per character, independent of script"""
    return len(text) * 10


@pytest.fixture
def meskerem(new_year_clock):
    return build_month(2017, 1, new_year_clock)


class TestFormatFull:
    def test_amharic_with_qen_and_amete_mihret(self, meskerem):
        settings = DisplaySettings(use_amharic=True, show_qen=True, show_amete_mihret=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "መስከረም 1 ቀን 2017 ዓ.ም."

    def test_amharic_plain(self, meskerem):
        assert format_full(NEW_YEAR, meskerem, DisplaySettings()) == "መስከረም 1 2017"

    def test_qen_only(self, meskerem):
        settings = DisplaySettings(show_qen=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "መስከረም 1 ቀን 2017"

    def test_amete_mihret_only(self, meskerem):
        settings = DisplaySettings(show_amete_mihret=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "መስከረም 1 2017 ዓ.ም."

    def test_geez_numbers(self, meskerem):
        settings = DisplaySettings(use_geez_numbers=True, show_qen=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "መስከረም ፩ ቀን ፳፻፲፯"

    def test_english_ignores_amharic_suffixes(self, meskerem):
        settings = DisplaySettings(use_amharic=False, show_qen=True, show_amete_mihret=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "Meskerem 1 2017"

    def test_english_with_geez_numbers(self, meskerem):
        settings = DisplaySettings(use_amharic=False, use_geez_numbers=True)
        assert format_full(NEW_YEAR, meskerem, settings) == "Meskerem ፩ ፳፻፲፯"

    def test_without_month_metadata(self):
        date = EthiopianDate(2016, 13, 5)
        settings = DisplaySettings(use_amharic=False)
        assert format_full(date, None, settings) == "Pagume 5 2016"

    def test_mismatched_month_metadata(self, meskerem):
        with pytest.raises(InvalidDate):
            format_full(EthiopianDate(2017, 2, 1), meskerem, DisplaySettings())

    def test_missing_date(self, meskerem):
        with pytest.raises(MissingCurrentDate):
            format_full(None, meskerem, DisplaySettings())


class TestNumericFormat:
    @pytest.mark.parametrize("flags", list(product([False, True], repeat=5)))
    def test_numeric_ignores_other_toggles(self, flags, meskerem):
        amharic, geez, qen, amete, in_tray = flags
        settings = DisplaySettings(
            use_amharic=amharic,
            use_geez_numbers=geez,
            use_numeric_format=True,
            show_qen=qen,
            show_amete_mihret=amete,
            show_date_in_tray=in_tray,
        )
        assert format_tray(NEW_YEAR, meskerem, settings, 1, char_count) == "01/01/2017"
        assert format_full(NEW_YEAR, meskerem, settings) == "01/01/2017"

    def test_zero_padding(self):
        settings = DisplaySettings(use_numeric_format=True)
        assert format_full(EthiopianDate(2016, 13, 5), None, settings) == "05/13/2016"
        assert format_full(EthiopianDate(987, 12, 30), None, settings) == "30/12/0987"


class TestFormatTray:
    def test_full_text_when_it_fits(self, meskerem):
        settings = DisplaySettings(show_qen=True, show_amete_mihret=True)
        full = "መስከረም 1 ቀን 2017 ዓ.ም."
        assert format_tray(NEW_YEAR, meskerem, settings, len(full) * 10, char_count) == full

    def test_compact_when_too_wide(self, meskerem):
        settings = DisplaySettings(show_qen=True, show_amete_mihret=True)
        full = "መስከረም 1 ቀን 2017 ዓ.ም."
        compact = "መስ 1"
        width = len(full) * 10 - 1
        assert width > len(compact) * 10
        assert format_tray(NEW_YEAR, meskerem, settings, width, char_count) == compact

    def test_compact_english_uses_three_letters(self, meskerem):
        settings = DisplaySettings(use_amharic=False)
        assert format_tray(NEW_YEAR, meskerem, settings, 10, char_count) == "Mes 1"

    def test_compact_geez_day(self, meskerem):
        settings = DisplaySettings(use_geez_numbers=True)
        assert format_tray(NEW_YEAR, meskerem, settings, 10, char_count) == "መስ ፩"

    def test_measure_receives_full_text_and_style(self, meskerem):
        measure = Mock(return_value=50)
        style = TextStyle(font_family="Noto Sans Ethiopic", font_size=14)
        result = format_tray(NEW_YEAR, meskerem, DisplaySettings(), 200, measure, style)
        assert result == "መስከረም 1 2017"
        measure.assert_called_once_with("መስከረም 1 2017", style)

    def test_numeric_format_skips_measuring(self, meskerem):
        measure = Mock(return_value=10_000)
        settings = DisplaySettings(use_numeric_format=True)
        assert format_tray(NEW_YEAR, meskerem, settings, 10, measure) == "01/01/2017"
        measure.assert_not_called()

    def test_icon_when_date_hidden(self, meskerem):
        settings = DisplaySettings(show_date_in_tray=False)
        assert format_tray(NEW_YEAR, meskerem, settings, 500, char_count) == CALENDAR_ICON

    def test_missing_date(self, meskerem):
        with pytest.raises(MissingCurrentDate):
            format_tray(None, meskerem, DisplaySettings(), 200, char_count)


def test_compact_never_has_year_or_suffixes():
    settings = DisplaySettings(show_qen=True, show_amete_mihret=True)
    compact = format_compact(EthiopianDate(2017, 4, 29), settings)
    assert compact == "ታኅ 29"
    assert "2017" not in compact and "ቀን" not in compact and "ዓ.ም." not in compact


def test_numeric_wins_over_hidden_date(meskerem):
    settings = DisplaySettings(use_numeric_format=True, show_date_in_tray=False)
    assert format_tray(NEW_YEAR, meskerem, settings, 500, char_count) == "01/01/2017"


def _system_font(name, size):
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        pytest.skip(f"{name} is not installed")


class TestMeasureTextWidth:
    def test_matches_installed_font(self):
        font = _system_font("DejaVuSans.ttf", 20)
        style = TextStyle(font_family="DejaVuSans.ttf", font_size=20)
        text = "Meskerem 1 2017"
        assert measure_text_width(text, style) == font.getlength(text)

    def test_font_file_path_is_accepted(self):
        font = _system_font("DejaVuSans.ttf", 13)
        style = TextStyle(font_family=font.path, font_size=13)
        assert measure_text_width("Mes 1", style) == font.getlength("Mes 1")

    def test_unknown_family_falls_back_to_default_font(self):
        style = TextStyle(font_family="no-such-font.ttf", font_size=13)
        width = measure_text_width("Meskerem 1 2017", style)
        assert width == load_font("no-such-font.ttf", 13).getlength("Meskerem 1 2017")
        assert width > 0

    def test_width_grows_with_text_and_size(self):
        small = TextStyle(font_family="no-such-font.ttf", font_size=10)
        assert measure_text_width("", small) == 0
        assert measure_text_width("Mes 1", small) < measure_text_width("Meskerem 1 2017", small)

        _system_font("DejaVuSans.ttf", 10)
        regular = TextStyle(font_family="DejaVuSans.ttf", font_size=10)
        large = TextStyle(font_family="DejaVuSans.ttf", font_size=30)
        assert measure_text_width("Meskerem", regular) < measure_text_width("Meskerem", large)

    def test_format_tray_with_real_measurement(self, meskerem):
        settings = DisplaySettings(use_amharic=False)
        style = TextStyle(font_family="DejaVuSans.ttf", font_size=13)
        full = format_tray(NEW_YEAR, meskerem, settings, 1000, measure_text_width, style)
        assert full == "Meskerem 1 2017"
        compact = format_tray(NEW_YEAR, meskerem, settings, 20, measure_text_width, style)
        assert compact == "Mes 1"
