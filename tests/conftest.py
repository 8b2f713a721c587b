# tests/conftest.py
from datetime import date

import pytest

from config import DisplaySettings


def fixed_clock(year, month, day):
    return lambda: date(year, month, day)


@pytest.fixture
def new_year_clock():
    """Meskerem 1, 2017 (11 September 2024)"""
    return fixed_clock(2024, 9, 11)


@pytest.fixture
def amharic_settings():
    return DisplaySettings(use_amharic=True)


@pytest.fixture
def english_settings():
    return DisplaySettings(use_amharic=False)
