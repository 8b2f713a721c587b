# utils/geez.py
from utils.errors import InvalidInput, OutOfRange

GEEZ_ONES = ["", "፩", "፪", "፫", "፬", "፭", "፮", "፯", "፰", "፱"]
GEEZ_TENS = ["", "፲", "፳", "፴", "፵", "፶", "፷", "፸", "፹", "፺"]
GEEZ_HUNDRED = "፻"
GEEZ_TEN_THOUSAND = "፼"

QEN = "ቀን"  # "day", written before the year
AMETE_MIHRET = "ዓ.ም."

AMHARIC_MONTHS = {
    1: "መስከረም", 2: "ጥቅምት", 3: "ኅዳር",
    4: "ታኅሣሥ", 5: "ጥር", 6: "የካቲት",
    7: "መጋቢት", 8: "ሚያዝያ", 9: "ግንቦት",
    10: "ሰኔ", 11: "ሐምሌ", 12: "ነሐሴ",
    13: "ጳጉሜ"
}

ENGLISH_MONTHS = {
    1: "Meskerem", 2: "Tikimt", 3: "Hidar",
    4: "Tahsas", 5: "Tir", 6: "Yekatit",
    7: "Megabit", 8: "Miazia", 9: "Ginbot",
    10: "Sene", 11: "Hamle", 12: "Nehase",
    13: "Pagume"
}

# Sunday first, matching the grid's column order
AMHARIC_DAYS = {
    0: "እሁድ", 1: "ሰኞ", 2: "ማክሰኞ",
    3: "ረቡዕ", 4: "ሐሙስ", 5: "ዓርብ", 6: "ቅዳሜ"
}

ENGLISH_DAYS = {
    0: "Sunday", 1: "Monday", 2: "Tuesday",
    3: "Wednesday", 4: "Thursday", 5: "Friday", 6: "Saturday"
}

AMHARIC = "amharic"
ENGLISH = "english"

_LANGUAGE_ALIASES = {
    "amharic": AMHARIC, "am": AMHARIC,
    "english": ENGLISH, "en": ENGLISH,
}

# How many characters of the month name survive in the compact tray text
ABBREVIATION_LENGTH = {AMHARIC: 2, ENGLISH: 3}


def _language(language):
    key = language.strip().lower() if isinstance(language, str) else language
    if key not in _LANGUAGE_ALIASES:
        raise OutOfRange(f"Unknown language: {language!r}")
    return _LANGUAGE_ALIASES[key]


def _below_hundred(n):
    tens, ones = divmod(n, 10)
    return GEEZ_TENS[tens] + GEEZ_ONES[ones]


def to_geez(n):
    """
    Convert a positive integer to Ge'ez numerals.

    The system is additive: 10000s, 100s, tens and units each get their own
    glyphs, joined without separators. A multiplier of one in front of the
    hundred or ten-thousand glyph is never written, so 100 is "፻" and
    10000 is "፼".
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInput(f"Ge'ez numerals need an integer, got {n!r}")
    if n <= 0:
        raise InvalidInput(f"Ge'ez numerals have no representation for {n}")

    if n < 100:
        return _below_hundred(n)

    if n < 10000:
        hundreds, rest = divmod(n, 100)
        text = "" if hundreds == 1 else _below_hundred(hundreds)
        text += GEEZ_HUNDRED
    else:
        myriads, rest = divmod(n, 10000)
        text = "" if myriads == 1 else to_geez(myriads)
        text += GEEZ_TEN_THOUSAND

    if rest:
        text += to_geez(rest)
    return text


def year_to_geez(year):
    """Ge'ez numeral for an Ethiopian year (e.g. 2017 -> ፳፻፲፯)"""
    return to_geez(year)


def month_name(month, language=AMHARIC):
    """Month name for 1..13 in Amharic or English"""
    table = AMHARIC_MONTHS if _language(language) == AMHARIC else ENGLISH_MONTHS
    if isinstance(month, bool) or month not in table:
        raise OutOfRange(f"Month index out of range: {month!r}")
    return table[month]


def weekday_name(weekday, language=AMHARIC):
    """Weekday name for 0..6, Sunday = 0"""
    table = AMHARIC_DAYS if _language(language) == AMHARIC else ENGLISH_DAYS
    if isinstance(weekday, bool) or weekday not in table:
        raise OutOfRange(f"Weekday index out of range: {weekday!r}")
    return table[weekday]


def abbreviate_month(month, language=AMHARIC):
    """First 2 (Amharic) or 3 (English) characters of the month name"""
    lang = _language(language)
    return month_name(month, lang)[:ABBREVIATION_LENGTH[lang]]
