# utils/errors.py


class ZemenbarError(ValueError):
    """Base class for every error raised by the calendar core."""


class InvalidDate(ZemenbarError):
    """Day (or year) out of range for the Ethiopian month."""


class InvalidMonth(ZemenbarError):
    """Month outside 1..13."""


class OutOfRange(ZemenbarError):
    """Index outside one of the fixed name tables."""


class InvalidInput(ZemenbarError):
    """Ge'ez numerals have no zero or negative numbers."""


class MissingCurrentDate(ZemenbarError):
    """Formatter called without a current date."""


class InvalidSettings(ZemenbarError):
    """Display settings payload has unknown keys or non-boolean values."""


class UnknownCommand(ZemenbarError):
    """No operation registered under the requested name."""
