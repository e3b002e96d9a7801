class AmlichError(Exception):
    """Base error."""

class InvalidSolarDate(AmlichError, ValueError):
    """Raised when (day, month, year) is not a real Gregorian date."""

class InvalidLunarDate(AmlichError, ValueError):
    """Raised when a lunar date label does not exist in the calendar."""

class UnsupportedRange(AmlichError, ValueError):
    """Raised when a year falls outside the range the calendar is built for."""

class LunarYearOutOfRange(InvalidLunarDate, UnsupportedRange):
    """Raised by lunar -> solar conversion for a lunar year outside the table range."""
