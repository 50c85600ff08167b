class LuachError(Exception):
    """Base error."""

class DateOutOfRangeError(LuachError, ValueError):
    """Raised when a date lies outside the supported horizon (0000-01-01 .. 2050-12-31)."""

class InvalidDateFormatError(LuachError, ValueError):
    """Raised when a string or (year, month, day) triple is not a calendar date."""

class DateRangeError(LuachError, ValueError):
    """Raised for an inverted or over-long span of dates."""

class InvalidLocationError(LuachError, ValueError):
    """Raised when a GeoLocation would be constructed with bad coordinates."""

class InvalidLatitudeError(InvalidLocationError):
    def __init__(self, latitude: float):
        super().__init__(f"Invalid latitude: {latitude}. Must be between -90 and 90.")
        self.latitude = latitude

class InvalidLongitudeError(InvalidLocationError):
    def __init__(self, longitude: float):
        super().__init__(f"Invalid longitude: {longitude}. Must be between -180 and 180.")
        self.longitude = longitude

class CalculationError(LuachError):
    """Raised when a calendar precondition is violated (e.g. month 13 in a common year)."""

class ConfigError(LuachError):
    """Raised when the configuration file cannot be parsed."""
