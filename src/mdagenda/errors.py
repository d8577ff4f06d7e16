"""Errors raised for invalid user input.

Annotation text found inside documents never raises: it is either parsed or
ignored. Only explicit query parameters and scan roots are validated strictly.
"""


class MdAgendaError(Exception):
    """Base class for all mdagenda errors."""

    pass


class AgendaError(MdAgendaError):
    """Raised when an agenda query cannot be evaluated."""

    pass


class InvalidTimezoneError(AgendaError):
    """Raised when a timezone name does not resolve to an IANA zone."""

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(
            f"Invalid timezone: {timezone}. Use IANA timezone names (e.g., 'Europe/Moscow', 'UTC')"
        )


class InvalidDateError(AgendaError):
    """Raised when an explicit query date is not a valid YYYY-MM-DD date."""

    pass


class DateRangeError(AgendaError):
    """Raised when an explicit week range is incomplete or reversed."""

    pass


class InvalidModeError(AgendaError):
    """Raised for an unknown agenda mode."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Invalid agenda mode '{mode}'. Valid modes: 'day', 'week', 'tasks'")


class InvalidDirectoryError(MdAgendaError):
    """Raised when the scan root is missing or not a directory."""

    pass
