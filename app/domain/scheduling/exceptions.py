"""Scheduling domain errors"""


class ConfigurationError(Exception):
    """The business-hours configuration is missing fields or holds invalid values.

    This is a server-side fault (fix the settings), never a rejected booking.
    """
