"""Domain-specific exceptions for club_analytics.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from ClubAnalyticsError for easy catching.

The analytics queries themselves never raise for empty or degenerate data
(division by zero degrades to 0 or a non-finite value). These exceptions are
raised at the seams around the engine: configuration and input parsing.
"""


class ClubAnalyticsError(Exception):
    """Base exception for all club_analytics errors.

    Users can catch this exception to handle any error raised by the package.
    """

    pass


class ConfigError(ClubAnalyticsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided (e.g. a non-positive reward rate)
    - Environment variables cannot be parsed
    """

    pass


class DataQualityError(ClubAnalyticsError):
    """Raised when input data cannot be interpreted.

    This exception is raised when:
    - The export file is not valid JSON or has an unexpected shape
    - A transaction record has no parseable timestamp
    - A numeric field holds a non-numeric value
    """

    pass
