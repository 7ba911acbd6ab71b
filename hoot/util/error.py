"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class SessionTokenError(UtilError):
    """Persisted session token could not be decoded."""

    pass
