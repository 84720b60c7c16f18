"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are inconsistent."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation matches a request."""

    pass
