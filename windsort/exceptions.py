"""Exception hierarchy for windsort."""


class WindSortError(Exception):
    """Base exception for all windsort errors."""


class ConfigError(WindSortError, ValueError):
    """Raised when a configuration file or option is invalid."""
