"""Exceptions raised when inputs or tracker settings are outside the valid domain."""


class InvalidInputError(ValueError):
    """Raised when a time/location input does not denote a valid instant or place."""


class InvalidConfigurationError(ValueError):
    """Raised when a tracker or simulation configuration is physically meaningless."""
