"""Custom exceptions for currency input configuration."""


class CurrencyInputError(Exception):
    """Base class for errors raised while configuring a currency field."""


class UnknownLocaleError(CurrencyInputError, ValueError):
    """Raised when a locale identifier is not known to Babel."""


class InvalidConfigError(CurrencyInputError, ValueError):
    """Raised when a configuration value is out of range or malformed."""
