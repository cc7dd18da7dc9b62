"""
Configuration error types.

Raised by ConfigLoader, propagated unmodified by the Session Engine and
classified by the console entry point (all ConfigError subclasses are fatal).

Each class also derives from the matching built-in so callers can catch
FileNotFoundError / ValueError as before.
"""


class ConfigError(Exception):
    """Base class for unrecoverable configuration failures."""


class ConfigNotFoundError(ConfigError, FileNotFoundError):
    """Configuration source does not exist."""


class ConfigParseError(ConfigError, ValueError):
    """Configuration bytes are not well-formed JSON."""


class ConfigSchemaError(ConfigError, ValueError):
    """
    Configuration is well-formed but violates the document shape.

    Question-level violations name the 0-based question index in the message.
    """
