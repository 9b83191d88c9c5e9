"""Exceptions for tabstijl."""

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class TabstijlError(Exception):
    """
    Base exception for all tabstijl errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ValidationError(TabstijlError):
    """
    Raised when a configuration value is rejected.

    The rendering core only ever receives validated values; this error is
    raised while the configuration is being built.

    Attributes:
        field: Name of the offending configuration field
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class ConfigFileError(TabstijlError):
    """Raised when a YAML defaults file cannot be read or has the wrong shape."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load config file {path}: {reason}")
