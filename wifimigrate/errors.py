"""Exceptions raised by the migration core."""


class MigrationError(Exception):
    """Base class for all migration failures."""

    pass


class InvalidArgumentError(MigrationError, ValueError):
    """Raised when a builder receives a missing or mistyped value."""

    pass


class MalformedTransferDataError(MigrationError, ValueError):
    """Raised when a transferred byte sequence cannot be decoded."""

    pass


class SettingsUnavailableError(MigrationError):
    """Raised when the live settings cannot be read, e.g. no device is reachable."""

    pass
