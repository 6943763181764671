"""
Exception hierarchy for igniteorm.
"""

from __future__ import annotations


class IgniteORMError(Exception):
    """Base error for all igniteorm failures."""


class DialectError(IgniteORMError):
    """Base error for dialect definition and lookup failures."""


class UnknownCapabilityError(DialectError, KeyError):
    """Raised when a capability flag outside the fixed set is requested."""

    def __init__(self, flag: str, available: tuple[str, ...]) -> None:
        self.flag = flag
        self.available = available
        super().__init__(f"Unknown capability '{flag}'. Available: {', '.join(available)}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownDialectError(DialectError):
    """Raised when a registry has no dialect under the requested key."""


class DialectRegistrationError(DialectError):
    """Raised when a dialect cannot be added to a registry."""


class DialectMismatchError(DialectError):
    """Raised when no registered dialect accepts a connection."""


class DatabaseError(IgniteORMError):
    """Raised when a live connection cannot answer a dialect query."""


class ConnectionConfigurationError(IgniteORMError):
    """Raised when a connection URL or its environment source is invalid."""
