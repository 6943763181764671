"""
igniteorm public package initialization.

Exposes the Apache Ignite dialect, the dialect registry and the connection
configuration helpers.
"""

from .connection import ConnectionConfig, DatabaseConnection, JdbcUrl, parse_jdbc_url  # noqa: F401
from .dialects import (
    CatalogAndSchema,
    DefaultDialect,
    Dialect,
    DialectCapabilities,
    DialectFunctions,
    DialectOverrides,
    DialectRegistry,
    FunctionKind,
    IgniteDialect,
    default_registry,
)  # noqa: F401
from .errors import (
    ConnectionConfigurationError,
    DatabaseError,
    DialectError,
    DialectMismatchError,
    DialectRegistrationError,
    IgniteORMError,
    UnknownCapabilityError,
    UnknownDialectError,
)  # noqa: F401

__all__ = [
    "CatalogAndSchema",
    "ConnectionConfig",
    "ConnectionConfigurationError",
    "DatabaseConnection",
    "DatabaseError",
    "DefaultDialect",
    "Dialect",
    "DialectCapabilities",
    "DialectError",
    "DialectFunctions",
    "DialectMismatchError",
    "DialectOverrides",
    "DialectRegistrationError",
    "DialectRegistry",
    "FunctionKind",
    "IgniteDialect",
    "IgniteORMError",
    "JdbcUrl",
    "UnknownCapabilityError",
    "UnknownDialectError",
    "default_registry",
    "parse_jdbc_url",
]
