"""
Dialect strategy registry.
"""

from .base import (
    CatalogAndSchema,
    DefaultDialect,
    Dialect,
    DialectCapabilities,
    DialectFunctions,
    DialectOverrides,
    FunctionKind,
)
from .ignite import IgniteDialect
from .registry import DialectRegistry, default_registry

__all__ = [
    "CatalogAndSchema",
    "DefaultDialect",
    "Dialect",
    "DialectCapabilities",
    "DialectFunctions",
    "DialectOverrides",
    "DialectRegistry",
    "FunctionKind",
    "IgniteDialect",
    "default_registry",
]
