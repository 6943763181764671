"""
Dialect building blocks: capability flags, function templates and the generic
baseline every concrete dialect is composed over.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Protocol

from ..errors import UnknownCapabilityError
from ..utils.naming import camel_to_snake

PRIORITY_DEFAULT = 1

_CAPABILITY_ALIASES = {
    "deferrable_columns": "initially_deferrable_columns",
    "autoincrement": "auto_increment",
    "ddl_in_transactions": "ddl_in_transaction",
}


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags the host consults before emitting DDL.
    """

    schemas: bool = True
    sequences: bool = True
    tablespaces: bool = True
    initially_deferrable_columns: bool = True
    auto_increment: bool = True
    ddl_in_transaction: bool = True
    primary_key_names: bool = True

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    @classmethod
    def normalize_flag(cls, flag: str) -> str:
        """
        Map ``primaryKeyNames``, ``primary-key-names`` or ``supports_schemas``
        style names onto the dataclass field name.
        """

        if not isinstance(flag, str) or not flag:
            raise UnknownCapabilityError(repr(flag), cls.flag_names())
        name = camel_to_snake(flag).replace("-", "_")
        if name.startswith("supports_"):
            name = name[len("supports_"):]
        name = _CAPABILITY_ALIASES.get(name, name)
        if name not in cls.flag_names():
            raise UnknownCapabilityError(flag, cls.flag_names())
        return name

    def get(self, flag: str) -> bool:
        return getattr(self, self.normalize_flag(flag))

    def as_dict(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in self.flag_names()}


class FunctionKind(str, Enum):
    CURRENT_TIMESTAMP = "currentTimestamp"
    SEQUENCE_NEXT_VALUE = "sequenceNextValue"
    SEQUENCE_CURRENT_VALUE = "sequenceCurrentValue"
    CURRENT_DATE = "currentDate"
    CURRENT_TIME = "currentTime"


@dataclass(frozen=True)
class DialectFunctions:
    """
    SQL templates for semantic functions plus the synonym tokens recognized
    as "current date/time/timestamp" when translating literals.

    ``None`` means "not set"; lookups fall back to the baseline dialect.
    """

    current_timestamp: str | None = None
    sequence_next_value: str | None = None
    sequence_current_value: str | None = None
    current_date_synonyms: tuple[str, ...] = ()
    current_time_synonyms: tuple[str, ...] = ()
    current_timestamp_synonyms: tuple[str, ...] = ()

    def lookup(self, kind: FunctionKind) -> str | None:
        if kind is FunctionKind.CURRENT_TIMESTAMP:
            return self.current_timestamp
        if kind is FunctionKind.SEQUENCE_NEXT_VALUE:
            return self.sequence_next_value
        if kind is FunctionKind.SEQUENCE_CURRENT_VALUE:
            return self.sequence_current_value
        if kind is FunctionKind.CURRENT_DATE:
            return self.current_date_synonyms[0] if self.current_date_synonyms else None
        if kind is FunctionKind.CURRENT_TIME:
            return self.current_time_synonyms[0] if self.current_time_synonyms else None
        return None

    @property
    def date_function_synonyms(self) -> tuple[str, ...]:
        return self.current_date_synonyms + self.current_time_synonyms + self.current_timestamp_synonyms

    def synonym_kind(self, token: str) -> FunctionKind | None:
        """
        Classify a literal token such as ``SYSDATE`` or ``NOW()``.
        """

        normalized = token.strip().upper()
        if normalized.endswith("()"):
            normalized = normalized[:-2]
        if normalized in self.current_date_synonyms:
            return FunctionKind.CURRENT_DATE
        if normalized in self.current_time_synonyms:
            return FunctionKind.CURRENT_TIME
        if normalized in self.current_timestamp_synonyms:
            return FunctionKind.CURRENT_TIMESTAMP
        return None


@dataclass(frozen=True)
class CatalogAndSchema:
    catalog_name: str | None = None
    schema_name: str | None = None


@dataclass(frozen=True)
class DefaultDialect:
    """
    Generic baseline shared by all dialects. Concrete dialects hold one of
    these plus a :class:`DialectOverrides` record and merge them on lookup.
    """

    # None leaves unquoted names as given, True upper-cases, False lower-cases.
    unquoted_objects_are_uppercased: bool | None = None
    capabilities: DialectCapabilities = field(default_factory=DialectCapabilities)
    functions: DialectFunctions = field(
        default_factory=lambda: DialectFunctions(current_timestamp="CURRENT_TIMESTAMP")
    )
    unmodifiable_type_names: frozenset[str] = frozenset()
    default_catalog_name: str | None = None
    default_schema_name: str | None = None
    priority: int = PRIORITY_DEFAULT

    def correct_object_name(self, name: str | None, object_type: str | None = None) -> str | None:
        if name is None:
            return None
        if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
            return name
        if self.unquoted_objects_are_uppercased is True:
            return name.upper()
        if self.unquoted_objects_are_uppercased is False:
            return name.lower()
        return name


@dataclass(frozen=True)
class DialectOverrides:
    """
    Dialect-specific values layered over a :class:`DefaultDialect`.

    Fields left as ``None`` defer to the baseline; type names are unioned.
    """

    unquoted_objects_are_uppercased: bool | None = None
    capabilities: DialectCapabilities | None = None
    functions: DialectFunctions = field(default_factory=DialectFunctions)
    unmodifiable_type_names: frozenset[str] = frozenset()
    priority: int | None = None


class DatabaseConnection(Protocol):
    """
    The slice of a live connection a dialect needs for identity checks.
    """

    def get_database_product_name(self) -> str: ...


class Dialect(Protocol):
    """
    Strategy interface consumed by the registry and the host's SQL generator.
    """

    @property
    def short_name(self) -> str: ...

    @property
    def priority(self) -> int: ...

    @property
    def param_style(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def matches_url(self, url: str) -> bool: ...

    def is_correct_database_implementation(self, connection: DatabaseConnection) -> bool: ...

    def is_reserved_word(self, identifier: str | None) -> bool: ...

    def capability(self, flag: str) -> bool: ...

    def dialect_function(self, kind: FunctionKind | str) -> str | None: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...


def coerce_function_kind(kind: Any) -> FunctionKind:
    if isinstance(kind, FunctionKind):
        return kind
    try:
        return FunctionKind(kind)
    except ValueError:
        pass
    if isinstance(kind, str):
        try:
            return FunctionKind[kind.upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown dialect function kind: {kind!r}")
