"""
Apache Ignite dialect implementation.
"""

from __future__ import annotations

from typing import Any, Final

from ..errors import DatabaseError
from ..utils import get_logger
from ..utils.naming import is_plain_identifier
from .base import (
    CatalogAndSchema,
    DatabaseConnection,
    DefaultDialect,
    Dialect,
    DialectCapabilities,
    DialectFunctions,
    DialectOverrides,
    FunctionKind,
    coerce_function_kind,
)

PRODUCT_NAME: Final[str] = "Ignite"
IGNITE_DEFAULT_PORT: Final[int] = 10800
MINIMUM_DBMS_MAJOR_VERSION: Final[int] = 2
MINIMUM_DBMS_MINOR_VERSION: Final[int] = 8
THIN_DRIVER: Final[str] = "org.apache.ignite.IgniteJdbcThinDriver"

RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "CROSS",
        "CURRENT_DATE",
        "CURRENT_TIME",
        "CURRENT_TIMESTAMP",
        "DISTINCT",
        "EXCEPT",
        "EXISTS",
        "FALSE",
        "FETCH",
        "FOR",
        "FROM",
        "FULL",
        "GROUP",
        "HAVING",
        "INNER",
        "INTERSECT",
        "IS",
        "JOIN",
        "LIKE",
        "LIMIT",
        "MINUS",
        "NATURAL",
        "NOT",
        "NULL",
        "OFFSET",
        "ON",
        "ORDER",
        "PRIMARY",
        "ROWNUM",
        "SELECT",
        "SYSDATE",
        "SYSTIME",
        "SYSTIMESTAMP",
        "TODAY",
        "TRUE",
        "UNION",
        "UNIQUE",
        "WHERE",
    }
)

# H2 data types as documented at h2database.com/html/datatypes.html
_UNMODIFIABLE_TYPE_NAMES: Final[frozenset[str]] = frozenset(
    {
        "int",
        "integer",
        "mediumint",
        "int4",
        "signed",
        "boolean",
        "bit",
        "bool",
        "tinyint",
        "smallint",
        "int2",
        "year",
        "bigint",
        "int8",
        "identity",
        "float",
        "float8",
        "real",
        "float4",
        "time",
        "date",
        "timestamp",
        "datetime",
        "smalldatetime",
        "timestamp with time zone",
        "other",
        "uuid",
        "array",
        "geometry",
    }
)

IGNITE_OVERRIDES: Final[DialectOverrides] = DialectOverrides(
    unquoted_objects_are_uppercased=True,
    capabilities=DialectCapabilities(
        schemas=False,
        sequences=False,
        tablespaces=False,
        initially_deferrable_columns=False,
        auto_increment=False,
        ddl_in_transaction=False,
        primary_key_names=True,
    ),
    functions=DialectFunctions(
        current_timestamp="NOW()",
        sequence_next_value="NEXTVAL('%s')",
        sequence_current_value="CURRVAL('%s')",
        current_date_synonyms=("CURRENT_DATE", "CURDATE", "SYSDATE", "TODAY"),
        current_time_synonyms=("CURRENT_TIME", "CURTIME"),
        current_timestamp_synonyms=("CURRENT_TIMESTAMP", "NOW"),
    ),
    unmodifiable_type_names=_UNMODIFIABLE_TYPE_NAMES,
)


class IgniteDialect:
    """
    Apache Ignite dialect for the thin client protocol.

    Dialect data is fixed at import time; the only per-instance state is the
    connection handle passed to :meth:`set_connection`, used for delegated
    introspection.
    """

    product_name: Final[str] = PRODUCT_NAME
    default_port: Final[int] = IGNITE_DEFAULT_PORT
    url_prefixes: Final[tuple[str, ...]] = ("jdbc:ignite:thin",)
    reserved_words: Final[frozenset[str]] = RESERVED_WORDS
    minimum_version: Final[tuple[int, int]] = (MINIMUM_DBMS_MAJOR_VERSION, MINIMUM_DBMS_MINOR_VERSION)
    param_style: Final[str] = "qmark"
    jdbc_calls_catalogs_schemas: Final[bool] = True

    def __init__(
        self,
        *,
        baseline: DefaultDialect | None = None,
        overrides: DialectOverrides = IGNITE_OVERRIDES,
    ) -> None:
        self.baseline = baseline or DefaultDialect()
        self.overrides = overrides
        self._connection: DatabaseConnection | None = None
        self.logger = get_logger("dialects.ignite")

    # identity -----------------------------------------------------------

    @property
    def short_name(self) -> str:
        return self.product_name.lower()

    @property
    def priority(self) -> int:
        if self.overrides.priority is not None:
            return self.overrides.priority
        return self.baseline.priority

    def matches_url(self, url: str | None) -> bool:
        if not url:
            return False
        return any(url.startswith(prefix) for prefix in self.url_prefixes)

    def default_driver(self, url: str | None) -> str | None:
        if self.matches_url(url):
            return THIN_DRIVER
        return None

    def matches_product_name(self, reported_product_name: str | None) -> bool:
        return reported_product_name == self.product_name

    def is_correct_database_implementation(self, connection: DatabaseConnection) -> bool:
        """
        Check the product name reported by a live connection.

        Failures raised by the connection surface as :class:`DatabaseError`.
        """

        try:
            reported = connection.get_database_product_name()
        except DatabaseError:
            raise
        except Exception as exc:
            raise DatabaseError(
                f"Unable to read database product name from connection: {exc}"
            ) from exc
        matched = self.matches_product_name(reported)
        if not matched:
            self.logger.debug(
                "Connection reports product %r, expected %r", reported, self.product_name
            )
        return matched

    def supports_version(self, major: int, minor: int = 0) -> bool:
        return (major, minor) >= self.minimum_version

    # connection ---------------------------------------------------------

    @property
    def connection(self) -> DatabaseConnection | None:
        return self._connection

    def set_connection(self, connection: DatabaseConnection | None) -> None:
        self._connection = connection
        if connection is not None:
            self.logger.debug("Ignite dialect bound to connection %r", connection)

    # static dialect data ------------------------------------------------

    @property
    def capabilities(self) -> DialectCapabilities:
        return self.overrides.capabilities or self.baseline.capabilities

    def capability(self, flag: str) -> bool:
        return self.capabilities.get(flag)

    def supports_schemas(self) -> bool:
        return self.capabilities.schemas

    def supports_sequences(self) -> bool:
        return self.capabilities.sequences

    def supports_tablespaces(self) -> bool:
        return self.capabilities.tablespaces

    def supports_initially_deferrable_columns(self) -> bool:
        return self.capabilities.initially_deferrable_columns

    def supports_auto_increment(self) -> bool:
        return self.capabilities.auto_increment

    def supports_ddl_in_transaction(self) -> bool:
        return self.capabilities.ddl_in_transaction

    def supports_primary_key_names(self) -> bool:
        return self.capabilities.primary_key_names

    def dialect_function(self, kind: FunctionKind | str) -> str | None:
        resolved = coerce_function_kind(kind)
        value = self.overrides.functions.lookup(resolved)
        if value is None:
            value = self.baseline.functions.lookup(resolved)
        return value

    @property
    def current_date_time_function(self) -> str | None:
        return self.dialect_function(FunctionKind.CURRENT_TIMESTAMP)

    @property
    def date_functions(self) -> tuple[str, ...]:
        return (
            self.baseline.functions.date_function_synonyms
            + self.overrides.functions.date_function_synonyms
        )

    def is_date_function(self, token: str) -> bool:
        return self.overrides.functions.synonym_kind(token) is not None or (
            self.baseline.functions.synonym_kind(token) is not None
        )

    @property
    def unmodifiable_type_names(self) -> frozenset[str]:
        return self.baseline.unmodifiable_type_names | self.overrides.unmodifiable_type_names

    def is_unmodifiable_type(self, type_name: str) -> bool:
        return type_name.strip().lower() in self.unmodifiable_type_names

    def is_reserved_word(self, identifier: str | None) -> bool:
        if not identifier:
            return False
        return identifier.upper() in self.reserved_words

    # naming -------------------------------------------------------------

    @property
    def unquoted_objects_are_uppercased(self) -> bool | None:
        if self.overrides.unquoted_objects_are_uppercased is not None:
            return self.overrides.unquoted_objects_are_uppercased
        return self.baseline.unquoted_objects_are_uppercased

    def correct_object_name(self, name: str | None, object_type: str | None = None) -> str | None:
        policy = DefaultDialect(unquoted_objects_are_uppercased=self.unquoted_objects_are_uppercased)
        return policy.correct_object_name(name, object_type)

    def jdbc_catalog_name(self, schema: CatalogAndSchema | None = None) -> str | None:
        return None

    def jdbc_schema_name(self, schema: CatalogAndSchema) -> str | None:
        name = schema.catalog_name if schema.catalog_name is not None else schema.schema_name
        return self.correct_object_name(name, "schema")

    @property
    def default_catalog_name(self) -> str | None:
        baseline = getattr(self._connection, "default_catalog_name", None)
        if baseline is None:
            baseline = self.baseline.default_catalog_name
        return None if baseline is None else baseline.upper()

    # SQL rendering ------------------------------------------------------

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def escape_object_name(self, name: str) -> str:
        if self.is_reserved_word(name) or not is_plain_identifier(name):
            return self.quote_identifier(name)
        return name

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.escape_object_name(schema)}.{self.escape_object_name(table)}"
        return self.escape_object_name(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.escape_object_name(column)} {column_type}{null_clause}"

    def concat(self, *values: Any) -> str:
        return "CONCAT(" + ", ".join(str(value) for value in values) + ")"

    def __repr__(self) -> str:
        return f"IgniteDialect(short_name={self.short_name!r}, port={self.default_port})"


def get_ignite_dialect() -> Dialect:
    return IgniteDialect()
