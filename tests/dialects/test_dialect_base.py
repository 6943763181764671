import pytest

from igniteorm.dialects import (
    DefaultDialect,
    DialectCapabilities,
    DialectFunctions,
    DialectOverrides,
    FunctionKind,
    IgniteDialect,
)
from igniteorm.errors import UnknownCapabilityError


def test_capabilities_have_seven_fixed_flags():
    assert DialectCapabilities.flag_names() == (
        "schemas",
        "sequences",
        "tablespaces",
        "initially_deferrable_columns",
        "auto_increment",
        "ddl_in_transaction",
        "primary_key_names",
    )


def test_capability_names_normalize():
    assert DialectCapabilities.normalize_flag("supportsDDLInTransaction") == "ddl_in_transaction"
    assert DialectCapabilities.normalize_flag("supports_schemas") == "schemas"
    assert DialectCapabilities.normalize_flag("autoincrement") == "auto_increment"
    with pytest.raises(UnknownCapabilityError):
        DialectCapabilities.normalize_flag("")
    with pytest.raises(KeyError):
        DialectCapabilities.normalize_flag("savepoints")


def test_capabilities_are_immutable():
    capabilities = DialectCapabilities()
    with pytest.raises(AttributeError):
        capabilities.schemas = False  # type: ignore[misc]


def test_default_dialect_object_name_policy():
    assert DefaultDialect().correct_object_name("Person") == "Person"
    assert DefaultDialect(unquoted_objects_are_uppercased=True).correct_object_name("Person") == "PERSON"
    assert DefaultDialect(unquoted_objects_are_uppercased=False).correct_object_name("Person") == "person"
    assert DefaultDialect(unquoted_objects_are_uppercased=True).correct_object_name('"Person"') == '"Person"'
    assert DefaultDialect().correct_object_name(None) is None


def test_function_lookup_falls_back_to_baseline():
    overrides = DialectOverrides(functions=DialectFunctions(sequence_next_value="NEXT VALUE FOR %s"))
    dialect = IgniteDialect(overrides=overrides)
    assert dialect.dialect_function(FunctionKind.SEQUENCE_NEXT_VALUE) == "NEXT VALUE FOR %s"
    assert dialect.dialect_function(FunctionKind.CURRENT_TIMESTAMP) == "CURRENT_TIMESTAMP"
    assert dialect.dialect_function(FunctionKind.SEQUENCE_CURRENT_VALUE) is None


def test_overrides_without_capabilities_use_baseline():
    dialect = IgniteDialect(overrides=DialectOverrides(priority=5))
    assert dialect.capabilities == DialectCapabilities()
    assert dialect.capability("schemas") is True
    assert dialect.priority == 5
    assert dialect.correct_object_name("person") == "person"


def test_synonym_kind():
    functions = DialectFunctions(
        current_date_synonyms=("CURRENT_DATE",),
        current_timestamp_synonyms=("NOW",),
    )
    assert functions.synonym_kind("current_date") is FunctionKind.CURRENT_DATE
    assert functions.synonym_kind(" now() ") is FunctionKind.CURRENT_TIMESTAMP
    assert functions.synonym_kind("CURTIME") is None


def test_default_dialect_baseline_values():
    baseline = DefaultDialect()
    assert baseline.unquoted_objects_are_uppercased is None
    assert baseline.unmodifiable_type_names == frozenset()
    assert baseline.capabilities == DialectCapabilities()
    assert baseline.functions.current_timestamp == "CURRENT_TIMESTAMP"
    assert IgniteDialect().unmodifiable_type_names == IgniteDialect().overrides.unmodifiable_type_names


def test_capabilities_as_dict():
    flags = IgniteDialect().capabilities.as_dict()
    assert list(flags) == list(DialectCapabilities.flag_names())
    assert flags["primary_key_names"] is True
    assert not any(value for name, value in flags.items() if name != "primary_key_names")
