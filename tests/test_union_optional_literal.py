import pytest

import shapecheck as s
from shapecheck import (
    KindMismatchError,
    LiteralMismatchError,
    SchemaDefinitionError,
    UnionExhaustedError,
)


def test_union_accepts_each_option() -> None:
    schema = s.union([s.string(), s.number()])
    assert schema.validate("hello") == "hello"
    assert schema.validate(42) == 42


def test_union_reports_every_option() -> None:
    schema = s.union([s.string(), s.number()])
    with pytest.raises(UnionExhaustedError) as exc_info:
        schema.validate(True)
    error = exc_info.value
    assert [index for index, _ in error.errors] == [0, 1]
    assert all(isinstance(option_error, KindMismatchError) for _, option_error in error.errors)
    assert str(error) == (
        "Union validation failed. Errors: "
        "Option 0: Expected string, got: True; Option 1: Expected number, got: True"
    )


def test_union_first_match_wins() -> None:
    wide = s.object({"id": s.integer()})
    narrow = s.object({"id": s.integer(), "name": s.string()})
    data = {"id": 1, "name": "x"}
    assert s.union([wide, narrow]).validate(data) == data

    data = (1, 2)
    assert s.union([s.any(), s.array(s.integer())]).validate(data) is data
    assert s.union([s.array(s.integer()), s.any()]).validate(data) == [1, 2]


def test_union_returns_the_winning_options_output() -> None:
    schema = s.union([s.array(s.integer()), s.string()])
    data = (1, 2)
    assert schema.validate(data) == [1, 2]


def test_union_nested_option_errors_keep_their_paths() -> None:
    schema = s.union([s.object({"a": s.integer()}), s.null()])
    with pytest.raises(UnionExhaustedError) as exc_info:
        schema.validate({"a": "x"})
    first = exc_info.value.errors[0][1]
    assert first.path == ("a",)


@pytest.mark.parametrize("options", [[], s.string(), "abc", [s.string(), None]])
def test_union_definition_errors(options) -> None:
    with pytest.raises(SchemaDefinitionError):
        s.union(options)


def test_optional() -> None:
    schema = s.optional(s.string())
    assert schema.validate(None) is None
    assert schema.validate("hello") == "hello"
    with pytest.raises(KindMismatchError, match="Expected string"):
        schema.validate(42)


def test_optional_does_not_consult_inner_for_none() -> None:
    schema = s.optional(s.null())
    assert schema.validate(None) is None
    assert s.optional(s.literal("x")).validate(None) is None


def test_literal_string_is_case_sensitive() -> None:
    schema = s.literal("success")
    assert schema.validate("success") == "success"
    with pytest.raises(LiteralMismatchError) as exc_info:
        schema.validate("Success")
    assert exc_info.value.expected == "success"
    assert str(exc_info.value) == "Expected literal value 'success', got: 'Success'"


def test_literal_number() -> None:
    schema = s.literal(42)
    assert schema.validate(42) == 42
    with pytest.raises(LiteralMismatchError):
        schema.validate(41)


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_literal_requires_same_type(value) -> None:
    with pytest.raises(LiteralMismatchError):
        s.literal(1).validate(value)


def test_literal_none_and_containers() -> None:
    assert s.literal(None).validate(None) is None
    assert s.literal((1, 2)).validate((1, 2)) == (1, 2)
    with pytest.raises(LiteralMismatchError):
        s.literal((1, 2)).validate([1, 2])


def test_schemas_compare_by_identity() -> None:
    one = s.literal(1)
    assert one == one
    assert one != s.literal(True)
    assert s.literal(1) != s.literal(1)
    assert s.object({"a": s.string()}) != s.object({"a": s.string()})


def test_every_schema_is_hashable() -> None:
    schemas = [
        s.object({"a": s.string()}),
        s.literal([1]),
        s.tuple([s.integer()]),
        s.union([s.string(), s.null()]),
        s.table(s.string(), s.any()),
    ]
    assert all(isinstance(hash(schema), int) for schema in schemas)
    lookup = {schema: index for index, schema in enumerate(schemas)}
    assert lookup[schemas[1]] == 1
    assert len({s.literal(1), s.literal(True)}) == 2
