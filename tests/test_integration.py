import pytest

import shapecheck as s
from shapecheck import MissingFieldError, UnionExhaustedError


@pytest.fixture
def account():
    return s.object(
        {
            "user": s.object({"name": s.string(), "age": s.integer()}),
            "status": s.union([s.literal("active"), s.literal("inactive")]),
            "tags": s.array(s.string()),
        }
    )


def test_nested_schema_accepts_matching_input(account) -> None:
    data = {
        "user": {"name": "Alice", "age": 30},
        "status": "active",
        "tags": ["admin", "user"],
        "created": "2024-01-01",
    }
    result = account.validate(data)
    assert result["user"]["name"] == "Alice"
    assert result["user"]["age"] == 30
    assert result["status"] == "active"
    assert result["tags"][0] == "admin"
    assert result["created"] == "2024-01-01"
    assert result["user"] is not data["user"]


def test_nested_schema_rejects_unknown_status(account) -> None:
    with pytest.raises(UnionExhaustedError) as exc_info:
        account.validate({"user": {"name": "A", "age": 1}, "status": "deleted", "tags": []})
    assert exc_info.value.path == ("status",)
    assert len(exc_info.value.errors) == 2


def test_graceful_error_handling() -> None:
    user_schema = s.object({"name": s.string(), "age": s.integer()})

    def parse_user(data):
        result = user_schema.safe_validate(data)
        if result.ok:
            return result.value, None
        return None, str(result.error)

    user, err = parse_user({"name": "Bob", "age": 30})
    assert err is None
    assert user == {"name": "Bob", "age": 30}

    user, err = parse_user({"name": "Bob"})
    assert user is None
    assert "Missing required field" in err


def test_catching_validation_errors() -> None:
    schema = s.object({"config": s.table(s.string(), s.union([s.number(), s.string()]))})
    assert schema.validate({"config": {"retries": 3, "mode": "fast"}}) == {
        "config": {"retries": 3, "mode": "fast"}
    }
    with pytest.raises(s.ValidationError) as exc_info:
        schema.validate({"config": {"retries": [3]}})
    assert exc_info.value.dotted_path == "config.retries"

    with pytest.raises(MissingFieldError):
        schema.validate({})


def test_tuple_of_optional_and_literals() -> None:
    point = s.tuple([s.literal("point"), s.number(), s.number(), s.optional(s.number())])
    assert point.validate(["point", 1, 2.5, None]) == ["point", 1, 2.5, None]
    with pytest.raises(s.ValidationError) as exc_info:
        point.validate(["point", 1, 2.5])
    assert isinstance(exc_info.value, s.MissingTupleElementError)


def test_schemas_are_reusable_across_calls(account) -> None:
    for age in range(5):
        data = {"user": {"name": "A", "age": age}, "status": "inactive", "tags": []}
        assert account.validate(data)["user"]["age"] == age
