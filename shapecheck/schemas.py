from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

from . import config as _config
from .config import SchemaConfig
from .exceptions import (
    DepthLimitError,
    ExtraTupleElementError,
    KindMismatchError,
    LiteralMismatchError,
    MissingFieldError,
    MissingTupleElementError,
    NotAContainerError,
    SchemaDefinitionError,
    UnionExhaustedError,
    ValidationError,
)
from .kinds import Kind, is_mapping, is_sequence, matches_kind
from .paths import describe_value, type_label
from .result import Result, failure, success

logger = logging.getLogger(__name__)


class Schema(ABC):
    """A validation rule.

    ``validate`` returns the validated value or raises :class:`ValidationError`.
    ``safe_validate`` runs the same walk and returns a :class:`Result` instead.
    Subclasses implement ``_check``, which never raises for invalid input:
    failures travel upward as ``Result`` values so that unions can collect
    every candidate's rejection.
    """

    def validate(self, value: Any, *, config: Optional[SchemaConfig] = None) -> Any:
        return self.safe_validate(value, config=config).unwrap()

    def safe_validate(self, value: Any, *, config: Optional[SchemaConfig] = None) -> Result:
        return self._check(value, config or _config.schema_config, 0)

    @abstractmethod
    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        ...

    @staticmethod
    def _child(schema: "Schema", value: Any, config: SchemaConfig, depth: int) -> Result:
        if depth >= config.depth_limit:
            return failure(DepthLimitError(f"Schema nesting exceeds depth limit {config.depth_limit}"))
        return schema._check(value, config, depth + 1)


def _require_schema(candidate: Any, where: str) -> "Schema":
    if not isinstance(candidate, Schema):
        raise SchemaDefinitionError(f"{where} must be a schema, got: {type_label(candidate)}")
    return candidate


def _require_schemas(candidates: Any, where: str) -> Tuple["Schema", ...]:
    if isinstance(candidates, Schema) or not isinstance(candidates, Sequence) or isinstance(candidates, str):
        raise SchemaDefinitionError(f"{where} expects a list of schemas, got: {type_label(candidates)}")
    if not candidates:
        raise SchemaDefinitionError(f"{where} requires at least one schema")
    return tuple(_require_schema(c, f"{where} entry {i}") for i, c in enumerate(candidates))


@dataclass(frozen=True, eq=False)
class PrimitiveSchema(Schema):
    kind: Kind

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if matches_kind(self.kind, value):
            return success(value)
        if self.kind is Kind.FUNCTION:
            shown = type_label(value)
        else:
            shown = describe_value(value, config.repr_limit)
        return failure(KindMismatchError(f"Expected {self.kind.value}, got: {shown}"))


@dataclass(frozen=True, eq=False)
class ObjectSchema(Schema):
    """Mapping with declared fields; undeclared keys are passed through unvalidated."""

    fields: Mapping[str, Schema]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise SchemaDefinitionError(f"object() expects a mapping of fields, got: {type_label(self.fields)}")
        fields: Dict[str, Schema] = {}
        for name, schema in self.fields.items():
            if not isinstance(name, str):
                raise SchemaDefinitionError(f"object() field names must be strings, got: {name!r}")
            fields[name] = _require_schema(schema, f"object() field '{name}'")
        object.__setattr__(self, "fields", MappingProxyType(fields))

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if not is_mapping(value):
            return failure(NotAContainerError(f"Expected object, got: {type_label(value)}"))

        validated: Dict[Any, Any] = {}

        for name, schema in self.fields.items():
            # Presence is checked before the child runs, so optional() does not make a key omittable.
            if name not in value:
                return failure(MissingFieldError(name, (name,)))
            result = self._child(schema, value[name], config, depth)
            if not result.ok:
                # A None the field schema refuses is an absent value, not a wrong kind.
                if value[name] is None and not isinstance(result.error, DepthLimitError):
                    return failure(MissingFieldError(name, (name,)))
                return failure(result.error.with_prefix(name))
            validated[name] = result.value

        for key, item in value.items():
            if key not in self.fields:
                validated[key] = item

        return success(validated)


@dataclass(frozen=True, eq=False)
class ArraySchema(Schema):
    item: Schema

    def __post_init__(self) -> None:
        _require_schema(self.item, "array() item")

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if not is_sequence(value):
            return failure(NotAContainerError(f"Expected array, got: {type_label(value)}"))

        validated: List[Any] = []
        for index, item in enumerate(value):
            result = self._child(self.item, item, config, depth)
            if not result.ok:
                return failure(result.error.with_prefix(index))
            validated.append(result.value)
        return success(validated)


@dataclass(frozen=True, eq=False)
class TupleSchema(Schema):
    """Fixed-length sequence; unlike ArraySchema the length is enforced exactly."""

    items: Tuple[Schema, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _require_schemas(self.items, "tuple()"))

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if not is_sequence(value):
            return failure(NotAContainerError(f"Expected tuple, got: {type_label(value)}"))

        validated: List[Any] = []
        for index, schema in enumerate(self.items):
            if index >= len(value):
                return failure(MissingTupleElementError(index, (index,)))
            result = self._child(schema, value[index], config, depth)
            if not result.ok:
                return failure(result.error.with_prefix(index))
            validated.append(result.value)

        if len(value) > len(self.items):
            extra = len(self.items)
            return failure(ExtraTupleElementError(extra, (extra,)))

        return success(validated)


@dataclass(frozen=True, eq=False)
class UnionSchema(Schema):
    """Ordered alternation: the first option that accepts the value wins."""

    options: Tuple[Schema, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _require_schemas(self.options, "union()"))

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        errors: List[Tuple[int, ValidationError]] = []
        for index, option in enumerate(self.options):
            result = self._child(option, value, config, depth)
            if result.ok:
                return result
            logger.debug(f"Union option {index} rejected value: {result.error}")
            errors.append((index, result.error))
        return failure(UnionExhaustedError(errors))


@dataclass(frozen=True, eq=False)
class OptionalSchema(Schema):
    inner: Schema

    def __post_init__(self) -> None:
        _require_schema(self.inner, "optional() inner")

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if value is None:
            return success(None)
        return self._child(self.inner, value, config, depth)


@dataclass(frozen=True, eq=False)
class TableSchema(Schema):
    """Mapping whose keys and values are each checked by an optional schema.

    With neither schema given, any mapping is accepted and returned as is.
    """

    key_schema: Optional[Schema] = None
    value_schema: Optional[Schema] = None

    def __post_init__(self) -> None:
        if self.key_schema is not None:
            _require_schema(self.key_schema, "table() key")
        if self.value_schema is not None:
            _require_schema(self.value_schema, "table() value")

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        if not is_mapping(value):
            return failure(NotAContainerError(f"Expected table, got: {type_label(value)}"))

        if self.key_schema is None and self.value_schema is None:
            return success(value)

        validated: Dict[Any, Any] = {}
        for entry_key, entry_value in value.items():
            new_key = entry_key
            if self.key_schema is not None:
                result = self._child(self.key_schema, entry_key, config, depth)
                if not result.ok:
                    return failure(result.error.with_prefix(entry_key))
                new_key = result.value

            new_value = entry_value
            if self.value_schema is not None:
                result = self._child(self.value_schema, entry_value, config, depth)
                if not result.ok:
                    return failure(result.error.with_prefix(entry_key))
                new_value = result.value

            if not isinstance(new_key, Hashable):
                return failure(
                    KindMismatchError(
                        f"Validated key must be hashable, got: {type_label(new_key)}",
                        (entry_key,),
                    )
                )
            validated[new_key] = new_value
        return success(validated)


@dataclass(frozen=True, eq=False)
class LiteralSchema(Schema):
    expected: Any

    def _check(self, value: Any, config: SchemaConfig, depth: int) -> Result:
        # type identity first: 1 == True and 1 == 1.0 must not match
        if type(value) is type(self.expected) and value == self.expected:
            return success(value)
        return failure(
            LiteralMismatchError(
                f"Expected literal value {describe_value(self.expected, config.repr_limit)}, "
                f"got: {describe_value(value, config.repr_limit)}",
                self.expected,
            )
        )
