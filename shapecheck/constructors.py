# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Schema constructors.

Several names here (``object``, ``tuple``, ``any``) intentionally shadow
builtins so that schemas read the way they are used::

    import shapecheck as s

    user = s.object({
        "name": s.string(),
        "age": s.integer(),
        "tags": s.array(s.string()),
    })
    user.validate({"name": "Alice", "age": 30, "tags": []})

This module therefore must not rely on those builtins itself.
"""

from typing import Any as _Any, Mapping, Optional, Sequence

from .exceptions import SchemaDefinitionError
from .kinds import Kind, normalize_kind_name
from .schemas import (
    ArraySchema,
    LiteralSchema,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    Schema,
    TableSchema,
    TupleSchema,
    UnionSchema,
)

# Primitive schemas carry no state, so one instance per kind is shared.
_PRIMITIVES = {kind: PrimitiveSchema(kind) for kind in Kind}


def primitive(kind_name) -> PrimitiveSchema:
    """Return the primitive schema for a kind name such as ``"int"`` or ``"string"``."""
    kind = normalize_kind_name(kind_name)
    if kind is None:
        raise SchemaDefinitionError(f"Unknown primitive kind: {kind_name!r}")
    return _PRIMITIVES[kind]


def integer() -> PrimitiveSchema:
    return _PRIMITIVES[Kind.INTEGER]


def number() -> PrimitiveSchema:
    return _PRIMITIVES[Kind.NUMBER]


def string() -> PrimitiveSchema:
    return _PRIMITIVES[Kind.STRING]


def boolean() -> PrimitiveSchema:
    return _PRIMITIVES[Kind.BOOLEAN]


def null() -> PrimitiveSchema:
    """Accepts only None."""
    return _PRIMITIVES[Kind.NULL]


def func() -> PrimitiveSchema:
    """Accepts any callable."""
    return _PRIMITIVES[Kind.FUNCTION]


def any() -> PrimitiveSchema:
    return _PRIMITIVES[Kind.ANY]


def unknown() -> PrimitiveSchema:
    """Same behavior as any(); signals a value that still needs checking downstream."""
    return _PRIMITIVES[Kind.UNKNOWN]


def object(fields: Mapping[str, Schema]) -> ObjectSchema:
    """Mapping schema. Every declared field must be present; extra keys are kept as is."""
    return ObjectSchema(fields)


def array(item: Schema) -> ArraySchema:
    return ArraySchema(item)


def tuple(items: Sequence[Schema]) -> TupleSchema:
    """Fixed-length sequence schema, one schema per position."""
    return TupleSchema(items)


def union(options: Sequence[Schema]) -> UnionSchema:
    """First option (in order) that accepts the value wins."""
    return UnionSchema(options)


def optional(inner: Schema) -> OptionalSchema:
    return OptionalSchema(inner)


def table(key: Optional[Schema] = None, value: Optional[Schema] = None) -> TableSchema:
    """Mapping schema over arbitrary keys.

    ``table()`` accepts any mapping unchanged; ``table(string(), number())``
    checks every key and value.
    """
    return TableSchema(key, value)


def literal(value: _Any) -> LiteralSchema:
    return LiteralSchema(value)
