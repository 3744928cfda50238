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

"""JSON Schema export for shapecheck schema trees.

The exported document targets draft 2020-12 so it can be handed to tools
that only speak JSON Schema (editors, documentation generators, other
languages). Schemas JSON Schema cannot express at all (callables,
non-scalar literals) are rejected. JSON's own equality rules still apply to
the exported document: ``const: 1`` also matches ``1.0`` there, and table
key schemas only ever see string keys.
"""

from typing import Any, Dict, Optional

import jsonschema
from jsonschema.exceptions import SchemaError

from .exceptions import SchemaDefinitionError
from .kinds import Kind
from .paths import join_pointer
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

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"

_PRIMITIVE_TYPES = {
    Kind.INTEGER: {"type": "integer"},
    Kind.NUMBER: {"type": "number"},
    Kind.STRING: {"type": "string"},
    Kind.BOOLEAN: {"type": "boolean"},
    Kind.NULL: {"type": "null"},
    Kind.ANY: {},
    Kind.UNKNOWN: {},
}

_JSON_SCALARS = (str, int, float, bool, type(None))


def to_json_schema(schema: Schema, *, title: Optional[str] = None) -> Dict[str, Any]:
    """Render ``schema`` as a JSON Schema document.

    Args:
        schema: Root of the schema tree
        title: Optional ``title`` for the document

    Returns:
        JSON Schema dictionary, already checked against the draft 2020-12 meta-schema

    Raises:
        SchemaDefinitionError: If the tree contains something JSON Schema cannot describe
    """
    document: Dict[str, Any] = {"$schema": DRAFT_2020_12}
    if title is not None:
        document["title"] = title
    document.update(_render(schema, path=""))

    try:
        jsonschema.Draft202012Validator.check_schema(document)
    except SchemaError as exc:
        raise SchemaDefinitionError(f"Exported JSON Schema is invalid: {exc.message}") from exc
    return document


def _render(schema: Schema, *, path: str) -> Dict[str, Any]:
    if isinstance(schema, PrimitiveSchema):
        if schema.kind not in _PRIMITIVE_TYPES:
            raise SchemaDefinitionError(
                f"Cannot express '{schema.kind.value}' in JSON Schema (at '{path or '/'}')"
            )
        return dict(_PRIMITIVE_TYPES[schema.kind])

    if isinstance(schema, ObjectSchema):
        rendered: Dict[str, Any] = {
            "type": "object",
            "properties": {
                name: _render(child, path=join_pointer(path, name)) for name, child in schema.fields.items()
            },
            "additionalProperties": True,
        }
        if schema.fields:
            rendered["required"] = list(schema.fields)
        return rendered

    if isinstance(schema, ArraySchema):
        return {"type": "array", "items": _render(schema.item, path=join_pointer(path, "*"))}

    if isinstance(schema, TupleSchema):
        return {
            "type": "array",
            "prefixItems": [_render(child, path=join_pointer(path, idx)) for idx, child in enumerate(schema.items)],
            "items": False,
            "minItems": len(schema.items),
        }

    if isinstance(schema, UnionSchema):
        return {"anyOf": [_render(option, path=path) for option in schema.options]}

    if isinstance(schema, OptionalSchema):
        return {"anyOf": [_render(schema.inner, path=path), {"type": "null"}]}

    if isinstance(schema, TableSchema):
        rendered = {"type": "object"}
        if schema.key_schema is not None:
            rendered["propertyNames"] = _render(schema.key_schema, path=join_pointer(path, "<key>"))
        if schema.value_schema is not None:
            rendered["additionalProperties"] = _render(schema.value_schema, path=join_pointer(path, "*"))
        return rendered

    if isinstance(schema, LiteralSchema):
        if not isinstance(schema.expected, _JSON_SCALARS):
            raise SchemaDefinitionError(
                f"Cannot express literal of type {type(schema.expected).__name__} "
                f"in JSON Schema (at '{path or '/'}')"
            )
        return {"const": schema.expected}

    raise SchemaDefinitionError(f"Internal error: unknown schema type {type(schema).__name__}")
