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

"""Runtime validation of untyped data against composable schemas.

Constructors are exposed at package level, so schemas are usually written as::

    import shapecheck as s

    schema = s.object({"name": s.string(), "age": s.integer()})
"""

import logging

__version__ = "0.1.0"

from .constructors import (
    any,
    array,
    boolean,
    func,
    integer,
    literal,
    null,
    number,
    object,
    optional,
    primitive,
    string,
    table,
    tuple,
    union,
    unknown,
)
from .exceptions import (
    DepthLimitError,
    DocumentLoadError,
    ExtraTupleElementError,
    KindMismatchError,
    LiteralMismatchError,
    MissingFieldError,
    MissingTupleElementError,
    NotAContainerError,
    SchemaDefinitionError,
    ShapecheckError,
    UnionExhaustedError,
    ValidationError,
)
from .config import SchemaConfig, schema_config
from .kinds import Kind
from .result import Result
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

logging.getLogger(__name__).addHandler(logging.NullHandler())
