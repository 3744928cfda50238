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

"""Custom exceptions for shapecheck."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .paths import PathToken, format_dotted, format_pointer
from .source_location import SourceLocation, format_source


class ShapecheckError(Exception):
    """Base exception for shapecheck related errors."""
    pass


class SchemaDefinitionError(ShapecheckError):
    """Exception raised when a schema is constructed or exported incorrectly."""
    pass


class DocumentLoadError(ShapecheckError):
    """Exception raised when a document cannot be read or parsed."""
    pass


class ValidationError(ShapecheckError):
    """Exception raised when a value does not conform to a schema.

    ``path`` holds the field names and indices leading from the validated
    root to the offending value. Composites prepend their own token while the
    error travels upward, so the final path is root-first.
    """

    kind = "validation"

    def __init__(self, message: str, path: Tuple[PathToken, ...] = ()):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)
        # Filled in by the document loader when a source map is available.
        self.location: Optional[SourceLocation] = None

    def with_prefix(self, token: PathToken) -> "ValidationError":
        """Return this error with ``token`` prepended to its path."""
        self.path = (token,) + self.path
        return self

    @property
    def pointer(self) -> str:
        return format_pointer(self.path)

    @property
    def dotted_path(self) -> str:
        return format_dotted(self.path)

    def __str__(self) -> str:
        text = self.message
        if self.path:
            text = f"{self.dotted_path}: {text}"
        return text + format_source(self.location)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, path={self.path!r})"


class KindMismatchError(ValidationError):
    """The value's runtime kind does not match a primitive schema."""

    kind = "kind_mismatch"


class NotAContainerError(ValidationError):
    """The value is not the mapping or sequence a composite expects."""

    kind = "not_a_container"


class MissingFieldError(ValidationError):
    """A declared object field is absent from the input mapping."""

    kind = "missing_field"

    def __init__(self, field: Any, path: Tuple[PathToken, ...] = ()):
        super().__init__(f"Missing required field: {field}", path)
        self.field = field


class MissingTupleElementError(ValidationError):
    """A tuple position has no corresponding input element.

    ``index`` is 0-based, like Python indexing: the first missing position
    of a three-item tuple given one element is index 1.
    """

    kind = "missing_tuple_element"

    def __init__(self, index: int, path: Tuple[PathToken, ...] = ()):
        super().__init__(f"Missing tuple element at index {index}", path)
        self.index = index


class ExtraTupleElementError(ValidationError):
    """A tuple input is longer than the schema declares.

    ``index`` is the 0-based position of the first surplus element, which
    equals the declared tuple length.
    """

    kind = "extra_tuple_element"

    def __init__(self, index: int, path: Tuple[PathToken, ...] = ()):
        super().__init__(f"Unexpected extra element at index {index}", path)
        self.index = index


class UnionExhaustedError(ValidationError):
    """No union candidate accepted the value.

    ``errors`` keeps every candidate's rejection, in candidate order, as
    ``(index, error)`` pairs with 0-based option indices.
    """

    kind = "union_exhausted"

    def __init__(
        self,
        errors: List[Tuple[int, ValidationError]],
        path: Tuple[PathToken, ...] = (),
    ):
        details = "; ".join(f"Option {index}: {error}" for index, error in errors)
        super().__init__(f"Union validation failed. Errors: {details}", path)
        self.errors = list(errors)


class LiteralMismatchError(ValidationError):
    """The value is not exactly the literal constant."""

    kind = "literal_mismatch"

    def __init__(self, message: str, expected: Any, path: Tuple[PathToken, ...] = ()):
        super().__init__(message, path)
        self.expected = expected


class DepthLimitError(ValidationError):
    """Validation recursed deeper than the configured limit."""

    kind = "depth_limit"
