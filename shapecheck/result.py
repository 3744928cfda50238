from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import ValidationError


@dataclass(frozen=True)
class Result:
    """Outcome of a validation walk: either a validated value or the error that stopped it."""

    value: Any = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the validated value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def success(value: Any) -> Result:
    return Result(value=value)


def failure(error: ValidationError) -> Result:
    return Result(error=error)
