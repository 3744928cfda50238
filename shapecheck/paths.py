from __future__ import annotations

import reprlib
from typing import Any, Iterable, Union

JsonPointer = str
PathToken = Union[str, int]


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_pointer(base: JsonPointer, token: PathToken) -> JsonPointer:
    if not base:
        return f"/{_jp_escape(str(token))}"
    return f"{base}/{_jp_escape(str(token))}"


def format_pointer(path: Iterable[PathToken]) -> JsonPointer:
    """Render a path as a JSON pointer, e.g. ``("user", "tags", 0)`` -> ``/user/tags/0``."""
    pointer = ""
    for token in path:
        pointer = join_pointer(pointer, token)
    return pointer


def format_dotted(path: Iterable[PathToken]) -> str:
    """Render a path for humans, e.g. ``("user", "tags", 0)`` -> ``user.tags[0]``."""
    text = ""
    for token in path:
        if isinstance(token, int) and not isinstance(token, bool):
            text += f"[{token}]"
        elif not text:
            text = str(token)
        else:
            text += f".{token}"
    return text


def describe_value(value: Any, limit: int = 80) -> str:
    """Render an offending value for an error message, truncated to ``limit`` characters."""
    shortener = reprlib.Repr()
    shortener.maxstring = max(limit, 3)
    shortener.maxother = max(limit, 3)
    text = shortener.repr(value)
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text


def type_label(value: Any) -> str:
    if value is None:
        return "None"
    return type(value).__name__
