from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

SourceMap = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    pointer: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def _parent_pointer(pointer: str) -> str:
    return pointer.rsplit("/", 1)[0]


def lookup_source(
    source_map: Optional[SourceMap],
    pointer: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Find the line/column for ``pointer``.

    Pointers to values that do not exist in the document (a missing field, a
    missing tuple element) resolve to the closest enclosing node that does.
    """
    if not source_map or pointer is None:
        return SourceLocation(file_path=file_path, pointer=pointer)

    candidate = pointer
    while True:
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                file_path=file_path,
                pointer=pointer,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not candidate:
            return SourceLocation(file_path=file_path, pointer=pointer)
        candidate = _parent_pointer(candidate)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}:{loc.column}")
        elif loc.line is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}")
        else:
            parts.append(f"source= {loc.file_path}")
    elif loc.line is not None:
        parts.append(f"line= {loc.line}" + (f":{loc.column}" if loc.column is not None else ""))

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
