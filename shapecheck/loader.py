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

"""Parse YAML (and therefore JSON) documents and validate them against a schema."""

import yaml
import logging
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from .config import SchemaConfig
from .exceptions import DocumentLoadError, ValidationError
from .paths import join_pointer
from .schemas import Schema
from .source_location import SourceMap, lookup_source

logger = logging.getLogger(__name__)


def build_source_map(content: str) -> SourceMap:
    """Build a mapping from JSON pointers into the document to 1-based line/column.

    This uses PyYAML's node tree (yaml.compose) so we can track locations without
    changing the parsed data shapes returned by safe_load.
    """
    source_map: SourceMap = {}

    try:
        root = yaml.compose(content, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        # Parsing errors are reported by parse_document.
        return source_map

    if root is None:
        return source_map

    def _record(path: str, node) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is None:
            return
        # PyYAML uses 0-based line/column
        source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

    def _walk(node, path: str) -> None:
        _record(path, node)

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, join_pointer(path, key))
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, join_pointer(path, idx))

    _walk(root, "")
    return source_map


def parse_document(content: str, file_path: Optional[Path] = None) -> Tuple[Any, SourceMap]:
    """Parse YAML text and return (data, source_map)."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        where = f" {file_path}" if file_path is not None else ""
        raise DocumentLoadError(f"Failed to parse YAML document{where}: {exc}") from exc
    return data, build_source_map(content)


def load_yaml(
    content: str,
    schema: Schema,
    *,
    file_path: Optional[Path] = None,
    config: Optional[SchemaConfig] = None,
) -> Any:
    """Parse ``content`` and validate it against ``schema``.

    Returns:
        The validated document

    Raises:
        DocumentLoadError: If the text is not valid YAML
        ValidationError: If the document does not match; ``error.location``
            holds the line/column of the offending node
    """
    data, source_map = parse_document(content, file_path)
    try:
        return schema.validate(data, config=config)
    except ValidationError as exc:
        exc.location = lookup_source(source_map, exc.pointer, file_path)
        logger.debug(f"Document failed validation at '{exc.pointer or '/'}': {exc.message}")
        raise


def load_yaml_file(
    file_path: Union[str, Path],
    schema: Schema,
    *,
    config: Optional[SchemaConfig] = None,
) -> Any:
    """Read a YAML/JSON file and validate it against ``schema``."""
    path = Path(file_path)

    if not path.exists():
        raise DocumentLoadError(f"Document not found: {path}")

    if not path.is_file():
        raise DocumentLoadError(f"Path is not a file: {path}")

    logger.debug(f"Loading document: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

    return load_yaml(content, schema, file_path=path, config=config)
