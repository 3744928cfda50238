import pytest

import shapecheck as s
from shapecheck import DocumentLoadError, KindMismatchError, MissingFieldError
from shapecheck.loader import build_source_map, load_yaml, load_yaml_file
from shapecheck.source_location import SourceLocation, format_source, lookup_source

SERVICE = s.object(
    {
        "name": s.string(),
        "replicas": s.integer(),
        "ports": s.array(s.tuple([s.string(), s.integer()])),
    }
)

VALID_YAML = """\
name: api
replicas: 3
ports:
  - [http, 80]
  - [https, 443]
"""


def test_load_valid_yaml() -> None:
    assert load_yaml(VALID_YAML, SERVICE) == {
        "name": "api",
        "replicas": 3,
        "ports": [["http", 80], ["https", 443]],
    }


def test_load_json_text() -> None:
    text = '{"name": "api", "replicas": 1, "ports": []}'
    assert load_yaml(text, SERVICE)["replicas"] == 1


def test_validation_error_has_source_location() -> None:
    text = VALID_YAML.replace("[https, 443]", "[https, '443']")
    with pytest.raises(KindMismatchError) as exc_info:
        load_yaml(text, SERVICE)
    error = exc_info.value
    assert error.pointer == "/ports/1/1"
    assert error.location.line == 5
    assert error.location.column == 13
    assert str(error).startswith("ports[1][1]: Expected integer, got: '443'")


def test_missing_field_points_at_enclosing_node() -> None:
    text = "name: api\nports: []\n"
    with pytest.raises(MissingFieldError) as exc_info:
        load_yaml(text, SERVICE)
    assert exc_info.value.location.pointer == "/replicas"
    assert exc_info.value.location.line == 1


def test_file_errors_include_path(tmp_path) -> None:
    path = tmp_path / "service.yaml"
    path.write_text("name: api\nreplicas: many\nports: []\n", encoding="utf-8")
    with pytest.raises(KindMismatchError) as exc_info:
        load_yaml_file(path, SERVICE)
    assert exc_info.value.location.file_path == path
    assert f"source= {path}:2:11" in str(exc_info.value)


def test_load_valid_file(tmp_path) -> None:
    path = tmp_path / "service.yaml"
    path.write_text(VALID_YAML, encoding="utf-8")
    assert load_yaml_file(str(path), SERVICE)["name"] == "api"


def test_missing_file(tmp_path) -> None:
    with pytest.raises(DocumentLoadError, match="not found"):
        load_yaml_file(tmp_path / "absent.yaml", SERVICE)
    with pytest.raises(DocumentLoadError, match="not a file"):
        load_yaml_file(tmp_path, SERVICE)


def test_syntax_error() -> None:
    with pytest.raises(DocumentLoadError, match="Failed to parse"):
        load_yaml("name: [unclosed", SERVICE)


def test_empty_document_is_none() -> None:
    assert load_yaml("", s.null()) is None
    assert load_yaml("", s.optional(SERVICE)) is None


def test_build_source_map() -> None:
    source_map = build_source_map("a:\n  b: 1\nc: [x, y]\n")
    assert source_map["/a/b"] == {"line": 2, "column": 6}
    assert source_map["/c/1"] == {"line": 3, "column": 8}
    assert build_source_map("a: [") == {}


def test_lookup_and_format_source() -> None:
    source_map = {"": {"line": 1, "column": 1}, "/a": {"line": 2, "column": 3}}
    assert lookup_source(source_map, "/a/b/c").line == 2
    assert lookup_source(None, "/a") == SourceLocation(pointer="/a")
    assert format_source(SourceLocation(line=4, column=2)) == " (line= 4:2)"
    assert format_source(None) == ""
