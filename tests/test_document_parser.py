import pytest

from localekeys.core.exceptions import MalformedDocumentError
from localekeys.core.models import ObjectNode, ScalarNode
from localekeys.parsers.document_parser import (
    document_name, parse_document, parse_document_text, stringify_scalar, to_node
)


@pytest.mark.parametrize("file_name, expected", [
    ("en.json", "en"),
    ("pt-BR.json", "pt-BR"),
    ("fr.json.bak", "fr"),
])
def test_document_name_strips_json_suffix(file_name, expected):
    assert document_name(file_name) == expected


@pytest.mark.parametrize("value, expected", [
    ("Sign in", "Sign in"),
    (True, "true"),
    (False, "false"),
    (None, "null"),
    (3, "3"),
    (1.5, "1.5"),
    (["a", 1], '["a",1]'),
    ("Ünïcødé", "Ünïcødé"),
])
def test_stringify_scalar(value, expected):
    assert stringify_scalar(value) == expected


def test_to_node_keeps_insertion_order_and_tags_values():
    node = to_node({"b": "1", "a": {"c": 2}, "l": [1]})
    assert isinstance(node, ObjectNode)
    assert node.keys() == ("b", "a", "l")
    children = dict(node.items())
    assert children["b"] == ScalarNode(value="1", raw="1")
    assert isinstance(children["a"], ObjectNode)
    assert children["l"] == ScalarNode(value="[1]", raw=[1])


def test_to_node_depth_limit_reports_key():
    with pytest.raises(MalformedDocumentError) as exc_info:
        to_node({"a": {"b": {}}}, max_depth=2)
    assert exc_info.value.key_path == "a.b"


def test_parse_document_text_counts_keys():
    doc = parse_document_text('{"login": {"title": "Sign in", "button": {"ok": "OK"}}}', "en")
    assert doc.name == "en"
    assert doc.key_count == 4


def test_invalid_json_is_malformed():
    with pytest.raises(MalformedDocumentError, match="Invalid JSON"):
        parse_document_text('{"a": ', "en")


def test_non_object_root_is_malformed():
    with pytest.raises(MalformedDocumentError, match="root must be an object"):
        parse_document_text('["a", "b"]', "en")


def test_deep_nesting_is_malformed():
    text = '{"a":' * 5000 + '"x"' + '}' * 5000
    with pytest.raises(MalformedDocumentError):
        parse_document_text(text, "en", max_depth=64)


def test_parse_document_reads_file(tmp_path):
    path = tmp_path / "de.json"
    path.write_text('{"hallo": "Welt"}', encoding="utf-8")
    doc = parse_document(path)
    assert doc.name == "de"
    assert doc.path == path
    assert doc.root.keys() == ("hallo",)


def test_parse_document_error_names_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(MalformedDocumentError) as exc_info:
        parse_document(path)
    assert exc_info.value.file_path == path
    assert str(path) in str(exc_info.value)


def test_parse_document_rejects_non_utf8(tmp_path):
    path = tmp_path / "latin.json"
    path.write_bytes('{"a": "caf\xe9"}'.encode("latin-1"))
    with pytest.raises(MalformedDocumentError, match="Cannot read document"):
        parse_document(path)


@pytest.mark.parametrize("text, key_path", [
    ('{"a": "\\ud800"}', "a"),
    ('{"a": {"\\udc00": "x"}}', "a.\udc00"),
    ('{"a": ["\\ud800"]}', "a"),
])
def test_lone_surrogate_is_malformed(text, key_path):
    with pytest.raises(MalformedDocumentError, match="lone surrogate") as exc_info:
        parse_document_text(text, "fr")
    assert exc_info.value.key_path == key_path


def test_nesting_beyond_interpreter_stack_is_malformed():
    text = '{"a":' * 3000 + '"x"' + '}' * 3000
    with pytest.raises(MalformedDocumentError):
        parse_document_text(text, "en", max_depth=100000)
