"""JSON locale document parsing.

Parsed JSON is converted right away into the ObjectNode/ScalarNode tree so
the rest of the pipeline never inspects raw decoder output.
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from localekeys.core.constants import Defaults, KeySeparators, SourceFiles
from localekeys.core.exceptions import MalformedDocumentError
from localekeys.core.models import LocaleDocument, Node, ObjectNode, ScalarNode
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


def document_name(file_path: Path) -> str:
    """
    Derive the document name from a file name.

    Everything from the first '.json' occurrence on is dropped, so
    'en.json' gives 'en' and 'pt-BR.json.bak' gives 'pt-BR'.
    """
    return Path(file_path).name.split(SourceFiles.JSON_MARKER)[0]


def stringify_scalar(value: Any) -> str:
    """
    Convert a leaf value to the string stored in the locale table.

    Strings are kept as they are; everything else uses its JSON form
    (true, false, null, 3, 1.5, ["a","b"]).
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def require_encodable(text: str, key_path: Optional[str] = None) -> str:
    """
    Return ``text`` if it can be written as UTF-8.

    JSON escapes can decode to lone surrogates ("\\ud800"), which no
    generated file could hold.

    Raises:
        MalformedDocumentError: If ``text`` contains a lone surrogate
    """
    try:
        text.encode(SourceFiles.ENCODING)
    except UnicodeEncodeError:
        raise MalformedDocumentError("String contains a lone surrogate", key_path=key_path)
    return text


def to_node(value: Any, max_depth: int = Defaults.MAX_DEPTH,
            key_path: Optional[str] = None, depth: int = 1) -> Node:
    """
    Convert a decoded JSON value into a Node tree.

    Args:
        value: Value returned by the JSON decoder
        max_depth: Maximum object nesting allowed (root object is depth 1)
        key_path: Dotted key of ``value`` (None for the root)
        depth: Current nesting depth

    Returns:
        ObjectNode for dicts, ScalarNode for anything else

    Raises:
        MalformedDocumentError: If objects nest deeper than ``max_depth``
            or a key or value is not encodable as UTF-8
    """
    if not isinstance(value, dict):
        return ScalarNode(value=require_encodable(stringify_scalar(value), key_path), raw=value)

    if depth > max_depth:
        raise MalformedDocumentError(
            f"Document nesting exceeds maximum depth of {max_depth}", key_path=key_path
        )

    children: List[Tuple[str, Node]] = []
    for key, child in value.items():
        key = str(key)
        child_path = key if key_path is None else f"{key_path}{KeySeparators.DOTTED}{key}"
        require_encodable(key, child_path)
        children.append((key, to_node(child, max_depth, child_path, depth + 1)))
    return ObjectNode(children=tuple(children))


def count_keys(node: Node) -> int:
    """Count every key of a tree, at every depth."""
    if isinstance(node, ScalarNode):
        return 0
    return sum(1 + count_keys(child) for _, child in node.items())


def parse_document_text(text: str, name: str, file_path: Optional[Path] = None,
                        max_depth: int = Defaults.MAX_DEPTH) -> LocaleDocument:
    """
    Parse JSON text into a LocaleDocument.

    Raises:
        MalformedDocumentError: On invalid JSON, a non-object root, excessive
            nesting or a string that is not encodable as UTF-8
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"Invalid JSON: {e}", file_path)
    except RecursionError:
        raise MalformedDocumentError("JSON nesting too deep to decode", file_path)

    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"Document root must be an object, got {type(data).__name__}", file_path
        )

    try:
        root = to_node(data, max_depth)
        key_count = count_keys(root)
    except MalformedDocumentError as e:
        raise MalformedDocumentError(e.reason, file_path, e.key_path)
    except RecursionError:
        raise MalformedDocumentError("Document nesting too deep to convert", file_path)

    return LocaleDocument(name=name, root=root, path=file_path, key_count=key_count)


def parse_document(file_path: Path, max_depth: int = Defaults.MAX_DEPTH) -> LocaleDocument:
    """
    Read and parse a locale JSON file.

    Args:
        file_path: Path to the JSON document
        max_depth: Maximum object nesting allowed

    Returns:
        LocaleDocument

    Raises:
        MalformedDocumentError: If the file cannot be read or parsed
    """
    file_path = Path(file_path)
    try:
        with open(file_path, 'r', encoding=SourceFiles.ENCODING) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"Cannot read document: {e}", file_path)

    document = parse_document_text(text, document_name(file_path), file_path, max_depth)
    logger.debug(f"Parsed {file_path} ({document.key_count} keys)")
    return document
