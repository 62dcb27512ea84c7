"""Helpers for rendering Python source fragments."""

from typing import Dict, List

from localekeys.core.constants import GeneratedCode

_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def quote_string(value: str) -> str:
    """
    Render ``value`` as a double-quoted Python string literal.

    Backslashes, double quotes and control characters are escaped; every
    other character, non-ASCII included, is written as is.
    """
    parts: List[str] = []
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7f:
            parts.append(f"\\x{ord(char):02x}")
        else:
            parts.append(char)
    return '"' + ''.join(parts) + '"'


def render_mapping(mapping: Dict[str, object], level: int = 0) -> str:
    """
    Pretty-print nested str-keyed dicts as a Python literal.

    Values must be strings or dicts of the same shape. Key order is kept;
    every item ends with a comma and nesting uses GeneratedCode.INDENT.

    Args:
        mapping: Mapping to render
        level: Indentation level of the opening brace's line

    Returns:
        Literal text, without a trailing newline
    """
    if not mapping:
        return "{}"

    inner = GeneratedCode.INDENT * (level + 1)
    lines = ["{"]
    for key, value in mapping.items():
        if isinstance(value, dict):
            rendered = render_mapping(value, level + 1)
        elif isinstance(value, str):
            rendered = quote_string(value)
        else:
            raise TypeError(f"Unsupported value type for key {key!r}: {type(value).__name__}")
        lines.append(f"{inner}{quote_string(key)}: {rendered},")
    lines.append(GeneratedCode.INDENT * level + "}")
    return "\n".join(lines)


def file_header() -> List[str]:
    """Lines opening every generated module."""
    return [GeneratedCode.HEADER, GeneratedCode.NOQA]
