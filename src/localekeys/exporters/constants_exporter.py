"""Render the constants module (one string constant per flattened key)."""

from typing import Sequence

from localekeys.core.constants import Defaults, GeneratedCode
from localekeys.core.models import FlatEntry
from localekeys.exporters.python_source import file_header, quote_string


def render_constant(entry: FlatEntry) -> str:
    """Render ``<symbolic_name> = "<dotted_key>"`` at class-body indentation."""
    return f"{GeneratedCode.INDENT}{entry.symbolic_name} = {quote_string(entry.dotted_key)}"


def render_constants(entries: Sequence[FlatEntry],
                     class_name: str = Defaults.KEYS_CLASS_NAME) -> str:
    """
    Render the constants module text.

    Args:
        entries: Flattened entries, in output order
        class_name: Name of the generated class

    Returns:
        Module source text ending with a newline
    """
    lines = file_header()
    lines.extend(["", "", f"class {class_name}:"])
    if entries:
        lines.extend(render_constant(entry) for entry in entries)
    else:
        lines.append(f"{GeneratedCode.INDENT}pass")
    return "\n".join(lines) + "\n"
