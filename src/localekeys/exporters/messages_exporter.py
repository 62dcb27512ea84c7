"""Render the messages module embedding the locale table."""

from localekeys.core.constants import Defaults, GeneratedCode
from localekeys.core.types import LocaleTable
from localekeys.exporters.python_source import file_header, render_mapping


def render_messages(table: LocaleTable,
                    class_name: str = Defaults.MESSAGES_CLASS_NAME) -> str:
    """
    Render the messages module text.

    The module imports the runtime Translations base class, binds the table
    to MESSAGES and exposes it through a Translations subclass.

    Args:
        table: Document name -> symbolic name -> value
        class_name: Name of the generated Translations subclass

    Returns:
        Module source text ending with a newline
    """
    lines = file_header()
    lines.append(GeneratedCode.RUNTIME_IMPORT)
    lines.append("")
    lines.append(f"{GeneratedCode.MESSAGES_NAME} = {render_mapping(table)}")
    lines.extend([
        "",
        "",
        f"class {class_name}({GeneratedCode.RUNTIME_BASE_CLASS}):",
        f"{GeneratedCode.INDENT}keys = {GeneratedCode.MESSAGES_NAME}",
    ])
    return "\n".join(lines) + "\n"
