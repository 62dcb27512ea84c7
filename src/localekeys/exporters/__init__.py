"""Generated source exporters."""

from localekeys.exporters.constants_exporter import render_constants
from localekeys.exporters.messages_exporter import render_messages
from localekeys.exporters.file_writer import (
    encode_generated, write_generated_bytes, write_generated_file
)
from localekeys.exporters.summary import print_summary

__all__ = [
    'render_constants', 'render_messages', 'encode_generated',
    'write_generated_bytes', 'write_generated_file', 'print_summary',
]
