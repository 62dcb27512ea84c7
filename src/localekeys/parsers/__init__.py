"""Parsing modules."""

from localekeys.parsers.document_parser import (
    document_name, parse_document, parse_document_text, stringify_scalar, to_node
)

__all__ = ['document_name', 'parse_document', 'parse_document_text', 'stringify_scalar', 'to_node']
