"""Extraction of flattened keys and locale tables from parsed documents."""

from localekeys.extractors.key_flattener import KeyFlattener, resolve
from localekeys.extractors.locale_table import build_locale_table
from localekeys.extractors.document_loader import DocumentLoader, LoadResult, resolve_sources

__all__ = ['KeyFlattener', 'resolve', 'build_locale_table', 'DocumentLoader', 'LoadResult', 'resolve_sources']
