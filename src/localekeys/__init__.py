"""Locale keys generator.

Generates a module of string constants for every key of a JSON locale
dictionary, plus a module embedding every locale's messages for runtime lookup.
"""

__version__ = "1.0.0"
__author__ = "localekeys contributors"

# Re-export commonly used classes and functions for convenience
from localekeys.core.exceptions import (
    LocaleKeysError, SourcePathMissingError, SourceFileMissingError, EmptySourceSetError,
    MalformedDocumentError, SymbolicNameCollisionError, ConfigurationError, ExportError,
    ValidationError
)
from localekeys.core.models import FlatEntry, LocaleDocument, ObjectNode, ScalarNode
from localekeys.config.settings import Config
from localekeys.generator import LocaleKeysGenerator, GenerationResult, generate
from localekeys.runtime import Translations

__all__ = [
    # Version
    '__version__',
    # Config
    'Config',
    # Models
    'FlatEntry', 'LocaleDocument', 'ObjectNode', 'ScalarNode',
    # Pipeline
    'LocaleKeysGenerator', 'GenerationResult', 'generate', 'Translations',
    # Exceptions
    'LocaleKeysError', 'SourcePathMissingError', 'SourceFileMissingError', 'EmptySourceSetError',
    'MalformedDocumentError', 'SymbolicNameCollisionError', 'ConfigurationError', 'ExportError',
    'ValidationError',
]
