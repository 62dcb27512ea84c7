"""Custom exception hierarchy for the locale keys generator."""

from typing import Optional, List
from pathlib import Path


class LocaleKeysError(Exception):
    """Base exception for all generation errors."""
    pass


class SourcePathMissingError(LocaleKeysError):
    """Configured source directory does not exist."""

    def __init__(self, source_dir: Path):
        """
        Initialize source path error.

        Args:
            source_dir: Path to the missing source directory
        """
        self.source_dir = source_dir
        super().__init__(f"Source path does not exist: {source_dir}")


class SourceFileMissingError(LocaleKeysError):
    """Explicitly named source file does not exist."""

    def __init__(self, file_path: Path):
        """
        Initialize source file error.

        Args:
            file_path: Path to the missing source file
        """
        self.file_path = file_path
        super().__init__(f"Source file does not exist: {file_path}")


class EmptySourceSetError(LocaleKeysError):
    """No source document matched after filtering."""

    def __init__(self, source_dir: Path, marker: str = ".json"):
        """
        Initialize empty source set error.

        Args:
            source_dir: Directory that was listed
            marker: Name fragment used to select documents
        """
        self.source_dir = source_dir
        self.marker = marker
        super().__init__(f"Source path empty: no '{marker}' files in {source_dir}")


class MalformedDocumentError(LocaleKeysError):
    """Document could not be parsed or its root is not an object."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 key_path: Optional[str] = None):
        """
        Initialize malformed document error.

        Args:
            message: Error message
            file_path: Path to the offending document
            key_path: Dotted key where the problem was found
        """
        self.reason = message
        self.file_path = file_path
        self.key_path = key_path

        full_message = message
        if key_path:
            full_message = f"{full_message} (key: {key_path})"
        if file_path:
            full_message = f"{full_message} (file: {file_path})"

        super().__init__(full_message)


class SymbolicNameCollisionError(LocaleKeysError):
    """Two or more entries share a symbolic name."""

    def __init__(self, collisions: dict):
        """
        Initialize collision error.

        Args:
            collisions: Mapping of symbolic name to the dotted keys producing it
        """
        self.collisions = collisions

        details = "\n  - ".join(
            f"{name}: {', '.join(keys)}" for name, keys in collisions.items()
        )
        message = f"Symbolic name collision detected for {len(collisions)} name(s)"
        if details:
            message = f"{message}:\n  - {details}"

        super().__init__(message)


class ConfigurationError(LocaleKeysError):
    """Configuration is invalid or incomplete."""

    def __init__(self, message: str, setting: Optional[str] = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of problematic setting
        """
        self.setting = setting

        full_message = message
        if setting:
            full_message = f"Configuration error for '{setting}': {message}"

        super().__init__(full_message)


class ExportError(LocaleKeysError):
    """Writing a generated file failed."""

    def __init__(self, message: str, output_path: Optional[Path] = None):
        """
        Initialize export error.

        Args:
            message: Error message
            output_path: Path where export was attempted
        """
        self.output_path = output_path

        full_message = message
        if output_path:
            full_message = f"{full_message} (path: {output_path})"

        super().__init__(full_message)


class ValidationError(LocaleKeysError):
    """Generated symbolic names failed validation."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            errors: List of specific validation errors
        """
        self.errors = errors or []

        full_message = message
        if errors:
            error_list = "\n  - ".join(errors)
            full_message = f"{full_message}\n  Errors:\n  - {error_list}"

        super().__init__(full_message)
