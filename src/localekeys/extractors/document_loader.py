"""Source discovery and concurrent loading of locale documents.

Uses ThreadPoolExecutor: loading is I/O-bound and every document is parsed
independently, so threads share nothing but the input path list.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from localekeys.config.settings import Config
from localekeys.core.constants import SourceFiles
from localekeys.core.exceptions import (
    ConfigurationError, EmptySourceSetError, MalformedDocumentError,
    SourceFileMissingError, SourcePathMissingError
)
from localekeys.core.models import LocaleDocument
from localekeys.parsers.document_parser import document_name, parse_document
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Documents parsed from the source set, in source order."""
    paths: List[Path]
    documents: List[LocaleDocument] = field(default_factory=list)
    failures: List[Tuple[Path, MalformedDocumentError]] = field(default_factory=list)

    def failure_for(self, path: Path) -> Optional[MalformedDocumentError]:
        for failed_path, error in self.failures:
            if failed_path == path:
                return error
        return None


def list_source_files(source_dir: Path, marker: str = SourceFiles.JSON_MARKER) -> List[Path]:
    """
    List the documents of ``source_dir``.

    Regular files whose name contains ``marker``, sorted by name so the
    reference document does not depend on filesystem listing order.
    """
    return sorted(
        (p for p in source_dir.iterdir() if p.is_file() and marker in p.name),
        key=lambda p: p.name,
    )


def resolve_sources(config: Config) -> List[Path]:
    """
    Resolve the configured source set.

    Args:
        config: Generator configuration

    Returns:
        Non-empty list of document paths; the first one is the default reference

    Raises:
        SourcePathMissingError: If the source directory does not exist
        SourceFileMissingError: If the named source file does not exist
        EmptySourceSetError: If no document matched
    """
    source_dir = Path(config.source_dir)
    if not source_dir.is_dir():
        raise SourcePathMissingError(source_dir)

    source_file = config.source_file_path
    if source_file is not None:
        if not source_file.is_file():
            raise SourceFileMissingError(source_file)
        return [source_file]

    files = list_source_files(source_dir)
    if not files:
        raise EmptySourceSetError(source_dir, SourceFiles.JSON_MARKER)

    logger.debug(f"Found {len(files)} document(s) in {source_dir}")
    return files


class DocumentLoader:
    """Loads every locale document of a source set."""

    def __init__(self, config: Config):
        self.config = config

    def _load_one(self, path: Path) -> LocaleDocument:
        return parse_document(path, self.config.max_depth)

    def load(self, paths: List[Path]) -> LoadResult:
        """
        Parse ``paths`` concurrently.

        Malformed documents are recorded in ``failures`` instead of raised;
        the caller decides which failures are fatal.

        Args:
            paths: Document paths, in source order

        Returns:
            LoadResult with documents in the same order as ``paths``
        """
        result = LoadResult(paths=list(paths))
        if not paths:
            return result

        workers = max(1, min(self.config.max_workers, len(paths)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self._load_one, path) for path in paths]

            for path, future in zip(paths, futures):
                try:
                    result.documents.append(future.result())
                except MalformedDocumentError as e:
                    result.failures.append((path, e))

        return result

    def select_reference(self, paths: List[Path]) -> Path:
        """
        Pick the reference document path.

        Args:
            paths: Resolved source paths

        Returns:
            The path named by ``template_locale``, or the first path

        Raises:
            ConfigurationError: If ``template_locale`` matches no document
        """
        template = self.config.template_locale
        if not template:
            return paths[0]

        for path in paths:
            if document_name(path) == template:
                return path

        available = ", ".join(document_name(p) for p in paths)
        raise ConfigurationError(
            f"No document named '{template}' (available: {available})", "template_locale"
        )
