"""Generation pipeline: load, flatten, validate, render, write."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from localekeys.config.settings import Config
from localekeys.core.exceptions import ConfigurationError
from localekeys.core.models import FlatEntry, LocaleDocument
from localekeys.core.types import LocaleTable, RunSummary
from localekeys.exporters.constants_exporter import render_constants
from localekeys.exporters.file_writer import encode_generated, write_generated_bytes
from localekeys.exporters.messages_exporter import render_messages
from localekeys.extractors.document_loader import DocumentLoader, resolve_sources
from localekeys.extractors.key_flattener import KeyFlattener
from localekeys.extractors.locale_table import build_locale_table
from localekeys.validators.key_validator import KeyValidator, ValidationResult
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Everything produced by one run, before and after writing."""
    reference: LocaleDocument
    documents: List[LocaleDocument]
    entries: Tuple[FlatEntry, ...]
    table: LocaleTable
    keys_text: str
    messages_text: str
    validation: ValidationResult
    skipped: List[Path] = field(default_factory=list)
    keys_path: Optional[Path] = None
    messages_path: Optional[Path] = None

    def summary(self) -> RunSummary:
        return RunSummary(
            reference=self.reference.name,
            documents=[doc.name for doc in self.documents],
            skipped=[str(p) for p in self.skipped],
            entries=len(self.entries),
            table_keys=sum(len(keys) for keys in self.table.values()),
            keys_path=str(self.keys_path) if self.keys_path else None,
            messages_path=str(self.messages_path) if self.messages_path else None,
        )


class LocaleKeysGenerator:
    """Generates the constants and messages modules from locale JSON files."""

    def __init__(self, config: Config):
        """
        Initialize generator.

        Args:
            config: Resolved configuration

        Raises:
            ConfigurationError: If the configuration does not validate
        """
        errors = config.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

        self.config = config
        self.loader = DocumentLoader(config)
        self.flattener = KeyFlattener(config.max_depth)
        self.validator = KeyValidator(strict=config.strict)

    def generate(self) -> GenerationResult:
        """
        Produce both module texts in memory.

        Nothing is written; any fatal error is raised before ``write``
        can run.

        Returns:
            GenerationResult with rendered texts

        Raises:
            SourcePathMissingError, SourceFileMissingError, EmptySourceSetError:
                If the source set cannot be resolved
            ConfigurationError: If template_locale names no document
            MalformedDocumentError: If the reference document is unusable
            SymbolicNameCollisionError, ValidationError: On invalid names (strict)
        """
        paths = resolve_sources(self.config)
        reference_path = self.loader.select_reference(paths)
        logger.info(f"Loading {len(paths)} document(s), reference: {reference_path.name}")

        loaded = self.loader.load(paths)

        reference_error = loaded.failure_for(reference_path)
        if reference_error is not None:
            raise reference_error

        skipped = []
        for path, error in loaded.failures:
            logger.warning(f"Skipping document: {error}")
            skipped.append(path)

        reference = next(doc for doc in loaded.documents if doc.path == reference_path)

        entries = self.flattener.flatten(reference)
        validation = self.validator.validate_or_raise(entries)

        table = build_locale_table(
            loaded.documents, self.config.branch_values, self.config.max_depth
        )

        return GenerationResult(
            reference=reference,
            documents=loaded.documents,
            entries=entries,
            table=table,
            keys_text=render_constants(entries, self.config.keys_class_name),
            messages_text=render_messages(table, self.config.messages_class_name),
            validation=validation,
            skipped=skipped,
        )

    def write(self, result: GenerationResult) -> GenerationResult:
        """
        Write both generated modules, overwriting existing files.

        Both texts are encoded before either file is touched.

        Args:
            result: Output of ``generate``

        Returns:
            The same result with output paths filled in

        Raises:
            ExportError: If a text cannot be encoded or a file cannot be written
        """
        keys_path = self.config.keys_output_path
        messages_path = self.config.messages_output_path
        keys_data = encode_generated(result.keys_text, keys_path)
        messages_data = encode_generated(result.messages_text, messages_path)

        result.keys_path = write_generated_bytes(keys_path, keys_data)
        result.messages_path = write_generated_bytes(messages_path, messages_data)
        logger.info(f"All done! File generated in {result.keys_path}")
        logger.info(f"All done! File generated in {result.messages_path}")
        return result

    def run(self) -> GenerationResult:
        """Generate and write."""
        return self.write(self.generate())


def generate(config: Config) -> GenerationResult:
    """
    Convenience function: generate and write with ``config``.

    Args:
        config: Resolved configuration

    Returns:
        GenerationResult of the run
    """
    return LocaleKeysGenerator(config).run()
