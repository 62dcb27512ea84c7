"""Flatten a locale document into symbolic-name / dotted-key entries."""

from typing import Iterator, Optional, Tuple

from localekeys.core.constants import Defaults, KeySeparators
from localekeys.core.exceptions import MalformedDocumentError
from localekeys.core.models import FlatEntry, LocaleDocument, Node, ObjectNode
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


def child_key(parent_key: Optional[str], key: str) -> str:
    """Dotted key of ``key`` under ``parent_key`` (None at top level)."""
    if parent_key is None:
        return key
    return f"{parent_key}{KeySeparators.DOTTED}{key}"


def make_entry(parent_key: Optional[str], key: str) -> FlatEntry:
    """
    Build the entry for ``key`` found under ``parent_key``.

    Top-level keys map to themselves. Nested keys take the parent path with
    every '.' replaced by '_', then '_' and the key; the key segment itself
    is not rewritten, so 'a' > 'b.c' gives ('a_b.c', 'a.b.c').
    """
    if parent_key is None:
        return FlatEntry(symbolic_name=key, dotted_key=key)

    prefix = parent_key.replace(KeySeparators.DOTTED, KeySeparators.SYMBOLIC)
    return FlatEntry(
        symbolic_name=f"{prefix}{KeySeparators.SYMBOLIC}{key}",
        dotted_key=child_key(parent_key, key),
    )


def iter_entries(node: ObjectNode, parent_key: Optional[str] = None,
                 max_depth: int = Defaults.MAX_DEPTH,
                 depth: int = 1) -> Iterator[Tuple[FlatEntry, Node]]:
    """
    Walk ``node`` depth-first, yielding each entry with the node it names.

    Children of a branch are yielded before the branch's own entry; sibling
    order is the document's key order.

    Raises:
        MalformedDocumentError: If objects nest deeper than ``max_depth``
    """
    if depth > max_depth:
        raise MalformedDocumentError(
            f"Document nesting exceeds maximum depth of {max_depth}", key_path=parent_key
        )

    for key, child in node.items():
        if isinstance(child, ObjectNode):
            yield from iter_entries(child, child_key(parent_key, key), max_depth, depth + 1)
        yield make_entry(parent_key, key), child


def resolve(node: ObjectNode, parent_key: Optional[str] = None,
            max_depth: int = Defaults.MAX_DEPTH) -> Tuple[FlatEntry, ...]:
    """
    Flatten ``node`` into an ordered tuple of entries.

    Every key at every depth produces exactly one entry, branches included.

    Args:
        node: Object to flatten
        parent_key: Dotted key of ``node`` (None for a document root)
        max_depth: Maximum object nesting allowed

    Returns:
        Tuple of FlatEntry, deeper entries before the branch containing them
    """
    return tuple(entry for entry, _ in iter_entries(node, parent_key, max_depth))


class KeyFlattener:
    """Produces the constants entries from the reference document."""

    def __init__(self, max_depth: int = Defaults.MAX_DEPTH):
        self.max_depth = max_depth

    def flatten(self, document: LocaleDocument) -> Tuple[FlatEntry, ...]:
        """
        Flatten a reference document.

        Args:
            document: Parsed reference document

        Returns:
            Ordered tuple of FlatEntry

        Raises:
            MalformedDocumentError: If the root is not an object or nests too deep
        """
        if not isinstance(document.root, ObjectNode):
            raise MalformedDocumentError("Reference document root must be an object", document.path)

        try:
            entries = resolve(document.root, max_depth=self.max_depth)
        except MalformedDocumentError as e:
            raise MalformedDocumentError(e.reason, document.path, e.key_path)

        logger.debug(f"Flattened '{document.name}' into {len(entries)} entries")
        return entries
