"""Build the per-document lookup table embedded in the messages module."""

import json
from typing import Any, Dict, Iterable

from localekeys.core.constants import BranchValues, Defaults
from localekeys.core.exceptions import MalformedDocumentError
from localekeys.core.models import FlatEntry, LocaleDocument, Node, ObjectNode
from localekeys.core.types import LocaleTable
from localekeys.extractors.key_flattener import iter_entries
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


def node_to_python(node: Node) -> Any:
    """Rebuild plain dicts/values from a Node tree, keeping key order."""
    if isinstance(node, ObjectNode):
        return {key: node_to_python(child) for key, child in node.items()}
    return node.raw


def branch_value(entry: FlatEntry, node: ObjectNode, policy: str = BranchValues.JSON) -> str:
    """
    String stored in the table for an intermediate branch.

    Args:
        entry: Entry naming the branch
        node: The branch itself
        policy: BranchValues.JSON for compact JSON of the subtree,
            BranchValues.KEY for the branch's dotted key

    Returns:
        String value for the table
    """
    if policy == BranchValues.KEY:
        return entry.dotted_key
    if policy == BranchValues.JSON:
        return json.dumps(node_to_python(node), ensure_ascii=False, separators=(',', ':'))
    raise ValueError(f"Unknown branch value policy: {policy}")


def document_table(document: LocaleDocument, branch_values: str = BranchValues.JSON,
                   max_depth: int = Defaults.MAX_DEPTH) -> Dict[str, str]:
    """
    Flatten one document into symbolic name -> string value.

    Keys follow the same traversal and naming as the constants entries.
    When two keys share a symbolic name the later one wins, with a warning.
    """
    table: Dict[str, str] = {}
    for entry, node in iter_entries(document.root, max_depth=max_depth):
        if entry.symbolic_name in table:
            logger.warning(
                f"'{document.name}': key '{entry.dotted_key}' overwrites "
                f"'{entry.symbolic_name}' in the table"
            )
        if isinstance(node, ObjectNode):
            table[entry.symbolic_name] = branch_value(entry, node, branch_values)
        else:
            table[entry.symbolic_name] = node.value
    return table


def build_locale_table(documents: Iterable[LocaleDocument],
                       branch_values: str = BranchValues.JSON,
                       max_depth: int = Defaults.MAX_DEPTH) -> LocaleTable:
    """
    Build the locale table for every document.

    A document whose root is not an object, or that nests too deep, is
    skipped with a warning; the other documents are unaffected.

    Args:
        documents: Parsed documents, in output order
        branch_values: Policy for intermediate branch values
        max_depth: Maximum object nesting allowed

    Returns:
        Mapping of document name to its flattened table
    """
    table: LocaleTable = {}
    for document in documents:
        if not isinstance(document.root, ObjectNode):
            logger.warning(f"Skipping '{document.name}': document root is not an object")
            continue
        try:
            entries = document_table(document, branch_values, max_depth)
        except MalformedDocumentError as e:
            logger.warning(f"Skipping '{document.name}': {e}")
            continue
        if document.name in table:
            logger.warning(f"Duplicate document name '{document.name}', replacing earlier table")
        table[document.name] = entries
        logger.debug(f"Table '{document.name}': {len(entries)} keys")
    return table
