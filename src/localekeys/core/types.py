"""Type definitions for commonly used dict structures."""

from typing import Dict, List, Optional, TypedDict


# Document name -> symbolic name -> stringified value
LocaleTable = Dict[str, Dict[str, str]]


class RunSummary(TypedDict):
    """Statistics reported at the end of a generation run."""
    reference: str
    documents: List[str]
    skipped: List[str]
    entries: int
    table_keys: int
    keys_path: Optional[str]
    messages_path: Optional[str]
