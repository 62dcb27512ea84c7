"""Data model classes for locale documents and flattened keys."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class ScalarNode:
    """Represents a leaf value (string, number, boolean, null or array)."""
    value: str  # Stringified form used in the locale table
    raw: Any = None  # Value as returned by the JSON parser


@dataclass(frozen=True)
class ObjectNode:
    """Represents a JSON object, children kept in parser insertion order."""
    children: Tuple[Tuple[str, 'Node'], ...] = ()

    def items(self) -> Iterator[Tuple[str, 'Node']]:
        return iter(self.children)

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.children)

    def __len__(self) -> int:
        return len(self.children)


Node = Union[ObjectNode, ScalarNode]


@dataclass(frozen=True)
class FlatEntry:
    """Represents one generated constant."""
    symbolic_name: str  # e.g. "login_button_ok"
    dotted_key: str  # e.g. "login.button.ok"


@dataclass
class LocaleDocument:
    """Represents a parsed locale dictionary."""
    name: str  # File basename without the .json suffix (e.g. "en")
    root: ObjectNode
    path: Optional[Path] = None
    key_count: int = field(default=0, compare=False)
