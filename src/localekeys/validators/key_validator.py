"""Checks on generated symbolic names before anything is written."""

import keyword
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from localekeys.core.exceptions import SymbolicNameCollisionError, ValidationError
from localekeys.core.models import FlatEntry
from localekeys.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Validation Results
# ============================================================================

@dataclass
class ValidationResult:
    """Results from symbolic name validation."""
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    validated_count: int = 0
    collisions: Dict[str, List[str]] = field(default_factory=dict)
    invalid_names: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)


# ============================================================================
# Key Validator
# ============================================================================

def find_collisions(entries: Sequence[FlatEntry]) -> Dict[str, List[str]]:
    """
    Group dotted keys by symbolic name, keeping only shared names.

    Returns:
        Symbolic name -> dotted keys producing it, in first-seen order
    """
    groups: Dict[str, List[str]] = OrderedDict()
    for entry in entries:
        groups.setdefault(entry.symbolic_name, []).append(entry.dotted_key)
    return {name: keys for name, keys in groups.items() if len(keys) > 1}


def is_valid_identifier(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


class KeyValidator:
    """Validator for flattened entries."""

    def __init__(self, strict: bool = True):
        """
        Initialize validator.

        Args:
            strict: If True, problems are errors; otherwise warnings
        """
        self.strict = strict

    def _report(self, result: ValidationResult, message: str):
        if self.strict:
            result.add_error(message)
        else:
            result.add_warning(message)

    def validate(self, entries: Sequence[FlatEntry]) -> ValidationResult:
        """
        Check entries for shared symbolic names and invalid identifiers.

        Args:
            entries: Flattened entries

        Returns:
            ValidationResult with errors (strict) or warnings
        """
        result = ValidationResult(validated_count=len(entries))

        result.collisions = find_collisions(entries)
        for name, keys in result.collisions.items():
            self._report(result, f"Symbolic name '{name}' is produced by: {', '.join(keys)}")

        seen = set()
        for entry in entries:
            if entry.symbolic_name in seen:
                continue
            seen.add(entry.symbolic_name)
            if not is_valid_identifier(entry.symbolic_name):
                result.invalid_names.append(entry.symbolic_name)
                self._report(
                    result,
                    f"Symbolic name '{entry.symbolic_name}' (key '{entry.dotted_key}') "
                    f"is not a valid Python identifier"
                )

        for warning in result.warnings:
            logger.warning(warning)

        return result

    def validate_or_raise(self, entries: Sequence[FlatEntry]) -> ValidationResult:
        """
        Validate and raise on errors.

        Raises:
            SymbolicNameCollisionError: If names collide (strict mode)
            ValidationError: If names are not valid identifiers (strict mode)
        """
        result = self.validate(entries)
        if result.valid:
            return result

        if result.collisions:
            raise SymbolicNameCollisionError(result.collisions)
        raise ValidationError("Generated constant names are invalid", result.errors)
