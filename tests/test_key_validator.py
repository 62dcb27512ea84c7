import pytest

from localekeys.core.exceptions import SymbolicNameCollisionError, ValidationError
from localekeys.extractors.key_flattener import resolve
from localekeys.validators.key_validator import KeyValidator, find_collisions

from conftest import LOGIN, document

COLLIDING = {"a": {"b_c": "1"}, "a_b": {"c": "2"}}


def test_clean_entries_are_valid():
    entries = resolve(document(LOGIN).root)
    result = KeyValidator().validate(entries)
    assert result.valid
    assert result.errors == []
    assert result.validated_count == 4


def test_find_collisions_lists_dotted_keys():
    entries = resolve(document(COLLIDING).root)
    assert find_collisions(entries) == {"a_b_c": ["a.b_c", "a_b.c"]}


def test_strict_collision_raises():
    entries = resolve(document(COLLIDING).root)
    with pytest.raises(SymbolicNameCollisionError) as exc_info:
        KeyValidator(strict=True).validate_or_raise(entries)
    assert exc_info.value.collisions == {"a_b_c": ["a.b_c", "a_b.c"]}
    assert "a_b_c" in str(exc_info.value)


def test_non_strict_collision_is_a_warning():
    entries = resolve(document(COLLIDING).root)
    result = KeyValidator(strict=False).validate_or_raise(entries)
    assert result.valid
    assert len(result.warnings) == 1
    assert result.collisions == {"a_b_c": ["a.b_c", "a_b.c"]}


@pytest.mark.parametrize("key", ["hello-world", "class", "1st", "with space", "a.b"])
def test_invalid_identifiers_fail_in_strict_mode(key):
    entries = resolve(document({key: "x"}).root)
    with pytest.raises(ValidationError) as exc_info:
        KeyValidator(strict=True).validate_or_raise(entries)
    assert len(exc_info.value.errors) == 1


def test_invalid_identifier_reported_once_per_name():
    entries = resolve(document({"x-y": {"ok": "1"}}).root)
    result = KeyValidator(strict=False).validate(entries)
    assert result.invalid_names == ["x-y_ok", "x-y"]
    assert len(result.warnings) == 2

