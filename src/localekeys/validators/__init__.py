"""Validation modules for generated names."""

from localekeys.validators.key_validator import KeyValidator, ValidationResult

__all__ = ['KeyValidator', 'ValidationResult']
