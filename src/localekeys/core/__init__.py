"""Core components - fundamental classes and definitions."""

from localekeys.core.constants import *
from localekeys.core.exceptions import *
from localekeys.core.models import *

__all__ = ['constants', 'exceptions', 'models', 'types']
