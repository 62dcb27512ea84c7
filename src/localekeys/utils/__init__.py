"""Utility helpers."""

from localekeys.utils.logger import get_logger, setup_logging

__all__ = ['get_logger', 'setup_logging']
