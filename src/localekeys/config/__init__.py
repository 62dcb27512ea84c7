"""Configuration modules."""

from localekeys.config.settings import Config, ConfigFileModel

__all__ = ['Config', 'ConfigFileModel']
