"""Configuration management for the locale keys generator."""

import keyword
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from localekeys.core.constants import BranchValues, Defaults, EnvVars, LogLevels
from localekeys.core.exceptions import ConfigurationError


class ConfigFileModel(BaseModel):
    """Schema of the optional YAML configuration file."""

    model_config = ConfigDict(extra='forbid')

    source_dir: Optional[str] = None
    source_file: Optional[str] = None
    template_locale: Optional[str] = None
    output_dir: Optional[str] = None
    output_file: Optional[str] = None
    output_message_file: Optional[str] = None
    keys_class_name: Optional[str] = None
    messages_class_name: Optional[str] = None
    branch_values: Optional[str] = None
    strict: Optional[bool] = None
    max_depth: Optional[int] = Field(default=None, ge=1, le=Defaults.MAX_DEPTH_LIMIT)
    max_workers: Optional[int] = Field(default=None, ge=1)
    log_level: Optional[str] = None

    @field_validator('branch_values')
    @classmethod
    def check_branch_values(cls, v):
        if v is not None and v not in BranchValues.ALL:
            raise ValueError(f"must be one of {', '.join(BranchValues.ALL)}")
        return v

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, v):
        if v is not None and v.upper() not in LogLevels.ALL:
            raise ValueError(f"must be one of {', '.join(LogLevels.ALL)}")
        return v.upper() if v else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"expected an integer, got '{raw}'", name)


def _env_str(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip('"').strip("'")
    return value or None


@dataclass
class Config:
    """Central configuration for the generator."""

    # Input
    source_dir: Path = Path(Defaults.SOURCE_DIR)
    source_file: Optional[str] = None
    template_locale: Optional[str] = None

    # Output
    output_dir: Path = Path(Defaults.OUTPUT_DIR)
    output_file: str = Defaults.OUTPUT_FILE
    output_message_file: str = Defaults.OUTPUT_MESSAGE_FILE
    keys_class_name: str = Defaults.KEYS_CLASS_NAME
    messages_class_name: str = Defaults.MESSAGES_CLASS_NAME

    # Generation policy
    branch_values: str = BranchValues.JSON
    strict: bool = True
    max_depth: int = Defaults.MAX_DEPTH

    # Performance settings
    max_workers: int = Defaults.MAX_WORKERS

    # Logging settings
    log_level: str = LogLevels.INFO

    @property
    def keys_output_path(self) -> Path:
        return self.output_dir / self.output_file

    @property
    def messages_output_path(self) -> Path:
        return self.output_dir / self.output_message_file

    @property
    def source_file_path(self) -> Optional[Path]:
        if not self.source_file:
            return None
        return self.source_dir / self.source_file

    @classmethod
    def from_env(cls) -> 'Config':
        """
        Create configuration from environment variables.

        Unset variables fall back to the defaults.

        Returns:
            Config instance with values from environment
        """
        strict_raw = _env_str(EnvVars.STRICT)
        return cls(
            source_dir=Path(_env_str(EnvVars.SOURCE_DIR) or Defaults.SOURCE_DIR),
            source_file=_env_str(EnvVars.SOURCE_FILE),
            template_locale=_env_str(EnvVars.TEMPLATE_LOCALE),
            output_dir=Path(_env_str(EnvVars.OUTPUT_DIR) or Defaults.OUTPUT_DIR),
            output_file=_env_str(EnvVars.OUTPUT_FILE) or Defaults.OUTPUT_FILE,
            output_message_file=_env_str(EnvVars.OUTPUT_MESSAGE_FILE) or Defaults.OUTPUT_MESSAGE_FILE,
            branch_values=_env_str(EnvVars.BRANCH_VALUES) or BranchValues.JSON,
            strict=strict_raw.lower() not in ("0", "false", "no", "off") if strict_raw else True,
            max_depth=_env_int(EnvVars.MAX_DEPTH, Defaults.MAX_DEPTH),
            max_workers=_env_int(EnvVars.MAX_WORKERS, Defaults.MAX_WORKERS),
            log_level=(_env_str(EnvVars.LOG_LEVEL) or LogLevels.INFO).upper(),
        )

    @staticmethod
    def load_file(config_path: Path) -> Dict[str, Any]:
        """
        Load and validate a YAML configuration file.

        Args:
            config_path: Path to the YAML file

        Returns:
            Dict of the settings present in the file

        Raises:
            ConfigurationError: If the file is missing, not YAML or has unknown keys
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}", "config")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {e}", "config")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file root must be a mapping: {config_path}", "config")

        try:
            model = ConfigFileModel(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid config file {config_path}: {e}", "config")

        return model.model_dump(exclude_none=True)

    def merged(self, **overrides: Any) -> 'Config':
        """
        Return a copy with every non-None override applied.

        Path-typed fields accept strings.
        """
        known = {f.name for f in fields(self)}
        changes = {}
        for name, value in overrides.items():
            if value is None:
                continue
            if name not in known:
                raise ConfigurationError("Unknown setting", name)
            if name in ('source_dir', 'output_dir'):
                value = Path(value)
            changes[name] = value
        return replace(self, **changes)

    @classmethod
    def from_args(cls, args, base: Optional['Config'] = None) -> 'Config':
        """
        Create configuration from command-line arguments.

        Resolution order: defaults < environment < config file < arguments.

        Args:
            args: Parsed argument namespace from argparse
            base: Starting configuration (defaults to Config.from_env())

        Returns:
            Config instance with values from arguments
        """
        config = base if base is not None else cls.from_env()

        config_path = getattr(args, 'config', None)
        if config_path is None and Path(Defaults.CONFIG_FILE).exists():
            config_path = Defaults.CONFIG_FILE
        if config_path is not None:
            config = config.merged(**cls.load_file(Path(config_path)))

        log_level = getattr(args, 'log_level', None)
        if getattr(args, 'verbose', False):
            log_level = LogLevels.DEBUG

        return config.merged(
            source_dir=getattr(args, 'source_dir', None),
            source_file=getattr(args, 'source_file', None),
            template_locale=getattr(args, 'template_locale', None),
            output_dir=getattr(args, 'output_dir', None),
            output_file=getattr(args, 'output_file', None),
            output_message_file=getattr(args, 'output_message_file', None),
            branch_values=getattr(args, 'branch_values', None),
            strict=getattr(args, 'strict', None),
            max_depth=getattr(args, 'max_depth', None),
            max_workers=getattr(args, 'max_workers', None),
            log_level=log_level.upper() if log_level else None,
        )

    def validate(self) -> list[str]:
        """
        Validate configuration settings.

        Source paths are not checked here; missing sources are reported by
        the document loader with their own error types.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.branch_values not in BranchValues.ALL:
            errors.append(f"Invalid branch_values: {self.branch_values}")

        if self.max_depth < 1:
            errors.append("max_depth must be positive")
        elif self.max_depth > Defaults.MAX_DEPTH_LIMIT:
            errors.append(f"max_depth must not exceed {Defaults.MAX_DEPTH_LIMIT}")

        if self.max_workers < 1:
            errors.append("max_workers must be positive")

        if self.log_level not in LogLevels.ALL:
            errors.append(f"Invalid log_level: {self.log_level}")

        for setting in ('keys_class_name', 'messages_class_name'):
            value = getattr(self, setting)
            if not value.isidentifier() or keyword.iskeyword(value):
                errors.append(f"{setting} is not a valid Python identifier: {value}")

        if not self.output_file or not self.output_message_file:
            errors.append("output file names must not be empty")
        elif self.output_file == self.output_message_file:
            errors.append("output_file and output_message_file must differ")

        return errors
