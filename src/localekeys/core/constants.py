"""Constants module - centralized string literals and default values."""


class Defaults:
    """Default values for the generator options."""
    SOURCE_DIR = "assets/langs"
    OUTPUT_DIR = "lib/generated"
    OUTPUT_FILE = "locale_keys.py"
    OUTPUT_MESSAGE_FILE = "app_messages.py"
    CONFIG_FILE = "localekeys.yaml"
    KEYS_CLASS_NAME = "LocaleKeys"
    MESSAGES_CLASS_NAME = "AppMessages"
    MAX_DEPTH = 64
    MAX_DEPTH_LIMIT = 256
    MAX_WORKERS = 4


class SourceFiles:
    """Source document naming rules."""
    JSON_MARKER = ".json"
    ENCODING = "utf-8"


class KeySeparators:
    """Separators used to build dotted keys and symbolic names."""
    DOTTED = "."
    SYMBOLIC = "_"


class BranchValues:
    """Policies for the value stored for intermediate branches in the locale table."""
    JSON = "json"
    KEY = "key"

    ALL = (JSON, KEY)


class GeneratedCode:
    """Fixed fragments of the generated Python modules."""
    TOOL_NAME = "localekeys"
    HEADER = "# DO NOT EDIT. This is code generated via localekeys"
    NOQA = "# flake8: noqa"
    RUNTIME_IMPORT = "from localekeys.runtime import Translations"
    RUNTIME_BASE_CLASS = "Translations"
    MESSAGES_NAME = "MESSAGES"
    INDENT = "    "


class LogLevels:
    """Logging level constants."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    ALL = (DEBUG, INFO, WARNING, ERROR, CRITICAL)


class EnvVars:
    """Environment variable names read by Config.from_env."""
    SOURCE_DIR = "LOCALEKEYS_SOURCE_DIR"
    SOURCE_FILE = "LOCALEKEYS_SOURCE_FILE"
    TEMPLATE_LOCALE = "LOCALEKEYS_TEMPLATE_LOCALE"
    OUTPUT_DIR = "LOCALEKEYS_OUTPUT_DIR"
    OUTPUT_FILE = "LOCALEKEYS_OUTPUT_FILE"
    OUTPUT_MESSAGE_FILE = "LOCALEKEYS_OUTPUT_MESSAGE_FILE"
    BRANCH_VALUES = "LOCALEKEYS_BRANCH_VALUES"
    STRICT = "LOCALEKEYS_STRICT"
    MAX_DEPTH = "LOCALEKEYS_MAX_DEPTH"
    MAX_WORKERS = "LOCALEKEYS_MAX_WORKERS"
    LOG_LEVEL = "LOG_LEVEL"
