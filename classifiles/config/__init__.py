"""Configuration and CLI handling."""

from classifiles.config.settings import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_MIME_INFO_DB_ROOT,
    DEFAULT_LIBMAGIC_DB_FILE,
    DEFAULT_LIBMAGIC_USED_FOR,
    OUTPUT_UNKNOWN,
    LINK_FILE_SUFFIX,
    VALID_VERBS,
)
from classifiles.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    missing_argument_message,
)
from classifiles.config.manager import (
    ClassifierConfig,
    ConfigurationManager,
    ValidationResult,
    load_config,
    parse_config,
    read_config_file,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_MIME_INFO_DB_ROOT",
    "DEFAULT_LIBMAGIC_DB_FILE",
    "DEFAULT_LIBMAGIC_USED_FOR",
    "OUTPUT_UNKNOWN",
    "LINK_FILE_SUFFIX",
    "VALID_VERBS",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "missing_argument_message",
    "ClassifierConfig",
    "ConfigurationManager",
    "ValidationResult",
    "load_config",
    "parse_config",
    "read_config_file",
]
