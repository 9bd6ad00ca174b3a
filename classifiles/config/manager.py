"""Configuration loading and validation for classifiles runs."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

from classifiles.config.cli import CLIArgs, parse_arguments, args_to_cli_args
from classifiles.config.settings import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_LIBMAGIC_DB_FILE,
    DEFAULT_LIBMAGIC_USED_FOR,
    DEFAULT_MIME_INFO_DB_ROOT,
)
from classifiles.exceptions import ConfigError


@dataclass
class ClassifierConfig:
    """
    Settings driving the type-resolution cascade.

    Attributes:
        mime_info_db_root: Directory holding ``<mime>.xml`` glob records.
        libmagic_db_file: Compiled libmagic database used for deep inspection.
        libmagic_used_for: MIME types for which deep inspection is attempted.
    """

    mime_info_db_root: Path = DEFAULT_MIME_INFO_DB_ROOT
    libmagic_db_file: Path = DEFAULT_LIBMAGIC_DB_FILE
    libmagic_used_for: List[str] = field(
        default_factory=lambda: list(DEFAULT_LIBMAGIC_USED_FOR)
    )


@dataclass
class ValidationResult:
    """Result of a configuration check."""

    valid: bool
    error_message: Optional[str] = None


def _require(section: Dict[str, Any], key: str, name: str) -> Any:
    if not isinstance(section, dict) or key not in section:
        raise ConfigError(f"missing key {name}")
    return section[key]


def parse_config(raw: Any) -> ClassifierConfig:
    """
    Build a ClassifierConfig from a parsed YAML document.

    Args:
        raw: Object returned by ``yaml.safe_load``.

    Returns:
        ClassifierConfig populated from the document.

    Raises:
        ConfigError: If a section or key is missing or has the wrong type.
    """
    if not isinstance(raw, dict):
        raise ConfigError("configuration must contain a mapping at the top level")

    mime_info_db = _require(raw, 'mime_info_db', 'mime_info_db')
    libmagic = _require(raw, 'libmagic', 'libmagic')

    root = _require(mime_info_db, 'root', 'mime_info_db.root')
    db_file = _require(libmagic, 'db_file', 'libmagic.db_file')
    used_for = _require(libmagic, 'used_for', 'libmagic.used_for')

    if not isinstance(root, str):
        raise ConfigError("mime_info_db.root must be a string")
    if not isinstance(db_file, str):
        raise ConfigError("libmagic.db_file must be a string")
    if not isinstance(used_for, list) or not all(isinstance(m, str) for m in used_for):
        raise ConfigError("libmagic.used_for must be a list of strings")

    return ClassifierConfig(
        mime_info_db_root=Path(root),
        libmagic_db_file=Path(db_file),
        libmagic_used_for=list(used_for),
    )


def read_config_file(config_path: Path) -> ClassifierConfig:
    """
    Read and parse a YAML configuration file.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        text = config_path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"cannot read {config_path}: {e}") from e

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse {config_path}: {e}") from e

    return parse_config(raw)


def load_config(config_path: Path = DEFAULT_CONFIG_FILE) -> ClassifierConfig:
    """
    Load the classifier configuration, falling back to built-in defaults.

    Args:
        config_path: YAML file to read.

    Returns:
        ClassifierConfig from the file, or the defaults if it is absent
        or invalid.
    """
    try:
        config = read_config_file(config_path)
    except ConfigError as e:
        logger.debug(f"Configuration file not used: {e}")
        logger.info("Using default configuration")
        return ClassifierConfig()

    logger.info(f"Using configuration from {config_path}")
    return config


class ConfigurationManager:
    """
    Manages argument parsing, configuration loading and validation.

    Keeps the entry point free of parsing and validation details.
    """

    def __init__(self):
        """Initialize the configuration manager."""
        self._cli_args: Optional[CLIArgs] = None

    @property
    def cli_args(self) -> CLIArgs:
        """Return parsed CLI arguments."""
        if self._cli_args is None:
            raise RuntimeError("Configuration not initialized. Call parse_args() first.")
        return self._cli_args

    def parse_args(self, args: Optional[list] = None) -> CLIArgs:
        """
        Parse command-line arguments.

        Args:
            args: Optional argument list (default: sys.argv).

        Returns:
            Parsed CLIArgs instance.
        """
        namespace = parse_arguments(args)
        self._cli_args = args_to_cli_args(namespace)
        return self._cli_args

    def load_classifier_config(self) -> ClassifierConfig:
        """Load the classifier configuration named on the command line."""
        return load_config(self.cli_args.config_file)

    def validate_output_directory(self) -> ValidationResult:
        """
        Check that the output path exists and is a directory.

        Returns:
            ValidationResult with status and optional error message.
        """
        output_path = self.cli_args.output_path
        if output_path is None or not output_path.is_dir():
            return ValidationResult(
                valid=False,
                error_message=f"{output_path} is not a directory"
            )
        return ValidationResult(valid=True)
