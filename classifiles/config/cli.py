"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from classifiles.config.settings import DEFAULT_CONFIG_FILE, VALID_VERBS


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        verb: Requested operation (scan, backup or restore).
        input_path: Source file or directory.
        output_path: Destination directory (must already exist).
        config_file: YAML configuration file used by ``scan``.
        debug: If True, enable debug logging on the console.
        show_progress: If False, disable the progress bar.
    """

    verb: str = ""
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    config_file: Path = DEFAULT_CONFIG_FILE
    debug: bool = False
    show_progress: bool = True

    @property
    def is_valid_verb(self) -> bool:
        """Check if the verb is one the tool knows about."""
        return self.verb in VALID_VERBS


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Positional arguments are optional at the parser level so that missing
    ones are reported by the entry point with its own messages.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='classifiles',
        description="""
        Classifies files by content type and symlinks them into one directory
        per MIME type, or backs up and restores symlink trees.
        """
    )

    parser.add_argument(
        'verb',
        nargs='?',
        default='',
        help=f"operation to run: {', '.join(VALID_VERBS)}"
    )

    parser.add_argument(
        'input',
        nargs='?',
        help="input file or directory"
    )

    parser.add_argument(
        'output',
        nargs='?',
        help="output directory (must exist)"
    )

    parser.add_argument(
        '-c', '--config',
        default=str(DEFAULT_CONFIG_FILE),
        help=f"configuration file (default: {DEFAULT_CONFIG_FILE})"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help="disable the progress bar"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        verb=namespace.verb or "",
        input_path=Path(namespace.input) if namespace.input else None,
        output_path=Path(namespace.output) if namespace.output else None,
        config_file=Path(namespace.config),
        debug=namespace.debug,
        show_progress=not namespace.no_progress,
    )


def missing_argument_message(cli_args: CLIArgs) -> Optional[str]:
    """
    Describe the first missing positional argument.

    Args:
        cli_args: Parsed CLI arguments.

    Returns:
        Error message, or None if both paths were given.
    """
    if cli_args.input_path is None:
        return "missing input path argument"
    if cli_args.output_path is None:
        return "missing output path argument"
    return None
