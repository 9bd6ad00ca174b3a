"""Entry point for the classifiles package.

Run with: python -m classifiles <scan|backup|restore> <input> <output>
"""

import sys
from typing import List, Optional

from loguru import logger

from classifiles.config import (
    VALID_VERBS,
    ConfigurationManager,
    missing_argument_message,
)
from classifiles.config.settings import LOG_FILE
from classifiles.exceptions import ClassifilesError
from classifiles.pipeline import RunParams, run_backup, run_restore, run_scan
from classifiles.ui import ConsoleUI


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging on the console.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def run_verb(manager: ConfigurationManager, params: RunParams, console: ConsoleUI) -> None:
    """
    Run the operation selected on the command line.

    Raises:
        ClassifilesError: If a precondition fails.
        OSError: If a filesystem operation fails.
    """
    cli_args = manager.cli_args
    show_progress = cli_args.show_progress
    console.print_info(f"{cli_args.verb}: {params.input_path} -> {params.output_path}")

    if cli_args.verb == "scan":
        config = manager.load_classifier_config()
        stats = run_scan(config, params, show_progress=show_progress)
        console.print_counts("Files by type", stats.by_category)
        console.print_success(
            f"{stats.total} files linked into {params.output_path} "
            f"({stats.with_extension} with a known extension)"
        )
    elif cli_args.verb == "backup":
        stats = run_backup(params, show_progress=show_progress)
        console.print_success(
            f"Backed up {stats.directories} directories and {stats.links} links"
        )
    elif cli_args.verb == "restore":
        stats = run_restore(params, show_progress=show_progress)
        console.print_success(
            f"Restored {stats.directories} directories and {stats.links} links"
        )


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the classifiles tool.

    Args:
        args: Argument list (None for sys.argv).

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    manager = ConfigurationManager()
    cli_args = manager.parse_args(args)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    if not cli_args.is_valid_verb:
        console.print_error(f"invalid verb. Valid verbs are: {', '.join(VALID_VERBS)}")
        return 0

    missing = missing_argument_message(cli_args)
    if missing is not None:
        console.print_error(missing)
        return 1

    validation = manager.validate_output_directory()
    if not validation.valid:
        console.print_error(validation.error_message)
        return 1

    params = RunParams(input_path=cli_args.input_path, output_path=cli_args.output_path)
    try:
        run_verb(manager, params, console)
    except (ClassifilesError, OSError) as e:
        logger.debug(f"{cli_args.verb} aborted: {e!r}")
        console.print_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
