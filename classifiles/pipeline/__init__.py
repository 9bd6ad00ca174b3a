"""Scan, backup and restore runs."""

from classifiles.pipeline.runner import (
    RunParams,
    ScanStats,
    check_output_directory,
    run_scan,
    run_backup,
    run_restore,
)

__all__ = [
    "RunParams",
    "ScanStats",
    "check_output_directory",
    "run_scan",
    "run_backup",
    "run_restore",
]
