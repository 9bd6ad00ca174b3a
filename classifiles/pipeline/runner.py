"""Drivers for the scan, backup and restore runs."""

import stat
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from loguru import logger
from tqdm import tqdm

from classifiles.classification.classifier import Classifier
from classifiles.config.manager import ClassifierConfig
from classifiles.config.settings import OUTPUT_UNKNOWN
from classifiles.exceptions import PreconditionError
from classifiles.filesystem.discovery import (
    EntryKind,
    count_entries,
    iter_files,
    walk_entries,
)
from classifiles.filesystem.placement import OutputPlacer
from classifiles.filesystem.symlinks import BackupCodec, CodecStats, RestoreCodec


@dataclass
class RunParams:
    """Input and output locations of a run."""

    input_path: Path
    output_path: Path


@dataclass
class ScanStats:
    """Statistics of a scan run."""

    total: int = 0
    with_extension: int = 0
    by_category: Dict[str, int] = field(default_factory=dict)

    @property
    def unknown(self) -> int:
        return self.by_category.get(OUTPUT_UNKNOWN, 0)


def check_output_directory(output_path: Path) -> None:
    """
    Ensure the output path is an existing directory.

    Raises:
        PreconditionError: If it is not.
    """
    if not output_path.is_dir():
        raise PreconditionError(f"{output_path} is not a directory")


def run_scan(
    config: ClassifierConfig,
    params: RunParams,
    classifier: Optional[Classifier] = None,
    placer: Optional[OutputPlacer] = None,
    show_progress: bool = True,
) -> ScanStats:
    """
    Classify files and link them into per-type directories.

    Args:
        config: Classifier configuration (unused if ``classifier`` is given).
        params: Input file or directory and output directory.
        classifier: Classifier to use instead of one built from ``config``.
        placer: OutputPlacer to use instead of a default one.
        show_progress: Whether to display a progress bar.

    Returns:
        ScanStats for the run.

    Raises:
        PreconditionError: If the output path is not a directory.
        OSError: On the first filesystem error.
    """
    check_output_directory(params.output_path)

    if classifier is None:
        classifier = Classifier.from_config(config)
    if placer is None:
        placer = OutputPlacer()

    input_path = params.input_path
    categories: Counter = Counter()
    stats = ScanStats()

    def process(path: Path) -> None:
        file_type = classifier.resolve(path)
        placer.place(path, input_path, params.output_path, file_type)
        categories[file_type.category] += 1
        stats.total += 1
        if file_type.ext is not None:
            stats.with_extension += 1

    if stat.S_ISREG(input_path.stat().st_mode):
        process(input_path)
    else:
        total = count_entries(input_path, {EntryKind.FILE})
        logger.info(f"{total} files to classify in {input_path}")
        with tqdm(
            iter_files(input_path),
            total=total,
            desc="Classifying",
            unit="file",
            disable=not show_progress,
        ) as pbar:
            for path in pbar:
                process(path)

    stats.by_category = dict(categories)
    return stats


def _run_codec(
    codec_factory: Callable[[], Union[BackupCodec, RestoreCodec]],
    params: RunParams,
    desc: str,
    show_progress: bool,
) -> CodecStats:
    check_output_directory(params.output_path)

    codec = codec_factory()
    total = count_entries(params.input_path)
    with tqdm(
        walk_entries(params.input_path),
        total=total,
        desc=desc,
        unit="entry",
        disable=not show_progress,
    ) as pbar:
        return codec.run(params.input_path, params.output_path, entries=pbar)


def run_backup(params: RunParams, show_progress: bool = True) -> CodecStats:
    """
    Back up the directories and symlinks of a tree as ``.lns`` files.

    Raises:
        PreconditionError: If the output path is not a directory.
        OSError: On the first filesystem error.
    """
    stats = _run_codec(BackupCodec, params, "Backing up", show_progress)
    logger.info(
        f"Backup of {params.input_path}: {stats.directories} directories, "
        f"{stats.links} links, {stats.skipped} entries skipped"
    )
    return stats


def run_restore(params: RunParams, show_progress: bool = True) -> CodecStats:
    """
    Recreate the directories and symlinks of a backup tree.

    Raises:
        PreconditionError: If the output path is not a directory.
        OSError: On the first filesystem error.
    """
    stats = _run_codec(RestoreCodec, params, "Restoring", show_progress)
    logger.info(
        f"Restore of {params.input_path}: {stats.directories} directories, "
        f"{stats.links} links, {stats.skipped} entries ignored"
    )
    return stats
