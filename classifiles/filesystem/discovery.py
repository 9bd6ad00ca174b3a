"""Directory walking for classification and backup runs."""

import os
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Container, Iterator, List, Optional

from loguru import logger


class EntryKind(Enum):
    """Type of a filesystem entry, determined without following symlinks."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One entry yielded by ``walk_entries``."""

    path: Path
    kind: EntryKind


def _kind_from_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def _scan_directory(directory: Path) -> List[Entry]:
    entries = []
    try:
        with os.scandir(directory) as it:
            for dir_entry in it:
                try:
                    mode = dir_entry.stat(follow_symlinks=False).st_mode
                except OSError as e:
                    logger.debug(f"Skipping {dir_entry.path}: {e}")
                    continue
                entries.append(Entry(Path(dir_entry.path), _kind_from_mode(mode)))
    except OSError as e:
        logger.debug(f"Cannot read directory {directory}: {e}")
    entries.sort(key=lambda entry: entry.path.name)
    return entries


def walk_entries(root: Path) -> Iterator[Entry]:
    """
    Walk a tree, yielding the root and every entry below it.

    Directories are always yielded before their contents. Symlinks below
    the root are reported as such and never followed; a symlinked root is
    followed. Entries that cannot be read are skipped silently.

    Args:
        root: File or directory to start from.

    Yields:
        Entry records.
    """
    try:
        mode = root.stat().st_mode
    except OSError as e:
        logger.debug(f"Cannot stat {root}: {e}")
        return

    kind = _kind_from_mode(mode)
    yield Entry(root, kind)
    if kind is not EntryKind.DIRECTORY:
        return

    pending = [root]
    while pending:
        directory = pending.pop()
        subdirectories = []
        for entry in _scan_directory(directory):
            yield entry
            if entry.kind is EntryKind.DIRECTORY:
                subdirectories.append(entry.path)
        pending.extend(reversed(subdirectories))


def iter_files(root: Path) -> Iterator[Path]:
    """
    Generate all regular files under root.

    Args:
        root: File or directory to search in.

    Yields:
        Path objects for each regular file found.
    """
    for entry in walk_entries(root):
        if entry.kind is EntryKind.FILE:
            yield entry.path


def count_entries(root: Path, kinds: Optional[Container[EntryKind]] = None) -> int:
    """
    Count entries under root, for progress reporting.

    Args:
        root: File or directory to count.
        kinds: Entry kinds to count (all kinds if None).

    Returns:
        Number of matching entries.
    """
    return sum(
        1 for entry in walk_entries(root)
        if kinds is None or entry.kind in kinds
    )
