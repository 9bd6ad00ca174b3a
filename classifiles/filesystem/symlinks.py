"""Backup and restore of symlink trees as plain ``.lns`` files.

Some storage cannot hold symbolic links. A backup mirrors the directory
structure of a tree and replaces every symlink ``name`` with a regular
file ``name.lns`` holding the raw link target followed by a newline.
Regular files are not part of a backup. A restore performs the inverse.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from classifiles.config.settings import LINK_FILE_SUFFIX
from classifiles.exceptions import ClassifilesError
from classifiles.filesystem.discovery import Entry, EntryKind, walk_entries

_NEWLINE = b"\n"


@dataclass
class CodecStats:
    """Counts of what a backup or restore run did."""

    directories: int = 0
    links: int = 0
    skipped: int = 0


def encode_link(link: Path, destination: Path) -> bytes:
    """
    Write the target of ``link`` into the plain file ``destination``.

    Args:
        link: Symlink to encode.
        destination: File to create (its name should end in ``.lns``).

    Returns:
        The raw link target.
    """
    target = os.readlink(os.fsencode(link))
    destination.write_bytes(target + _NEWLINE)
    logger.debug(f"Encoded {link} -> {target!r} into {destination}")
    return target


def decode_link(link_file: Path, destination: Path) -> bytes:
    """
    Recreate a symlink from a ``.lns`` file.

    Exactly one trailing newline is removed from the file content; the
    rest is used verbatim as the link target.

    Args:
        link_file: File written by ``encode_link``.
        destination: Path of the symlink to create.

    Returns:
        The raw link target.
    """
    target = link_file.read_bytes()
    if target.endswith(_NEWLINE):
        target = target[:-1]
    os.symlink(target, os.fsencode(destination))
    logger.debug(f"Restored {destination} -> {target!r}")
    return target


def is_link_file(path: Path) -> bool:
    return path.suffix == LINK_FILE_SUFFIX


def _mirror_path(path: Path, input_root: Path, output_root: Path) -> Path:
    try:
        relative = path.relative_to(input_root)
    except ValueError as e:
        raise ClassifilesError(f"{path} is not inside {input_root}") from e
    if not relative.parts:
        return output_root
    return output_root / relative


class _TreeCodec:
    """Shared walking logic of BackupCodec and RestoreCodec."""

    def __init__(self) -> None:
        self.stats = CodecStats()

    def process(self, entry: Entry, input_root: Path, output_root: Path) -> None:
        raise NotImplementedError

    def run(
        self,
        input_root: Path,
        output_root: Path,
        entries: Optional[Iterable[Entry]] = None,
    ) -> CodecStats:
        """
        Process every entry of a tree.

        Args:
            input_root: Tree to read.
            output_root: Existing directory to write into.
            entries: Entries to process (defaults to walking ``input_root``).

        Returns:
            Counts for this run.
        """
        if entries is None:
            entries = walk_entries(input_root)
        for entry in entries:
            self.process(entry, input_root, output_root)
        return self.stats


class BackupCodec(_TreeCodec):
    """Mirrors directories and encodes symlinks as ``.lns`` files."""

    def process(self, entry: Entry, input_root: Path, output_root: Path) -> None:
        destination = _mirror_path(entry.path, input_root, output_root)

        if entry.kind is EntryKind.DIRECTORY:
            destination.mkdir(parents=True, exist_ok=True)
            self.stats.directories += 1
        elif entry.kind is EntryKind.SYMLINK:
            if destination == output_root:
                destination = output_root / entry.path.name
            encode_link(entry.path, destination.with_name(destination.name + LINK_FILE_SUFFIX))
            self.stats.links += 1
        else:
            self.stats.skipped += 1


class RestoreCodec(_TreeCodec):
    """Recreates directories and symlinks from a backup tree."""

    def process(self, entry: Entry, input_root: Path, output_root: Path) -> None:
        destination = _mirror_path(entry.path, input_root, output_root)

        if entry.kind is EntryKind.DIRECTORY:
            destination.mkdir(parents=True, exist_ok=True)
            self.stats.directories += 1
        elif entry.kind is EntryKind.FILE and is_link_file(entry.path):
            if destination == output_root:
                destination = output_root / entry.path.name
            decode_link(entry.path, destination.with_name(destination.stem))
            self.stats.links += 1
        else:
            self.stats.skipped += 1
