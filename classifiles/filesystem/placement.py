"""Collision-safe placement of classified files as symlinks."""

import os
import random
import string
from pathlib import Path, PurePath
from typing import Optional

from loguru import logger

from classifiles.config.settings import MAX_NAME_ATTEMPTS, RANDOM_NAME_LENGTH
from classifiles.exceptions import PlacementError
from classifiles.models.file_type import FileType

_ALPHANUMERIC = string.ascii_letters + string.digits


def random_name(rng: random.Random, length: int = RANDOM_NAME_LENGTH) -> str:
    """Return a random alphanumeric string of ``length`` characters."""
    return ''.join(rng.choice(_ALPHANUMERIC) for _ in range(length))


def name_extension(name: str) -> Optional[str]:
    """
    Return the extension of a file name, without the dot.

    Names starting with a dot and containing no other dot have no extension.
    """
    suffix = PurePath(name).suffix
    return suffix[1:] if suffix else None


def append_ext_if_needed(name: str, ext: Optional[str]) -> str:
    """
    Append ``.ext`` unless the name already carries that extension.

    The comparison is exact: ``photo.JPG`` with ``jpg`` becomes
    ``photo.JPG.jpg``.

    Args:
        name: Base file name.
        ext: Resolved extension, or None.

    Returns:
        The name to use for the link.
    """
    if ext is not None and name_extension(name) != ext:
        return f"{name}.{ext}"
    return name


def relative_parent(source: Path, input_root: Path) -> Optional[Path]:
    """
    Return the parent of ``source`` relative to ``input_root``.

    Returns:
        The relative parent directory, or None if the source is not under
        the root or sits directly in it.
    """
    try:
        relative = source.relative_to(input_root)
    except ValueError:
        return None
    parent = relative.parent
    if parent == Path('.'):
        return None
    return parent


class OutputPlacer:
    """
    Creates one symlink per classified file under ``<output>/<mime>/``.

    Existing entries are never replaced: a name that is already taken gets
    a random ``-XXXXXX`` suffix inserted before its extension until a free
    one is found.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_NAME_ATTEMPTS,
    ) -> None:
        """
        Initialize the placer.

        Args:
            rng: Randomness source for generated names.
            max_attempts: Number of renames tried before giving up.
        """
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def output_directory(
        self,
        source: Path,
        input_root: Path,
        output_root: Path,
        file_type: FileType,
    ) -> Path:
        """Directory receiving the link for ``source``."""
        directory = output_root / file_type.category
        parent = relative_parent(source, input_root)
        if parent is not None:
            directory = directory / parent
        return directory

    def base_name(self, source: Path, file_type: FileType) -> str:
        name = source.name or random_name(self.rng)
        return append_ext_if_needed(name, file_type.ext)

    def next_candidate(self, name: str, file_type: FileType) -> str:
        """
        Derive a fresh name from a name that is already taken.

        Args:
            name: The colliding name.
            file_type: Classification of the file being placed.

        Returns:
            ``<stem>-<random>`` plus the original extension, if any.
        """
        path = PurePath(name)
        if not path.stem:
            return append_ext_if_needed(random_name(self.rng), file_type.ext)
        candidate = f"{path.stem}-{random_name(self.rng)}"
        ext = name_extension(name)
        if ext is not None:
            candidate = f"{candidate}.{ext}"
        return candidate

    def place(
        self,
        source: Path,
        input_root: Path,
        output_root: Path,
        file_type: FileType,
    ) -> Path:
        """
        Create a symlink to ``source`` in the directory for its type.

        Args:
            source: File to link to; used verbatim as the link target.
            input_root: Root of the scanned tree, used to mirror subdirectories.
            output_root: Root of the classified tree.
            file_type: Classification of ``source``.

        Returns:
            Path of the created link.

        Raises:
            PlacementError: If no free name was found.
            OSError: If the directory or the link cannot be created.
        """
        directory = self.output_directory(source, input_root, output_root, file_type)
        directory.mkdir(parents=True, exist_ok=True)

        name = self.base_name(source, file_type)
        target = directory / name
        attempts = 0
        while os.path.lexists(target):
            attempts += 1
            if attempts > self.max_attempts:
                raise PlacementError(
                    f"No free name for {source} in {directory} after {self.max_attempts} attempts"
                )
            name = self.next_candidate(name, file_type)
            target = directory / name

        target.symlink_to(source)
        logger.debug(f"Symlink created: {source} -> {target}")
        return target
