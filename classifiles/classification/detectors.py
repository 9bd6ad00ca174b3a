"""Content sniffing and deep inspection backends."""

from enum import Enum
from pathlib import Path
from typing import Optional, Protocol

import filetype
import magic
from loguru import logger


class SignatureOracle(Protocol):
    """Fast content sniff returning a coarse MIME type."""

    def sniff(self, path: Path) -> Optional[str]:
        """Return the MIME type of ``path``, or None if undetermined."""
        ...


class DeepInspector(Protocol):
    """Signature-database inspection of a single file.

    Depending on how it was opened, ``inspect`` returns either a refined
    MIME type or a slash-separated list of candidate extensions. Failures
    are raised; callers decide how to degrade.
    """

    def inspect(self, path: Path) -> str:
        ...


class InspectorMode(Enum):
    """What a deep inspector answers with."""

    MIME = "mime"
    EXTENSION = "extension"


# Errors libmagic raises while loading a database or reading a file
INSPECTION_ERRORS = (magic.MagicException, OSError, ValueError, NotImplementedError)


class FiletypeOracle:
    """SignatureOracle backed by the ``filetype`` magic-number matcher."""

    def sniff(self, path: Path) -> Optional[str]:
        try:
            return filetype.guess_mime(str(path))
        except OSError as e:
            logger.debug(f"{path}: signature sniff failed ({e})")
            return None


class MagicInspector:
    """
    DeepInspector backed by libmagic through python-magic.

    Args:
        db_file: Compiled magic database to load.
        mode: Whether to answer with MIME types or extension candidates.

    Raises:
        magic.MagicException: If the database cannot be loaded.
    """

    def __init__(self, db_file: Path, mode: InspectorMode) -> None:
        self.db_file = db_file
        self.mode = mode
        if mode is InspectorMode.MIME:
            self._magic = magic.Magic(mime=True, magic_file=str(db_file))
        else:
            self._magic = magic.Magic(extension=True, magic_file=str(db_file))

    def inspect(self, path: Path) -> str:
        return self._magic.from_file(str(path))


def open_inspector(db_file: Path, mode: InspectorMode) -> Optional[MagicInspector]:
    """
    Open a libmagic inspector, tolerating a missing or broken database.

    Args:
        db_file: Compiled magic database to load.
        mode: Answer mode of the inspector.

    Returns:
        The inspector, or None if libmagic could not load ``db_file``.
    """
    try:
        return MagicInspector(db_file, mode)
    except INSPECTION_ERRORS as e:
        logger.warning(f"Could not load magic database from {db_file}: {e}")
        return None
