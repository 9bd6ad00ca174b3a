"""Type-resolution cascade turning a file into a FileType."""

from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from classifiles.classification.detectors import (
    INSPECTION_ERRORS,
    DeepInspector,
    FiletypeOracle,
    InspectorMode,
    SignatureOracle,
    open_inspector,
)
from classifiles.classification.mime_info import ExtensionDatabase
from classifiles.config.manager import ClassifierConfig
from classifiles.config.settings import LIBMAGIC_NO_EXTENSION
from classifiles.models.file_type import FileType


def first_extension(candidates: str) -> Optional[str]:
    """
    Pick the preferred extension from a libmagic candidate string.

    Args:
        candidates: Slash-separated alternatives, e.g. ``"jpeg/jpg/jpe"``.

    Returns:
        The first alternative, or None for an empty or ``"???"`` answer.
    """
    if not candidates or candidates == LIBMAGIC_NO_EXTENSION:
        return None
    return candidates.split('/', 1)[0] or None


class Classifier:
    """
    Resolves the MIME type and canonical extension of files.

    The signature sniff gives a first guess. MIME types listed in the
    trigger set are refined with the deep inspector when one is available.
    Extensions come from the extension database and, for refined types the
    database knows nothing about, from the extension-tuned inspector.
    """

    def __init__(
        self,
        extension_db: ExtensionDatabase,
        deep_inspect_for: Iterable[str] = (),
        oracle: Optional[SignatureOracle] = None,
        mime_inspector: Optional[DeepInspector] = None,
        ext_inspector: Optional[DeepInspector] = None,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            extension_db: Database used to resolve extensions, owned by
                this classifier for the duration of a run.
            deep_inspect_for: MIME types worth refining with deep inspection.
            oracle: Signature sniffer (defaults to FiletypeOracle).
            mime_inspector: Inspector answering with MIME types, if any.
            ext_inspector: Inspector answering with extensions, if any.
        """
        self.extension_db = extension_db
        self.deep_inspect_for = frozenset(deep_inspect_for)
        self.oracle = oracle if oracle is not None else FiletypeOracle()
        self.mime_inspector = mime_inspector
        self.ext_inspector = ext_inspector

    @classmethod
    def from_config(cls, config: ClassifierConfig) -> "Classifier":
        """Build a classifier with libmagic inspectors loaded from config."""
        return cls(
            extension_db=ExtensionDatabase(config.mime_info_db_root),
            deep_inspect_for=config.libmagic_used_for,
            mime_inspector=open_inspector(config.libmagic_db_file, InspectorMode.MIME),
            ext_inspector=open_inspector(config.libmagic_db_file, InspectorMode.EXTENSION),
        )

    def resolve(self, path: Path) -> FileType:
        """
        Classify one file.

        Args:
            path: File to classify.

        Returns:
            FileType for the file; ``FileType.unknown()`` if the signature
            sniff found nothing.
        """
        mime_type = self.oracle.sniff(path)
        if mime_type is None:
            return FileType.unknown()

        refined = self._refine_mime(path, mime_type)
        used_deep_inspector = refined is not None
        if refined is not None:
            mime_type = refined
        logger.info(f"{path}: File matches {mime_type}")

        ext = self.extension_db.get(mime_type).ext
        if ext is None and used_deep_inspector:
            ext = self._guess_extension(path, mime_type)

        if ext is not None:
            logger.info(f"{path}: Guessed extension: {ext}")
        return FileType(mime=mime_type, ext=ext)

    def _refine_mime(self, path: Path, mime_type: str) -> Optional[str]:
        """Return the deep-inspected MIME type, or None if not refined."""
        if mime_type not in self.deep_inspect_for or self.mime_inspector is None:
            return None

        logger.info(f"{path}: Match {mime_type} can be further refined")
        try:
            refined = self.mime_inspector.inspect(path)
        except INSPECTION_ERRORS as e:
            logger.info(f"{path}: Deep inspection failed, keeping {mime_type} ({e})")
            return None
        return refined or None

    def _guess_extension(self, path: Path, mime_type: str) -> Optional[str]:
        if self.ext_inspector is None:
            return None

        try:
            candidates = self.ext_inspector.inspect(path)
        except INSPECTION_ERRORS as e:
            logger.info(f"{path}: Extension inspection failed ({e})")
            return None

        ext = first_extension(candidates)
        if ext is not None:
            # libmagic cannot answer with both a MIME type and an extension
            # in one call, so remember the extension for this MIME type
            self.extension_db.set(mime_type, ext)
        return ext
