"""Extension lookup backed by the shared-mime-info glob database."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, Optional

from loguru import logger

from classifiles.classification import mime_table
from classifiles.models.cache import MimeCache


class MimeKind(Enum):
    """How much is known about a MIME type's extension."""

    WITH_EXT = "with_ext"
    GENERIC = "generic"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Mime:
    """
    Extension resolution result for one MIME type.

    A MIME type is either known with a canonical extension (``with_ext``),
    known without one (``GENERIC``), or not found in any source
    (``UNKNOWN``).
    """

    GENERIC: ClassVar["Mime"]
    UNKNOWN: ClassVar["Mime"]

    kind: MimeKind
    ext: Optional[str] = None

    @classmethod
    def with_ext(cls, ext: str) -> "Mime":
        return cls(MimeKind.WITH_EXT, ext)

    @property
    def has_ext(self) -> bool:
        return self.kind is MimeKind.WITH_EXT

    @property
    def is_unknown(self) -> bool:
        return self.kind is MimeKind.UNKNOWN

    def __repr__(self) -> str:
        if self.has_ext:
            return f"Mime.with_ext({self.ext!r})"
        return f"Mime.{self.kind.name}"


Mime.GENERIC = Mime(MimeKind.GENERIC)
Mime.UNKNOWN = Mime(MimeKind.UNKNOWN)


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tag names."""
    return tag.rsplit('}', 1)[-1]


def extract_glob(root: ET.Element) -> Mime:
    """
    Extract the canonical extension from a parsed mime-info record.

    Only the first ``glob`` element is considered.

    Args:
        root: Root element of the record.

    Returns:
        ``Mime.with_ext`` for the first glob pattern, ``Mime.GENERIC``
        if there is no glob element or it has no pattern.
    """
    for element in root.iter():
        if _local_name(element.tag) == 'glob':
            pattern = element.get('pattern')
            if pattern is None:
                return Mime.GENERIC
            return Mime.with_ext(pattern[2:] if pattern.startswith('*.') else pattern)
    return Mime.GENERIC


def load_mime_info(root_path: Path, mime: str) -> Mime:
    """
    Load the record for one MIME type from the glob database.

    Args:
        root_path: Database root directory.
        mime: MIME type string; the record lives at ``<root>/<mime>.xml``.

    Returns:
        The resolved Mime, or ``Mime.UNKNOWN`` if the record is missing,
        unreadable or malformed.
    """
    mime_path = root_path / f"{mime}.xml"

    try:
        xml_bytes = mime_path.read_bytes()
    except OSError:
        return Mime.UNKNOWN

    try:
        root = ET.fromstring(xml_bytes)
    except ET.ParseError as e:
        logger.warning(f"Ignoring malformed mime-info record {mime_path}: {e}")
        return Mime.UNKNOWN

    return extract_glob(root)


def lookup_static(mime: str) -> Mime:
    """Resolve a MIME type from the built-in table."""
    exts = mime_table.extensions(mime)
    if exts is None:
        return Mime.UNKNOWN
    if exts:
        return Mime.with_ext(exts[0])
    return Mime.GENERIC


class ExtensionDatabase:
    """
    Memoizing MIME type to extension resolver.

    Looks a type up in the shared-mime-info glob database first, then in
    the built-in table. Each MIME type is resolved at most once per
    instance; extensions learned elsewhere can be recorded with ``set``.
    """

    def __init__(self, db_root_path: Optional[Path]) -> None:
        """
        Initialize the database.

        Args:
            db_root_path: Glob database root. Ignored with a warning if it
                does not exist or is not a directory.
        """
        self.db_root_path: Optional[Path] = None
        self._cache: MimeCache[Mime] = MimeCache()

        if db_root_path is None:
            return
        if not db_root_path.exists():
            logger.warning(f"Ignoring non-existing mime-info database root {db_root_path}")
        elif not db_root_path.is_dir():
            logger.warning(f"Ignoring mime-info database root, it is not a directory: {db_root_path}")
        else:
            self.db_root_path = db_root_path

    def get(self, mime: str) -> Mime:
        """
        Resolve the extension for a MIME type.

        Args:
            mime: MIME type string.

        Returns:
            The cached or freshly resolved Mime.
        """
        cached = self._cache.get(mime)
        if cached is not None:
            return cached

        result = Mime.UNKNOWN
        if self.db_root_path is not None:
            result = load_mime_info(self.db_root_path, mime)
        if result.is_unknown:
            result = lookup_static(mime)

        self._cache.set(mime, result)
        return result

    def set(self, mime: str, ext: str) -> None:
        """Record ``ext`` as the canonical extension for ``mime``."""
        self._cache.set(mime, Mime.with_ext(ext))

    def __contains__(self, mime: object) -> bool:
        return mime in self._cache

    def __len__(self) -> int:
        return len(self._cache)
