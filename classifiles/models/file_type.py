"""File type data model for the classifiles package."""

from dataclasses import dataclass
from typing import Optional

from classifiles.config.settings import OUTPUT_UNKNOWN


@dataclass(frozen=True)
class FileType:
    """
    Result of classifying one file.

    Attributes:
        mime: Detected MIME type, or None when the signature sniff found nothing.
        ext: Canonical extension (without dot), or None if none was resolved.
    """

    mime: Optional[str] = None
    ext: Optional[str] = None

    @classmethod
    def unknown(cls) -> "FileType":
        """Return the result used when no type could be detected."""
        return cls(mime=None, ext=None)

    @property
    def category(self) -> str:
        """Name of the output directory for this type."""
        return self.mime if self.mime is not None else OUTPUT_UNKNOWN
