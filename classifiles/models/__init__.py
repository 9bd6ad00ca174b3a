"""Data models for the classifiles package."""

from classifiles.models.file_type import FileType
from classifiles.models.cache import MimeCache

__all__ = ["FileType", "MimeCache"]
