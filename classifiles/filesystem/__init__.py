"""Filesystem operations: walking, placement and the symlink codec."""

from classifiles.filesystem.discovery import (
    Entry,
    EntryKind,
    walk_entries,
    iter_files,
    count_entries,
)
from classifiles.filesystem.placement import (
    OutputPlacer,
    random_name,
    name_extension,
    append_ext_if_needed,
    relative_parent,
)
from classifiles.filesystem.symlinks import (
    CodecStats,
    BackupCodec,
    RestoreCodec,
    encode_link,
    decode_link,
    is_link_file,
)

__all__ = [
    "Entry",
    "EntryKind",
    "walk_entries",
    "iter_files",
    "count_entries",
    "OutputPlacer",
    "random_name",
    "name_extension",
    "append_ext_if_needed",
    "relative_parent",
    "CodecStats",
    "BackupCodec",
    "RestoreCodec",
    "encode_link",
    "decode_link",
    "is_link_file",
]
