"""File type detection and extension resolution."""

from classifiles.classification.detectors import (
    SignatureOracle,
    DeepInspector,
    InspectorMode,
    FiletypeOracle,
    MagicInspector,
    open_inspector,
)
from classifiles.classification.mime_info import (
    Mime,
    MimeKind,
    ExtensionDatabase,
    extract_glob,
    load_mime_info,
    lookup_static,
)
from classifiles.classification.classifier import (
    Classifier,
    first_extension,
)

__all__ = [
    "SignatureOracle",
    "DeepInspector",
    "InspectorMode",
    "FiletypeOracle",
    "MagicInspector",
    "open_inspector",
    "Mime",
    "MimeKind",
    "ExtensionDatabase",
    "extract_glob",
    "load_mime_info",
    "lookup_static",
    "Classifier",
    "first_extension",
]
