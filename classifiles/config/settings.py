"""Configuration settings and constants for the classifiles package."""

from pathlib import Path
from typing import List, Tuple

# Default configuration file, relative to the working directory
DEFAULT_CONFIG_FILE = Path('config.yaml')

# Built-in defaults used when no configuration file can be read
DEFAULT_MIME_INFO_DB_ROOT = Path('/usr/share/mime')
DEFAULT_LIBMAGIC_DB_FILE = Path('/usr/share/file/misc/magic.mgc')
DEFAULT_LIBMAGIC_USED_FOR: List[str] = [
    'application/zip',
]

# Output directory for files the signature sniff could not identify
OUTPUT_UNKNOWN = 'unknown'

# Suffix of the plain files standing in for symlinks in a backup tree
LINK_FILE_SUFFIX = '.lns'

# Random name generation
RANDOM_NAME_LENGTH = 6

# Upper bound on collision retries before giving up on a link name
MAX_NAME_ATTEMPTS = 1000

# libmagic answers this when it has no extension for a match
LIBMAGIC_NO_EXTENSION = '???'

VALID_VERBS: Tuple[str, ...] = ('scan', 'backup', 'restore')

# Log file written next to the working directory
LOG_FILE = 'classifiles.log'
