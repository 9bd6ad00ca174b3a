"""
Classifiles - content-type based file organization.

Sorts files by detected content type by:
- Sniffing file signatures and refining them with libmagic
- Resolving canonical extensions from the shared-mime-info database
- Creating symlinks under one directory per MIME type
- Backing up and restoring symlink trees as plain ``.lns`` files
"""

__version__ = "0.1.0"
