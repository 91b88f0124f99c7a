# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/__init__.py

"""Backend-neutral file-system entries: permissions, metadata and entries."""

from .entry import Directory, Entry, File, derive_extension
from .errors import EntryKindError
from .metadata import FileType, Metadata
from .permissions import Capability, PexClass, UnixPex, UnixPexClass

__version__ = "0.1.0"

__all__ = [
    "Entry",
    "Directory",
    "File",
    "derive_extension",
    "EntryKindError",
    "Metadata",
    "FileType",
    "UnixPex",
    "UnixPexClass",
    "PexClass",
    "Capability",
]
