# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/metadata.py

"""Descriptive attributes of a file-system entry.

`Metadata` is independent of name and path: two entries at different paths
with the same attributes have equal metadata. Every attribute that a backend
may be unable to report is optional, except `size`, which defaults to 0.
"""

import stat as stat_mod
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from .permissions import UnixPex


class FileType(Enum):
    """Kind of object a backend observed, before link resolution."""
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


def file_type_from_mode(mode: int) -> FileType | None:
    """Map an st_mode to a FileType; None for devices, FIFOs and sockets."""
    if stat_mod.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat_mod.S_ISREG(mode):
        return FileType.FILE
    if stat_mod.S_ISLNK(mode):
        return FileType.SYMLINK
    return None


def _timestamp(value: float | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


@dataclass(frozen=True)
class Metadata:
    """Size, times, ownership, permissions and link target of an entry.

    The zero value (``Metadata()``) is what a backend reports when it knows
    nothing: size 0, no timestamps, no uid/gid, no permissions and no link
    target. A size of 0 therefore does not prove the file is empty.
    """
    size: int = 0
    created: datetime | None = None
    modified: datetime | None = None
    accessed: datetime | None = None
    uid: int | None = None
    gid: int | None = None
    mode: UnixPex | None = None
    symlink: PurePosixPath | None = None
    file_type: FileType = FileType.FILE

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Size must be non-negative: {self.size}")
        if self.symlink is not None and not isinstance(self.symlink, PurePosixPath):
            object.__setattr__(self, "symlink", PurePosixPath(self.symlink))

    @classmethod
    def from_stat(cls, st: Any,
                  symlink: PurePosixPath | str | None = None) -> "Metadata":
        """Build from an ``os.stat_result``-like object.

        Only reads attributes of `st`; the stat call itself is the
        backend's job. Raises ValueError for modes that are neither
        directory, regular file nor symlink.
        """
        file_type = file_type_from_mode(st.st_mode)
        if file_type is None:
            raise ValueError(f"Unsupported file type in mode {oct(st.st_mode)}")

        return cls(
            size=int(st.st_size),
            created=_timestamp(getattr(st, "st_birthtime", None)),
            modified=_timestamp(st.st_mtime),
            accessed=_timestamp(st.st_atime),
            uid=getattr(st, "st_uid", None),
            gid=getattr(st, "st_gid", None),
            mode=UnixPex.from_mode(st.st_mode),
            symlink=symlink if file_type is FileType.SYMLINK else None,
            file_type=file_type,
        )

    # --- Builders ---

    def with_size(self, size: int) -> "Metadata":
        return replace(self, size=size)

    def with_created(self, created: datetime | None) -> "Metadata":
        return replace(self, created=created)

    def with_modified(self, modified: datetime | None) -> "Metadata":
        return replace(self, modified=modified)

    def with_accessed(self, accessed: datetime | None) -> "Metadata":
        return replace(self, accessed=accessed)

    def with_uid(self, uid: int | None) -> "Metadata":
        return replace(self, uid=uid)

    def with_gid(self, gid: int | None) -> "Metadata":
        return replace(self, gid=gid)

    def with_mode(self, mode: UnixPex | int | None) -> "Metadata":
        """Set permissions from a UnixPex or a numeric mode."""
        if isinstance(mode, int):
            mode = UnixPex.from_mode(mode)
        return replace(self, mode=mode)

    def with_symlink(self, target: PurePosixPath | str | None) -> "Metadata":
        """Record a link target; also marks the entry as a symlink."""
        if target is None:
            return replace(self, symlink=None)
        return replace(self, symlink=PurePosixPath(target),
                       file_type=FileType.SYMLINK)

    def with_file_type(self, file_type: FileType) -> "Metadata":
        return replace(self, file_type=file_type)

    # --- Queries ---

    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    def is_file(self) -> bool:
        return self.file_type is FileType.FILE

    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK
