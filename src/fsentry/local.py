# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/local.py

"""Local-disk backend: turns lstat/scandir results into Entry values.

Devices, FIFOs and sockets are neither files nor directories and are left
out of listings. Symlinks are reported as files carrying their target unless
`follow_links` is set and the target resolves.
"""

import os
from pathlib import Path, PurePosixPath

from .entry import Entry
from .metadata import FileType, Metadata, file_type_from_mode


def _absolute(path: Path | str) -> str:
    p = Path(path)
    if not p.is_absolute():
        raise ValueError(f"Path must be absolute: {path}")
    normalized = os.path.normpath(p.as_posix())
    # normpath keeps a leading "//"
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def _build_entry(path: str, follow_links: bool) -> Entry | None:
    """Build an Entry for `path`, or None if its type is unsupported."""
    st = os.lstat(path)
    file_type = file_type_from_mode(st.st_mode)
    if file_type is None:
        return None

    entry_path = PurePosixPath(path)
    if file_type is not FileType.SYMLINK:
        return Entry.from_path(entry_path, Metadata.from_stat(st))

    target = os.readlink(path)
    if follow_links:
        try:
            resolved = os.stat(path)
        except OSError:
            # Dangling, looping or unreadable target
            resolved = None
        resolved_type = file_type_from_mode(resolved.st_mode) if resolved else None
        if resolved_type is not None:
            metadata = Metadata.from_stat(resolved).with_symlink(target)
            if resolved_type is FileType.DIRECTORY:
                return Entry.directory(entry_path, metadata)
            return Entry.file(entry_path, metadata)

    # Unresolved or unfollowed link
    return Entry.file(entry_path, Metadata.from_stat(st, symlink=target))


def stat(path: Path | str, follow_links: bool = False) -> Entry:
    """Return the Entry for a single absolute path.

    Raises OSError if the path cannot be stat'ed and ValueError if it is
    relative or not a file, directory or symlink.
    """
    abs_path = _absolute(path)
    entry = _build_entry(abs_path, follow_links)
    if entry is None:
        raise ValueError(f"Not a file or directory: {abs_path}")
    return entry


def list_dir(path: Path | str, follow_links: bool = False) -> list[Entry]:
    """List the direct children of an absolute directory path, by name."""
    abs_path = _absolute(path)
    entries = []
    with os.scandir(abs_path) as it:
        for dir_entry in it:
            try:
                entry = _build_entry(os.path.join(abs_path, dir_entry.name),
                                     follow_links)
            except FileNotFoundError:
                # Removed after scandir returned it
                continue
            if entry is not None:
                entries.append(entry)
    return sorted(entries, key=lambda e: e.name)
