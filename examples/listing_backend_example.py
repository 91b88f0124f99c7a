#!/usr/bin/env python3

# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# examples/listing_backend_example.py

"""
Example backend that turns Unix-style FTP LIST output into entries.

Shows the backend side of the contract: every line becomes exactly one
Directory or File entry, and lines for devices, pipes or sockets are
dropped instead of being reported as a third kind of entry.
"""

from datetime import datetime, timezone
from pathlib import PurePosixPath

from fsentry import Entry, Metadata
from fsentry.metadata import FileType
from fsentry.permissions import UnixPex


SAMPLE_LISTING = """\
drwxr-xr-x    2 1000     1000         4096 Jan 12  2024 docs
-rw-r--r--    1 1000     1000        18221 Mar 03  2024 report.pdf
-rw-------    1 1000     1000          220 Mar 03  2024 .profile
lrwxrwxrwx    1 1000     1000           10 Mar 03  2024 latest -> report.pdf
-rw-r--r--+   1 1000     1000          512 Mar 03 14:22 acl-notes.txt
crw-rw-rw-    1 0        0          1,   3 Jan 01  2024 null
"""

TYPE_CHARS = {
    "d": FileType.DIRECTORY,
    "-": FileType.FILE,
    "l": FileType.SYMLINK,
}


def parse_list_date(text: str, now: datetime | None = None) -> datetime | None:
    """Parse "Mar 03  2024" or, for recent files, "Mar 03 14:22".

    The short form has no year: it is the most recent such date not in the
    future. Unparseable dates give None.
    """
    text = " ".join(text.split())
    try:
        return datetime.strptime(text, "%b %d %Y").replace(tzinfo=timezone.utc)
    except ValueError:
        pass
    try:
        # Year given up front so Feb 29 parses
        parsed = datetime.strptime(f"2000 {text}", "%Y %b %d %H:%M")
    except ValueError:
        return None

    now = now or datetime.now(timezone.utc)
    year = now.year
    if (parsed.month, parsed.day) > (now.month, now.day):
        year -= 1
    try:
        return parsed.replace(year=year, tzinfo=timezone.utc)
    except ValueError:
        # Feb 29 outside a leap year
        return None


def parse_line(line: str, parent: PurePosixPath) -> Entry | None:
    """Parse one LIST line; None for unsupported object types."""
    parts = line.split(None, 8)
    file_type = TYPE_CHARS.get(parts[0][0])
    if file_type is None or len(parts) < 9:
        return None

    name = parts[8]
    target = None
    if file_type is FileType.SYMLINK and " -> " in name:
        name, target = name.split(" -> ", 1)

    modified = parse_list_date(" ".join(parts[5:8]))
    metadata = Metadata(
        size=int(parts[4]),
        modified=modified,
        uid=int(parts[2]),
        gid=int(parts[3]),
        mode=UnixPex.from_symbolic(parts[0]),
        symlink=target,
        file_type=file_type,
    )
    return Entry.from_path(parent / name, metadata)


def list_directory(listing: str, parent: str) -> list[Entry]:
    entries = (parse_line(line, PurePosixPath(parent))
               for line in listing.splitlines() if line.strip())
    return [e for e in entries if e is not None]


if __name__ == "__main__":
    for entry in list_directory(SAMPLE_LISTING, "/home/user"):
        kind = "dir " if entry.is_dir() else "file"
        hidden = " (hidden)" if entry.is_hidden() else ""
        print(f"{kind} {entry.metadata.mode} {entry.path}"
              f" ext={entry.extension}{hidden}")
