# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/entry.py

"""Directory and file entries and the Entry union over them.

Backends build a `Directory` or a `File` for every object they list and wrap
it in an `Entry`. Consumers read the shared attributes through `Entry` and
downcast only when they need variant-specific fields:

- `as_file()` / `as_directory()` return the inner value or None.
- `unwrap_file()` / `unwrap_dir()` return the inner value or raise
  `EntryKindError`.
"""

from dataclasses import dataclass, field
from pathlib import PurePath, PurePosixPath

from .errors import EntryKindError
from .metadata import FileType, Metadata


ROOT = PurePosixPath("/")


def derive_extension(name: str) -> str | None:
    """Return the text after the last '.' of a file name.

    None when the name has no '.', when its only '.' is the leading one
    (``.gitignore``), or when it ends with '.'.
    """
    stem = name[1:] if name.startswith(".") else name
    if "." not in stem:
        return None
    extension = stem.rsplit(".", 1)[1]
    return extension or None


def _entry_name(path: PurePosixPath) -> str:
    return "/" if path == ROOT else path.name


def _check_identity(name: str, path: PurePath | str,
                    is_dir: bool) -> PurePosixPath:
    """Validate name against path and return the normalized path."""
    path = PurePosixPath(path)
    if not path.is_absolute():
        raise ValueError(f"Entry path must be absolute: {path}")
    if ".." in path.parts:
        raise ValueError(f"Entry path must be normalized: {path}")
    if path == ROOT:
        if not is_dir:
            raise ValueError("Only a directory can have the root path")
        if name != "/":
            raise ValueError(f"Root directory must be named '/', got {name!r}")
        return path
    if not name or "/" in name:
        raise ValueError(f"Invalid entry name: {name!r}")
    if path.name != name:
        raise ValueError(f"Entry name {name!r} does not match path {path}")
    return path


@dataclass(frozen=True)
class Directory:
    """A directory as reported by a backend."""
    name: str
    path: PurePosixPath
    metadata: Metadata = field(default_factory=Metadata)

    def __post_init__(self):
        path = _check_identity(self.name, self.path, is_dir=True)
        object.__setattr__(self, "path", path)


@dataclass(frozen=True)
class File:
    """A file (or unresolved symlink) as reported by a backend."""
    name: str
    path: PurePosixPath
    metadata: Metadata = field(default_factory=Metadata)
    extension: str | None = None

    def __post_init__(self):
        path = _check_identity(self.name, self.path, is_dir=False)
        object.__setattr__(self, "path", path)


@dataclass(frozen=True)
class Entry:
    """One file-system object: either a Directory or a File."""
    value: Directory | File

    def __post_init__(self):
        if not isinstance(self.value, (Directory, File)):
            raise TypeError(
                f"Entry must wrap a Directory or File, "
                f"got {type(self.value).__name__}"
            )

    # --- Constructors ---

    @classmethod
    def directory(cls, path: PurePath | str,
                  metadata: Metadata | None = None) -> "Entry":
        """Build a directory entry, taking its name from the path."""
        path = PurePosixPath(path)
        if metadata is None:
            metadata = Metadata(file_type=FileType.DIRECTORY)
        return cls(Directory(name=_entry_name(path), path=path,
                             metadata=metadata))

    @classmethod
    def file(cls, path: PurePath | str,
             metadata: Metadata | None = None) -> "Entry":
        """Build a file entry, taking name and extension from the path."""
        path = PurePosixPath(path)
        name = _entry_name(path)
        return cls(File(name=name, path=path,
                        metadata=metadata if metadata is not None else Metadata(),
                        extension=derive_extension(name)))

    @classmethod
    def from_path(cls, path: PurePath | str, metadata: Metadata) -> "Entry":
        """Pick the variant from ``metadata.file_type``.

        Symlinks become files; a backend that resolved the link to a
        directory should call `Entry.directory` instead.
        """
        if metadata.is_dir():
            return cls.directory(path, metadata)
        return cls.file(path, metadata)

    # --- Shared accessors ---

    @property
    def path(self) -> PurePosixPath:
        return self.value.path

    @property
    def name(self) -> str:
        return self.value.name

    @property
    def metadata(self) -> Metadata:
        return self.value.metadata

    @property
    def extension(self) -> str | None:
        """File extension; always None for directories."""
        if isinstance(self.value, File):
            return self.value.extension
        return None

    def is_dir(self) -> bool:
        return isinstance(self.value, Directory)

    def is_file(self) -> bool:
        return isinstance(self.value, File)

    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    def is_symlink(self) -> bool:
        return self.metadata.is_symlink()

    @property
    def kind(self) -> str:
        return "directory" if self.is_dir() else "file"

    # --- Downcasting ---

    def as_file(self) -> File | None:
        if isinstance(self.value, File):
            return self.value
        return None

    def as_directory(self) -> Directory | None:
        if isinstance(self.value, Directory):
            return self.value
        return None

    def unwrap_file(self) -> File:
        """Return the File, or raise EntryKindError for a directory."""
        if isinstance(self.value, File):
            return self.value
        raise EntryKindError("file", self.kind, str(self.path))

    def unwrap_dir(self) -> Directory:
        """Return the Directory, or raise EntryKindError for a file."""
        if isinstance(self.value, Directory):
            return self.value
        raise EntryKindError("directory", self.kind, str(self.path))
