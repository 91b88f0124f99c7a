# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/test_entry.py

"""Unit tests for Entry, Directory and File."""

from pathlib import PurePosixPath

import pytest

from fsentry import Directory, Entry, EntryKindError, File, derive_extension
from fsentry.metadata import FileType, Metadata


NAMES = ["foo", "bar.txt", ".gitignore", ".git", "archive.tar.gz", ".bashrc.bak", "a"]


def make_dir(name: str) -> Entry:
    return Entry(Directory(name=name, path=f"/{name}", metadata=Metadata()))


def make_file(name: str, extension: str | None = None) -> Entry:
    return Entry(File(name=name, path=f"/{name}", metadata=Metadata(),
                      extension=extension))


class TestScenarios:
    """Test construction and access for both variants."""

    def test_directory(self):
        entry = make_dir("foo")
        assert entry.is_dir() is True
        assert entry.is_file() is False
        assert entry.metadata.size == 0
        assert entry.unwrap_dir().path == PurePosixPath("/foo")
        assert entry.as_directory().path == PurePosixPath("/foo")

    def test_file(self):
        entry = make_file("bar.txt", extension="txt")
        assert entry.path == PurePosixPath("/bar.txt")
        assert entry.name == "bar.txt"
        assert entry.extension == "txt"
        assert entry.is_hidden() is False
        assert entry.is_file() is True
        assert entry.is_dir() is False
        assert entry.unwrap_file().path == PurePosixPath("/bar.txt")

    def test_hidden_file_with_backend_extension(self):
        """The extension field is whatever the backend supplied."""
        entry = make_file(".gitignore", extension="txt")
        assert entry.is_hidden() is True
        assert entry.extension == "txt"

    def test_hidden_directory(self):
        entry = make_dir(".git")
        assert entry.is_hidden() is True
        assert entry.extension is None

    def test_unwrap_dir_on_file_raises(self):
        entry = make_file("bar.txt", extension="txt")
        with pytest.raises(EntryKindError) as exc_info:
            entry.unwrap_dir()
        assert exc_info.value.expected == "directory"
        assert exc_info.value.actual == "file"
        assert exc_info.value.path == "/bar.txt"

    def test_unwrap_file_on_directory_raises(self):
        with pytest.raises(EntryKindError):
            make_dir("foo").unwrap_file()

    def test_entry_kind_error_is_type_error(self):
        with pytest.raises(TypeError):
            make_dir("foo").unwrap_file()


class TestProperties:
    """Test invariants that hold for every entry."""

    @pytest.mark.parametrize("name", NAMES)
    def test_variant_exclusivity(self, name):
        for entry in (make_dir(name), make_file(name)):
            assert entry.is_dir() != entry.is_file()

    @pytest.mark.parametrize("name", NAMES)
    def test_hidden_rule(self, name):
        for entry in (make_dir(name), make_file(name)):
            assert entry.is_hidden() == name.startswith(".")

    @pytest.mark.parametrize("name", NAMES)
    def test_directory_has_no_extension(self, name):
        assert make_dir(name).extension is None
        assert Entry.directory(f"/{name}").extension is None

    @pytest.mark.parametrize("name", NAMES)
    def test_downcast_safety(self, name):
        """Mismatched downcasts never return a value."""
        directory = make_dir(name)
        file = make_file(name)
        assert directory.as_file() is None
        assert file.as_directory() is None
        with pytest.raises(EntryKindError):
            directory.unwrap_file()
        with pytest.raises(EntryKindError):
            file.unwrap_dir()

    def test_downcast_returns_inner_value(self):
        inner = File(name="a.py", path="/src/a.py", extension="py")
        entry = Entry(inner)
        assert entry.as_file() is inner
        assert entry.unwrap_file() is inner

    def test_same_metadata_different_paths(self):
        """Metadata compares equal even when the entries do not."""
        meta = Metadata(size=3)
        a = Entry.file("/x/a.txt", meta)
        b = Entry.file("/y/b.txt", meta)
        assert a != b
        assert a.metadata == b.metadata

    def test_entries_are_hashable(self):
        assert len({Entry.file("/a.txt"), Entry.file("/a.txt")}) == 1


class TestValidation:
    """Test name and path checks at construction."""

    def test_path_string_converted(self):
        directory = Directory(name="foo", path="/tmp/foo")
        assert isinstance(directory.path, PurePosixPath)

    def test_trailing_separator_normalized(self):
        assert Directory(name="foo", path="/tmp/foo/").path == PurePosixPath("/tmp/foo")

    def test_relative_path_rejected(self):
        with pytest.raises(ValueError):
            Directory(name="foo", path="foo")

    def test_parent_reference_rejected(self):
        with pytest.raises(ValueError):
            File(name="a.txt", path="/tmp/../a.txt")

    def test_name_must_match_path(self):
        with pytest.raises(ValueError):
            File(name="b.txt", path="/tmp/a.txt")

    @pytest.mark.parametrize("name", ["", "a/b"])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError):
            File(name=name, path="/tmp/a")

    def test_root_directory(self):
        root = Entry.directory("/")
        assert root.name == "/"
        assert root.path == PurePosixPath("/")
        assert root.is_hidden() is False

    def test_root_needs_slash_name(self):
        with pytest.raises(ValueError):
            Directory(name="root", path="/")

    def test_root_path_is_directory_only(self):
        """Only a directory may be named '/'."""
        with pytest.raises(ValueError):
            Entry.file("/")
        with pytest.raises(ValueError):
            File(name="/", path="/")

    def test_entry_rejects_other_payloads(self):
        with pytest.raises(TypeError):
            Entry("/tmp/foo")
        with pytest.raises(TypeError):
            Entry(Metadata())


class TestConstructors:
    """Test the Entry factory methods."""

    def test_file_derives_name_and_extension(self):
        entry = Entry.file("/home/user/archive.tar.gz")
        assert entry.name == "archive.tar.gz"
        assert entry.extension == "gz"
        assert entry.metadata == Metadata()

    def test_file_without_extension(self):
        assert Entry.file("/etc/hosts").extension is None
        assert Entry.file("/home/user/.gitignore").extension is None

    def test_directory_default_metadata(self):
        entry = Entry.directory("/var/log")
        assert entry.name == "log"
        assert entry.metadata.is_dir()

    def test_from_path_picks_variant(self):
        assert Entry.from_path("/d", Metadata(file_type=FileType.DIRECTORY)).is_dir()
        assert Entry.from_path("/f", Metadata(file_type=FileType.FILE)).is_file()

    def test_from_path_symlink_is_file(self):
        meta = Metadata().with_symlink("/etc/hosts")
        entry = Entry.from_path("/tmp/hosts", meta)
        assert entry.is_file()
        assert entry.is_symlink()
        assert entry.metadata.symlink == PurePosixPath("/etc/hosts")

    def test_kind(self):
        assert Entry.directory("/d").kind == "directory"
        assert Entry.file("/f").kind == "file"


class TestDeriveExtension:
    """Test extension derivation from names."""

    @pytest.mark.parametrize("name, expected", [
        ("bar.txt", "txt"),
        ("archive.tar.gz", "gz"),
        ("README", None),
        (".gitignore", None),
        (".bashrc.bak", "bak"),
        ("trailing.", None),
        ("..", None),
        ("Makefile.in", "in"),
    ])
    def test_derive(self, name, expected):
        assert derive_extension(name) == expected
