# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/permissions.py

"""Unix permission sets for file-system entries.

A mode is decoded into three `UnixPexClass` values, one each for owner,
group and others. Only the low nine bits are modelled: setuid, setgid,
sticky and file-type bits are dropped by `UnixPex.from_mode`, and
`UnixPex.to_mode` never produces them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


PERMISSION_MASK: Final = 0o777

READ_BIT: Final = 0b100
WRITE_BIT: Final = 0b010
EXECUTE_BIT: Final = 0b001

# ls -l type column and trailing ACL/xattr markers
FILE_TYPE_CHARS: Final = "-dlcbps"
ACL_MARKERS: Final = "+@."


class PexClass(Enum):
    """Subject class of a Unix permission triple."""
    OWNER = "owner"
    GROUP = "group"
    OTHERS = "others"


class Capability(Enum):
    """Single capability inside a permission triple."""
    READ = "read"
    WRITE = "write"
    EXECUTE = "execute"


@dataclass(frozen=True)
class UnixPexClass:
    """Read, write and execute flags for one subject class."""
    read: bool = False
    write: bool = False
    execute: bool = False

    @classmethod
    def from_bits(cls, bits: int) -> "UnixPexClass":
        """Build from one octal digit; bits above 0o7 are ignored."""
        return cls(
            read=bool(bits & READ_BIT),
            write=bool(bits & WRITE_BIT),
            execute=bool(bits & EXECUTE_BIT),
        )

    def as_bits(self) -> int:
        """Return the octal digit (0-7) for this triple."""
        return (
            (READ_BIT if self.read else 0)
            | (WRITE_BIT if self.write else 0)
            | (EXECUTE_BIT if self.execute else 0)
        )

    def has(self, capability: Capability) -> bool:
        if capability is Capability.READ:
            return self.read
        if capability is Capability.WRITE:
            return self.write
        if capability is Capability.EXECUTE:
            return self.execute
        return False

    def __str__(self) -> str:
        return (
            ("r" if self.read else "-")
            + ("w" if self.write else "-")
            + ("x" if self.execute else "-")
        )


@dataclass(frozen=True)
class UnixPex:
    """Owner, group and others permissions of an entry."""
    owner: UnixPexClass = UnixPexClass()
    group: UnixPexClass = UnixPexClass()
    others: UnixPexClass = UnixPexClass()

    @classmethod
    def from_mode(cls, mode: int) -> "UnixPex":
        """Decode a numeric mode such as 0o755 or a raw st_mode."""
        if mode < 0:
            raise ValueError(f"Mode must be non-negative: {mode}")
        mode &= PERMISSION_MASK
        return cls(
            owner=UnixPexClass.from_bits(mode >> 6),
            group=UnixPexClass.from_bits(mode >> 3),
            others=UnixPexClass.from_bits(mode),
        )

    @classmethod
    def from_symbolic(cls, text: str) -> "UnixPex":
        """Parse the nine-character form used by ``ls -l``, e.g. ``rwxr-x---``.

        A leading file-type character (``-rw-r--r--``, ``drwxr-xr-x``) and a
        trailing ACL or xattr marker (``-rw-r--r--+``) are accepted and
        skipped.
        """
        original = text
        if len(text) in (10, 11) and text[-1] in ACL_MARKERS:
            text = text[:-1]
        if len(text) == 10:
            if text[0] not in FILE_TYPE_CHARS:
                raise ValueError(f"Invalid file type in permission string: {original!r}")
            text = text[1:]
        if len(text) != 9:
            raise ValueError(f"Invalid permission string: {text!r}")

        triples = []
        for offset in (0, 3, 6):
            chunk = text[offset:offset + 3]
            if (chunk[0] not in "r-" or chunk[1] not in "w-"
                    or chunk[2] not in "xsStT-"):
                raise ValueError(f"Invalid permission string: {text!r}")
            triples.append(UnixPexClass(
                read=chunk[0] == "r",
                write=chunk[1] == "w",
                # s/t carry execute plus an extension bit, which is dropped
                execute=chunk[2] in "xst",
            ))
        return cls(*triples)

    def to_mode(self) -> int:
        """Encode as a numeric mode in the range 0..0o777."""
        return (
            (self.owner.as_bits() << 6)
            | (self.group.as_bits() << 3)
            | self.others.as_bits()
        )

    def get(self, pex_class: PexClass) -> UnixPexClass:
        if pex_class is PexClass.OWNER:
            return self.owner
        if pex_class is PexClass.GROUP:
            return self.group
        return self.others

    def has(self, pex_class: PexClass, capability: Capability) -> bool:
        """Check a single capability of a single class."""
        if not isinstance(pex_class, PexClass):
            return False
        return self.get(pex_class).has(capability)

    def __int__(self) -> int:
        return self.to_mode()

    def __str__(self) -> str:
        return f"{self.owner}{self.group}{self.others}"
