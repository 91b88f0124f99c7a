# Author: PB
# Maintainer: PB
# Original date: 2026.10.16
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# fsentry/src/fsentry/errors.py

"""Error types for entry handling."""

from typing import Literal

EntryKind = Literal["directory", "file"]


class EntryKindError(TypeError):
    """Raised when an Entry is unwrapped as the wrong variant.

    This always indicates a bug in the caller, never bad data.
    """

    def __init__(self, expected: EntryKind, actual: EntryKind, path: str):
        super().__init__(f"Expected a {expected}, got a {actual}: {path}")
        self.expected = expected
        self.actual = actual
        self.path = path
