"""Remark entry: a line of help text placed in an argument table."""

from __future__ import annotations

from .base import Arg


class ArgRem(Arg):
    """Entry that matches no options and only contributes help text."""

    def __init__(self, datatype: str | None = None, glossary: str | None = None) -> None:
        super().__init__(None, None, datatype, 1, 1, glossary, has_value=False)

    def reset(self) -> None:
        """Remarks hold no state; nothing to forget."""
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Remarks never take occurrences."""
        raise TypeError("a remark does not accept values")

    def check(self) -> None:
        """Remarks are never reported missing."""