"""Option whose values must match a regular expression."""

from __future__ import annotations

from .base import Arg, ArgError, ErrorCode
from .trex import ICASE, RegexError, TRex

__all__ = ["ArgRex", "ICASE"]


class ArgRex(Arg):
    """Option that accepts only values matching a pattern; they are kept in sval.

    The pattern is compiled when the option is created, so a malformed pattern
    raises RegexError at once rather than when a value is first scanned.
    """

    def __init__(
        self,
        shortopts: str | None = None,
        longopts: str | None = None,
        pattern: str | None = None,
        datatype: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        flags: int = 0,
        glossary: str | None = None,
    ) -> None:
        if pattern is None:
            raise ValueError('illegal regular expression pattern "(NULL)"')
        super().__init__(
            shortopts,
            longopts,
            datatype if datatype else pattern,
            mincount,
            maxcount,
            glossary,
            has_value=True,
        )
        self.pattern = pattern
        self.flags = flags
        self._regex = TRex(pattern, flags)
        # One slot per permitted occurrence, each starting as an empty string.
        self.sval: list[str] = [""] * self.maxcount

    @property
    def values(self) -> list[str]:
        """Values of the occurrences seen so far."""
        return self.sval[:self.count]

    def _describe(self, code: ErrorCode, value: str | None) -> str:
        if code is ErrorCode.REGNOMATCH:
            return f"illegal value  {self._option_label(value or '')}"
        return super()._describe(code, value)

    def reset(self) -> None:
        """Forget every occurrence seen so far."""
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Record one value if it matches the pattern; raise ArgError otherwise.

        An occurrence without a value is counted but leaves its slot unchanged.
        """
        if self.count == self.maxcount:
            raise ArgError(ErrorCode.MAXCOUNT, self, value)
        if value is None:
            self.count += 1
            return
        if not self._regex.match(value):
            raise ArgError(ErrorCode.REGNOMATCH, self, value)
        self.sval[self.count] = value
        self.count += 1


# Re-exported so callers can catch pattern errors from this module.
RegexError = RegexError