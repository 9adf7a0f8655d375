"""String option that stores its values verbatim."""

from __future__ import annotations

from .base import Arg, ArgError, ErrorCode


class ArgStr(Arg):
    """Option that takes string values; they are kept in sval."""

    def __init__(
        self,
        shortopts: str | None = None,
        longopts: str | None = None,
        datatype: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        glossary: str | None = None,
    ) -> None:
        super().__init__(
            shortopts,
            longopts,
            datatype if datatype else "<string>",
            mincount,
            maxcount,
            glossary,
            has_value=True,
        )
        # One slot per permitted occurrence, each starting as an empty string.
        self.sval: list[str] = [""] * self.maxcount

    @property
    def values(self) -> list[str]:
        """Values of the occurrences seen so far."""
        return self.sval[:self.count]

    def reset(self) -> None:
        """Forget every occurrence and clear the stored strings."""
        self.sval[:self.count] = [""] * self.count
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Record one value; raise ArgError when too many are seen.

        An occurrence without a value is counted but leaves its slot unchanged.
        """
        if self.count == self.maxcount:
            raise ArgError(ErrorCode.MAXCOUNT, self, value)
        if value is not None:
            self.sval[self.count] = value
        self.count += 1