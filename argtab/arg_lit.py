"""Flag option that takes no value and only counts its occurrences."""

from __future__ import annotations

from .base import Arg, ArgError, ErrorCode


class ArgLit(Arg):
    """Option without a value, such as -v or --verbose."""

    def __init__(
        self,
        shortopts: str | None = None,
        longopts: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        glossary: str | None = None,
    ) -> None:
        super().__init__(shortopts, longopts, None, mincount, maxcount, glossary, has_value=False)

    def _describe(self, code: ErrorCode, value: str | None) -> str:
        if code is ErrorCode.MAXCOUNT:
            return f"extraneous option {self._option_label(self.datatype)}"
        return super()._describe(code, value)

    def reset(self) -> None:
        """Forget every occurrence seen so far."""
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Count one occurrence; raise ArgError when too many are seen."""
        if self.count < self.maxcount:
            self.count += 1
        else:
            raise ArgError(ErrorCode.MAXCOUNT, self, value)