"""Common machinery shared by every kind of command-line argument."""

from __future__ import annotations

from enum import Enum, auto


class ErrorCode(Enum):
    """Reasons an argument can be rejected."""

    MINCOUNT = auto()
    MAXCOUNT = auto()
    BADINT = auto()
    OVERFLOW = auto()
    REGNOMATCH = auto()


class ArgError(Exception):
    """An argument value or count was rejected."""

    def __init__(self, code: ErrorCode, arg: Arg | None = None, value: str | None = None) -> None:
        self.code = code
        self.arg = arg
        self.value = value
        if arg is not None:
            message = arg._describe(code, value)
        else:
            message = code.name.lower()
        super().__init__(message)


class Arg:
    """An option or positional argument that counts its occurrences."""

    def __init__(
        self,
        shortopts: str | None = None,
        longopts: str | None = None,
        datatype: str | None = None,
        mincount: int = 0,
        maxcount: int = 1,
        glossary: str | None = None,
        has_value: bool = False,
    ) -> None:
        self.shortopts = shortopts
        self.longopts = longopts
        self.datatype = datatype
        self.glossary = glossary
        self.mincount = mincount
        # A maximum below the minimum is raised to the minimum.
        self.maxcount = max(maxcount, mincount)
        self.has_value = has_value
        self.count = 0

    def _option_label(self, datatype: str | None) -> str:
        names = [f"-{c}" for c in self.shortopts or ""]
        names += [f"--{name}" for name in (self.longopts or "").split("|") if name]
        label = "|".join(names)
        if datatype:
            label = f"{label} {datatype}" if label else datatype
        return label

    def _describe(self, code: ErrorCode, value: str | None) -> str:
        if code is ErrorCode.MINCOUNT:
            return f"missing option {self._option_label(self.datatype)}"
        if code is ErrorCode.MAXCOUNT:
            return f"excess option {self._option_label(value or '')}"
        return f"{code.name.lower()} at option {self._option_label(self.datatype)}"

    def reset(self) -> None:
        """Forget every occurrence seen so far."""
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Record one occurrence; raise ArgError when too many are seen."""
        if self.count >= self.maxcount:
            raise ArgError(ErrorCode.MAXCOUNT, self, value)
        self.count += 1

    def check(self) -> None:
        """Raise ArgError if fewer than mincount occurrences were seen."""
        if self.count < self.mincount:
            raise ArgError(ErrorCode.MINCOUNT, self)