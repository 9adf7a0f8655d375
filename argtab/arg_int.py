"""Integer option accepting decimal, hex, octal and binary values with size suffixes."""

from __future__ import annotations

from .base import Arg, ArgError, ErrorCode

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_PREFIXES = (("X", 16), ("O", 8), ("B", 2))
_SUFFIXES = (("KB", 1024), ("MB", 1048576), ("GB", 1073741824))


def _digit(ch: str) -> int:
    return _DIGITS.find(ch.lower()) if ch.isascii() else -1


def _strtol(text: str, start: int, base: int) -> tuple[int, int]:
    """Parse like strtol; the end equals start when no digits were found."""
    i = start
    n = len(text)
    while i < n and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    if (
        base == 16
        and text[i:i + 2].lower() == "0x"
        and i + 2 < n
        and 0 <= _digit(text[i + 2]) < 16
    ):
        i += 2
    first = i
    while i < n and 0 <= _digit(text[i]) < base:
        i += 1
    if i == first:
        return 0, start
    return sign * int(text[first:i], base), i


def _strtol_prefixed(text: str, letter: str, base: int) -> tuple[int, int] | None:
    """Parse a number written as [sign]0<letter><digits>, or return None."""
    i = 0
    n = len(text)
    while i < n and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    if text[i:i + 1] != "0" or text[i + 1:i + 2].upper() != letter:
        return None
    value, end = _strtol(text, i + 2, base)
    if end == i + 2:
        return None
    return sign * value, end


def _has_suffix(rest: str, suffix: str) -> bool:
    size = len(suffix)
    if rest[:size].upper() != suffix:
        return False
    return all(ch in _WHITESPACE for ch in rest[size:])


def parse_int(text: str) -> int:
    """Convert an option value to an int.

    Accepts 0x, 0o and 0b prefixes, an optional KB/MB/GB suffix and trailing
    whitespace. Raises ValueError for malformed text and OverflowError when
    the value does not fit a 32-bit signed integer.
    """
    for letter, base in _PREFIXES:
        parsed = _strtol_prefixed(text, letter, base)
        if parsed is not None:
            value, end = parsed
            break
    else:
        value, end = _strtol(text, 0, 10)
        if end == 0:
            raise ValueError(f"invalid integer {text!r}")

    rest = text[end:]
    for suffix, multiplier in _SUFFIXES:
        if _has_suffix(rest, suffix):
            break
    else:
        if not _has_suffix(rest, ""):
            raise ValueError(f"invalid suffix in {text!r}")
        multiplier = 1

    result = value * multiplier
    if not INT_MIN <= result <= INT_MAX:
        raise OverflowError(f"{text} is too large")
    return result


class ArgInt(Arg):
    """Option that takes integer values; parsed values are kept in ival."""

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
            datatype if datatype else "<int>",
            mincount,
            maxcount,
            glossary,
            has_value=True,
        )
        # One slot per permitted occurrence; a value-less occurrence leaves its slot as is.
        self.ival: list[int] = [0] * self.maxcount

    @property
    def values(self) -> list[int]:
        """Values of the occurrences seen so far."""
        return self.ival[:self.count]

    def _describe(self, code: ErrorCode, value: str | None) -> str:
        value = value or ""
        if code is ErrorCode.BADINT:
            return f'invalid argument "{value}" to option {self._option_label(self.datatype)}'
        if code is ErrorCode.OVERFLOW:
            return (
                f"integer overflow at option {self._option_label(self.datatype)} "
                f"({value} is too large)"
            )
        return super()._describe(code, value)

    def reset(self) -> None:
        """Forget every occurrence seen so far."""
        self.count = 0

    def scan(self, value: str | None = None) -> None:
        """Parse and record one value; raise ArgError when it is rejected."""
        if self.count == self.maxcount:
            raise ArgError(ErrorCode.MAXCOUNT, self, value)
        if value is None:
            self.count += 1
            return
        try:
            parsed = parse_int(value)
        except OverflowError:
            raise ArgError(ErrorCode.OVERFLOW, self, value) from None
        except ValueError:
            raise ArgError(ErrorCode.BADINT, self, value) from None
        self.ival[self.count] = parsed
        self.count += 1