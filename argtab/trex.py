"""Small backtracking regular expression engine used to validate option values.

Supported syntax: literals, ``.``, ``^``, ``$``, ``|``, ``(...)``, ``(?:...)``,
``[...]`` and ``[^...]`` classes with ranges, the quantifiers ``*``, ``+``,
``?``, ``{n}``, ``{n,}`` and ``{n,m}``, the escapes ``\\n \\t \\r \\f \\v``,
word boundaries ``\\b`` and ``\\B``, and the character classes
``\\a \\w \\s \\d \\x \\c \\p`` (upper case negates) plus ``\\l`` and ``\\u``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple

ICASE = 1

# Operator codes lie beyond every code point so they never clash with literals.
_OP_BASE = 0x110000
_OP_GREEDY = _OP_BASE + 1
_OP_OR = _OP_BASE + 2
_OP_EXPR = _OP_BASE + 3
_OP_NOCAPEXPR = _OP_BASE + 4
_OP_DOT = _OP_BASE + 5
_OP_CLASS = _OP_BASE + 6
_OP_CCLASS = _OP_BASE + 7
_OP_NCLASS = _OP_BASE + 8
_OP_RANGE = _OP_BASE + 9
_OP_EOL = _OP_BASE + 11
_OP_BOL = _OP_BASE + 12
_OP_WB = _OP_BASE + 13

_UNBOUNDED = 0xFFFF
_BACKSLASH = ord("\\")
_ELEMENT_STOP = frozenset(map(ord, "|)*+")) | {0}

_ESCAPES = {ord("v"): 11, ord("n"): 10, ord("t"): 9, ord("r"): 13, ord("f"): 12}


def _isupper(c: int) -> bool:
    return 65 <= c <= 90


def _islower(c: int) -> bool:
    return 97 <= c <= 122


def _isalpha(c: int) -> bool:
    return _isupper(c) or _islower(c)


def _isdigit(c: int) -> bool:
    return 48 <= c <= 57


def _isalnum(c: int) -> bool:
    return _isalpha(c) or _isdigit(c)


def _isxdigit(c: int) -> bool:
    return _isdigit(c) or 65 <= c <= 70 or 97 <= c <= 102


def _isspace(c: int) -> bool:
    return c == 32 or 9 <= c <= 13


def _iscntrl(c: int) -> bool:
    return 0 <= c <= 31 or c == 127


def _isprint(c: int) -> bool:
    return 32 <= c <= 126


def _ispunct(c: int) -> bool:
    return 33 <= c <= 126 and not _isalnum(c)


def _toupper(c: int) -> int:
    return c - 32 if _islower(c) else c


def _tolower(c: int) -> int:
    return c + 32 if _isupper(c) else c


_CCLASSES: dict[int, Callable[[int], bool]] = {
    ord("a"): _isalpha,
    ord("A"): lambda c: not _isalpha(c),
    ord("w"): lambda c: _isalnum(c) or c == 95,
    ord("W"): lambda c: not _isalnum(c) and c != 95,
    ord("s"): _isspace,
    ord("S"): lambda c: not _isspace(c),
    ord("d"): _isdigit,
    ord("D"): lambda c: not _isdigit(c),
    ord("x"): _isxdigit,
    ord("X"): lambda c: not _isxdigit(c),
    ord("c"): _iscntrl,
    ord("C"): lambda c: not _iscntrl(c),
    ord("p"): _ispunct,
    ord("P"): lambda c: not _ispunct(c),
    ord("l"): _islower,
    ord("u"): _isupper,
}


def _match_cclass(cls: int, c: int) -> bool:
    predicate = _CCLASSES.get(cls)
    return predicate(c) if predicate is not None else False


def _satisfied(p0: int, p1: int, count: int) -> bool:
    return count >= p0 and (p1 == _UNBOUNDED or count <= p1)


class RegexError(ValueError):
    """A pattern could not be compiled."""

    def __init__(self, message: str, pattern: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.pattern = pattern

    def __str__(self) -> str:
        return self.message


class SubMatch(NamedTuple):
    """Start index and length of a captured group; begin is None when unset."""

    begin: int | None
    length: int


@dataclass(slots=True)
class _Node:
    type: int
    left: int = -1
    right: int = -1
    next: int = -1


class _Compiler:
    """Recursive-descent parser that turns a pattern into a node graph."""

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._p = 0
        self.nodes: list[_Node] = []
        self.nsubexpr = 0

    def compile(self) -> int:
        first = self._new_node(_OP_EXPR)
        self.nodes[first].left = self._list()
        if self._peek() != 0:
            self._error("unexpected character")
        return first

    def _error(self, message: str) -> None:
        raise RegexError(message, self._pattern)

    def _peek(self) -> int:
        if self._p < len(self._pattern):
            return ord(self._pattern[self._p])
        return 0

    def _take(self) -> int:
        c = self._peek()
        self._p += 1
        return c

    def _new_node(self, type_: int) -> int:
        node = _Node(type_)
        if type_ == _OP_EXPR:
            node.right = self.nsubexpr
            self.nsubexpr += 1
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _expect(self, ch: str) -> None:
        if self._peek() != ord(ch):
            self._error("expected paren")
        self._p += 1

    def _escape_char(self) -> int:
        if self._peek() == _BACKSLASH:
            self._p += 1
            c = self._take()
            return _ESCAPES.get(c, c)
        if not _isprint(self._peek()):
            self._error("letter expected")
        return self._take()

    def _char_node(self, isclass: bool) -> int:
        if self._peek() == _BACKSLASH:
            self._p += 1
            c = self._take()
            if c in _ESCAPES:
                return self._new_node(_ESCAPES[c])
            if c in _CCLASSES:
                node = self._new_node(_OP_CCLASS)
                self.nodes[node].left = c
                return node
            if c in (ord("b"), ord("B")) and not isclass:
                node = self._new_node(_OP_WB)
                self.nodes[node].left = c
                return node
            return self._new_node(c)
        if not _isprint(self._peek()):
            self._error("letter expected")
        return self._new_node(self._take())

    def _class(self) -> int:
        if self._peek() == ord("^"):
            ret = self._new_node(_OP_NCLASS)
            self._p += 1
        else:
            ret = self._new_node(_OP_CLASS)
        if self._peek() == ord("]"):
            self._error("empty class")
        nodes = self.nodes
        chain = ret
        first = -1
        while self._peek() != ord("]"):
            if self._peek() == ord("-") and first != -1:
                self._p += 1
                r = self._new_node(_OP_RANGE)
                if first > self._peek():
                    self._error("invalid range")
                if nodes[first].type == _OP_CCLASS:
                    self._error("cannot use character classes in ranges")
                nodes[r].left = nodes[first].type
                nodes[r].right = self._escape_char()
                nodes[chain].next = r
                chain = r
                first = -1
            else:
                if first != -1:
                    nodes[chain].next = first
                    chain = first
                first = self._char_node(True)
        if first != -1:
            nodes[chain].next = first
        nodes[ret].left = nodes[ret].next
        nodes[ret].next = -1
        return ret

    def _number(self) -> int:
        value = self._take() - 48
        positions = 10
        while _isdigit(self._peek()):
            value = value * 10 + (self._take() - 48)
            if positions == 1_000_000_000:
                self._error("overflow in numeric constant")
            positions *= 10
        return value

    def _atom(self) -> int:
        c = self._peek()
        if c == ord("("):
            self._p += 1
            if self._peek() == ord("?"):
                self._p += 1
                self._expect(":")
                ret = self._new_node(_OP_NOCAPEXPR)
            else:
                ret = self._new_node(_OP_EXPR)
            inner = self._list()
            self.nodes[ret].left = inner
            self._expect(")")
        elif c == ord("["):
            self._p += 1
            ret = self._class()
            self._expect("]")
        elif c == ord("$"):
            self._p += 1
            ret = self._new_node(_OP_EOL)
        elif c == ord("."):
            self._p += 1
            ret = self._new_node(_OP_DOT)
        else:
            ret = self._char_node(False)

        quant = self._peek()
        if quant == ord("*"):
            self._p += 1
            bounds = (0, _UNBOUNDED)
        elif quant == ord("+"):
            self._p += 1
            bounds = (1, _UNBOUNDED)
        elif quant == ord("?"):
            self._p += 1
            bounds = (0, 1)
        elif quant == ord("{"):
            self._p += 1
            if not _isdigit(self._peek()):
                self._error("number expected")
            p0 = self._number() & 0xFFFF
            if self._peek() == ord("}"):
                p1 = p0
                self._p += 1
            elif self._peek() == ord(","):
                self._p += 1
                p1 = _UNBOUNDED
                if _isdigit(self._peek()):
                    p1 = self._number() & 0xFFFF
                self._expect("}")
            else:
                self._error(", or } expected")
            bounds = (p0, p1)
        else:
            return ret
        greedy = self._new_node(_OP_GREEDY)
        self.nodes[greedy].left = ret
        self.nodes[greedy].right = (bounds[0] << 16) | bounds[1]
        return greedy

    def _element(self) -> int:
        head = tail = self._atom()
        while self._peek() not in _ELEMENT_STOP:
            node = self._atom()
            self.nodes[tail].next = node
            tail = node
        return head

    def _list(self) -> int:
        ret = -1
        if self._peek() == ord("^"):
            self._p += 1
            ret = self._new_node(_OP_BOL)
        element = self._element()
        if ret != -1:
            self.nodes[ret].next = element
        else:
            ret = element
        if self._peek() == ord("|"):
            self._p += 1
            alt = self._new_node(_OP_OR)
            self.nodes[alt].left = ret
            self.nodes[alt].right = self._list()
            ret = alt
        return ret


class TRex:
    """A compiled pattern; raises RegexError when the pattern is malformed."""

    def __init__(self, pattern: str, flags: int = 0) -> None:
        self.pattern = pattern
        self.flags = flags
        compiler = _Compiler(pattern)
        self._first = compiler.compile()
        self._nodes = compiler.nodes
        self._nsubexpr = compiler.nsubexpr
        self._matches = [SubMatch(None, 0)] * self._nsubexpr
        self._text = ""
        self._bol = 0
        self._eol = 0
        self._currsubexp = 0

    def _char(self, pos: int) -> int:
        if 0 <= pos < len(self._text):
            return ord(self._text[pos])
        return 0

    def _icase(self) -> bool:
        return bool(self.flags & ICASE)

    def _match_class(self, index: int, c: int) -> bool:
        icase = self._icase()
        while True:
            node = self._nodes[index]
            if node.type == _OP_RANGE:
                if icase:
                    if _toupper(node.left) <= c <= _toupper(node.right):
                        return True
                    if _tolower(node.left) <= c <= _tolower(node.right):
                        return True
                elif node.left <= c <= node.right:
                    return True
            elif node.type == _OP_CCLASS:
                if _match_cclass(node.left, c):
                    return True
            elif icase:
                if c == _tolower(node.type) or c == _toupper(node.type):
                    return True
            elif c == node.type:
                return True
            if node.next == -1:
                return False
            index = node.next

    def _match_node(self, index: int, pos: int, nxt: int | None) -> int | None:
        nodes = self._nodes
        node = nodes[index]
        kind = node.type

        if kind == _OP_GREEDY:
            stop_index = node.next if node.next != -1 else nxt
            p0 = (node.right >> 16) & 0xFFFF
            p1 = node.right & 0xFFFF
            count = 0
            s: int | None = pos
            good = pos
            while count == _UNBOUNDED or count < p1:
                s = self._match_node(node.left, s, stop_index)
                if s is None:
                    break
                count += 1
                good = s
                if stop_index is not None:
                    stop = nodes[stop_index]
                    if stop.type != _OP_GREEDY or (stop.right >> 16) & 0xFFFF != 0:
                        if stop.next != -1:
                            gnext: int | None = stop.next
                        elif nxt is not None and nodes[nxt].next != -1:
                            gnext = nodes[nxt].next
                        else:
                            gnext = None
                        if (
                            self._match_node(stop_index, s, gnext) is not None
                            and _satisfied(p0, p1, count)
                        ):
                            break
                if s >= self._eol:
                    break
            return good if _satisfied(p0, p1, count) else None

        if kind == _OP_OR:
            for branch in (node.left, node.right):
                cur: int | None = pos
                current = branch
                while (cur := self._match_node(current, cur, None)) is not None:
                    if nodes[current].next == -1:
                        return cur
                    current = nodes[current].next
            return None

        if kind in (_OP_EXPR, _OP_NOCAPEXPR):
            current = node.left
            cur = pos
            capture = -1
            if kind != _OP_NOCAPEXPR and node.right == self._currsubexp:
                capture = self._currsubexp
                self._matches[capture] = SubMatch(cur, self._matches[capture].length)
                self._currsubexp += 1
            while True:
                sub = nodes[current]
                subnext = sub.next if sub.next != -1 else nxt
                cur = self._match_node(current, cur, subnext)
                if cur is None:
                    if capture != -1:
                        self._matches[capture] = SubMatch(None, 0)
                    return None
                if sub.next == -1:
                    break
                current = sub.next
            if capture != -1:
                begin = self._matches[capture].begin
                self._matches[capture] = SubMatch(begin, cur - begin)
            return cur

        if kind == _OP_WB:
            c = self._char(pos)
            boundary = (
                (pos == self._bol and not _isspace(c))
                or (pos == self._eol and not _isspace(self._char(pos - 1)))
                or (not _isspace(c) and _isspace(self._char(pos + 1)))
                or (_isspace(c) and not _isspace(self._char(pos + 1)))
            )
            wants_boundary = node.left == ord("b")
            return pos if boundary == wants_boundary else None

        if kind == _OP_BOL:
            return pos if pos == self._bol else None

        if kind == _OP_EOL:
            return pos if pos == self._eol else None

        if kind == _OP_DOT:
            return pos + 1

        if kind in (_OP_CLASS, _OP_NCLASS):
            found = self._match_class(node.left, self._char(pos))
            return pos + 1 if found == (kind == _OP_CLASS) else None

        if kind == _OP_CCLASS:
            return pos + 1 if _match_cclass(node.left, self._char(pos)) else None

        c = self._char(pos)
        if self._icase():
            if c != _tolower(kind) and c != _toupper(kind):
                return None
        elif c != kind:
            return None
        return pos + 1

    def match(self, text: str) -> bool:
        """Return True if the whole of text matches the pattern."""
        self._text = text
        self._bol = 0
        self._eol = len(text)
        self._currsubexp = 0
        result = self._match_node(self._first, 0, None)
        return result is not None and result == self._eol

    def search_range(self, text: str, begin: int, end: int) -> tuple[int, int] | None:
        """Find the first match starting within text[begin:end].

        Returns the (start, stop) indices of the match, or None.
        """
        if begin >= end:
            return None
        self._text = text
        self._bol = begin
        self._eol = end
        for start in range(begin, end):
            self._currsubexp = 0
            stop = self._match_node(self._first, start, None)
            if stop is not None:
                return start, stop
        return None

    def search(self, text: str) -> tuple[int, int] | None:
        """Find the first match anywhere in text."""
        return self.search_range(text, 0, len(text))

    def subexp_count(self) -> int:
        """Number of capturing groups, the whole pattern counting as group 0."""
        return self._nsubexpr

    def subexp(self, n: int) -> SubMatch:
        """Capture n from the last match or search."""
        if n < 0 or n >= self._nsubexpr:
            raise IndexError(f"no sub-expression {n}")
        return self._matches[n]