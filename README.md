# argtab

This package provides objects that describe command-line arguments. Each
object records how its argument is spelled and how often it may appear.
It also records what kind of value the argument takes. As you feed it
values, it collects them, checks them, and reports errors as exceptions.

## Installation

    pip install argtab

The package has no runtime dependencies.

## Argument types

| Class    | Module           | Collects                                             |
|----------|------------------|------------------------------------------------------|
| `ArgLit` | `argtab.arg_lit` | nothing: a flag that only counts its occurrences in `count` |
| `ArgInt` | `argtab.arg_int` | integers, stored in `ival`                           |
| `ArgStr` | `argtab.arg_str` | strings, stored in `sval`                            |
| `ArgRex` | `argtab.arg_rex` | strings that match a pattern, stored in `sval`       |
| `ArgRem` | `argtab.arg_rem` | nothing: a remark line that carries help text only   |

All of these derive from `argtab.base.Arg`. Each one has `shortopts`,
`longopts`, `datatype`, `glossary`, `mincount`, `maxcount` and `count`.
If `maxcount` is below `mincount`, it is raised to `mincount`.

- `reset()` forgets the occurrences seen so far. `ArgStr` also sets the
  strings it had stored back to `""`.
- `scan(value)` records one occurrence.
  - If you pass `None`, the occurrence is counted but nothing is stored.
  - When the argument already has `maxcount` occurrences, `scan` raises
    `ArgError` with code `MAXCOUNT`.
  - `ArgInt` raises `BADINT` for a malformed number and `OVERFLOW` for a
    value outside the 32-bit signed range.
  - `ArgRex` raises `REGNOMATCH` when the whole value does not match its
    pattern.
- `check()` raises `ArgError` with code `MINCOUNT` when fewer than
  `mincount` occurrences were recorded.

`ArgRem` is a special case. It raises `TypeError` from `scan`, and its
`check` never fails.

`ArgError.code` holds an `argtab.base.ErrorCode`, which is one of
`MINCOUNT`, `MAXCOUNT`, `BADINT`, `OVERFLOW` or `REGNOMATCH`. The
exception also has `arg` and `value` attributes. Its message names the
option, for example `missing option -s|--size <n>`.

`ArgInt` uses `<int>` as its default `datatype` and `ArgStr` uses
`<string>`. `ArgRex` defaults to its pattern. Each of these three
classes has a `values` property, which is the list of values collected
so far.

```python
from argtab.arg_int import ArgInt, parse_int
from argtab.arg_lit import ArgLit
from argtab.base import ArgError

verbose = ArgLit("v", "verbose", 0, 3, "more output")
size = ArgInt("s", "size", "<n>", 1, 1, "buffer size")

verbose.scan(None)
verbose.scan(None)
size.scan("4KB")
size.check()

print(verbose.count)       # 2
print(size.ival)           # [4096]
print(parse_int("-0x1F"))  # -31

try:
    size.scan("8")         # maxcount is 1
except ArgError as err:
    print(err.code)        # ErrorCode.MAXCOUNT
```

### Integer syntax

`argtab.arg_int.parse_int(text)` accepts the following:

- leading whitespace and an optional sign;
- a decimal number, or a `0x` (hex), `0o` (octal) or `0b` (binary)
  prefixed number; the prefix letter may be upper or lower case;
- an optional `KB`, `MB` or `GB` suffix in any case, which multiplies
  the value by 1024, 1024² or 1024³;
- trailing whitespace.

It raises `ValueError` for malformed text. It raises `OverflowError`
when the result does not fit a 32-bit signed integer.

## Regular expressions

`argtab.trex.TRex(pattern, flags)` compiles a pattern. If the pattern
is malformed, it raises `argtab.trex.RegexError`. The engine supports:

- literals and `.`;
- the anchors `^` and `$`;
- alternation `|`;
- capturing groups `(...)` and non-capturing groups `(?:...)`;
- classes `[...]` and `[^...]`, with ranges;
- the quantifiers `*`, `+`, `?`, `{n}`, `{n,}` and `{n,m}`;
- the escapes `\n \t \r \f \v`;
- word boundaries `\b` and `\B`;
- the classes `\a \w \s \d \x \c \p`, where the upper-case form negates;
- `\l` (lower case) and `\u` (upper case).

Passing `argtab.trex.ICASE` as the flags makes matching
case-insensitive.

A compiled pattern has these methods:

- `match(text)` returns whether the whole text matches.
- `search(text)` returns the `(start, stop)` indices of the first match,
  or `None`.
- `search_range(text, begin, end)` does the same, but only within
  `text[begin:end]`.
- `subexp_count()` returns the number of capturing groups. The whole
  pattern counts as group 0.
- `subexp(n)` returns a `SubMatch(begin, length)` for a group.

```python
from argtab.trex import TRex, RegexError

rex = TRex(r"(\d+)-(\w+)", 0)
rex.match("42-abc")        # True
rex.subexp_count()         # 3

try:
    TRex("[]", 0)
except RegexError as err:
    print(err)             # empty class
```

`ArgRex` compiles its pattern when it is constructed, so a bad pattern
raises `RegexError` straight away. A pattern of `None` raises
`ValueError`.

## Utilities

### Hash table

`argtab.hashtable.HashTable(minsize, hashfn, eqfn)` is a chained hash
table with prime-sized bucket arrays. It grows when its load limit is
passed.

- `insert`, `search`, `change` and `remove` add, look up, replace and
  delete entries.
- `len()`, iteration over keys and `items()` are supported.
- Duplicate keys are allowed.
- `cursor()` returns a `HashTableCursor` on the first entry.
- `find(key)` returns a `HashTableCursor` on a given key.

A `HashTableCursor` has these methods:

- `key()` and `value()` return the current entry's key and value.
- `advance()` moves to the next entry.
- `remove()` deletes the current entry and moves on.

### Merge sort

`argtab.utils.mgsort(data, comparefn)` sorts a mutable sequence in place
with a merge sort, using a three-way comparison function. The left
element is taken first only when it compares strictly smaller, so equal
elements may change their relative order.

### Panic handling

`argtab.utils.panic(message)` calls the current panic handler.
`argtab.utils.set_panic(handler)` installs a new handler and returns the
old one. Passing `None` restores the default handler.

The default handler writes the message to standard error and raises
`PanicError`, a `SystemExit` with status 1. If the `EF_DUMPCORE`
environment variable is set and not empty, it aborts the process
instead.

## What it does not do

The package has no command-line parser that walks `sys.argv` and sends
each word to the matching argument. It also does not print usage or
glossary text. Your own code calls `scan` for each value and `check`
when it has finished. Only the five argument types listed above are
provided.

## Running the tests

    pip install -e ".[test]"
    pytest