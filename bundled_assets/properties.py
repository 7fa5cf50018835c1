"""Parser for ``.properties`` files.

Configuration resources and locale bundles are flat ``key=value`` text files
in the classic ``.properties`` format. This module implements the subset of that
format that shows up in practice:

- ``#`` and ``!`` comment lines, blank lines
- ``=``, ``:`` or whitespace between key and value
- trailing ``\\`` joins the next line (its leading whitespace is dropped)
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes; any other escaped
  character stands for itself

Content is decoded as UTF-8 and falls back to ISO-8859-1.
"""

from __future__ import annotations

from collections.abc import Iterator

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


def _logical_lines(text: str) -> Iterator[str]:
    buffer: list[str] = []
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE) if buffer else raw
        if not buffer:
            stripped = line.lstrip(_WHITESPACE)
            if not stripped or stripped[0] in "#!":
                continue
            line = stripped
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            buffer.append(line[:-1])
            continue
        buffer.append(line)
        yield "".join(buffer)
        buffer = []
    if buffer:
        yield "".join(buffer)


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            code = text[i + 2 : i + 6]
            if len(code) != 4:
                raise ValueError(f"Malformed \\uXXXX encoding: {text[i:]!r}")
            out.append(chr(int(code, 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in (":", "="):
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def loads(data: str | bytes) -> dict[str, str]:
    """Parse properties content into a dictionary.

    Later duplicates of a key replace earlier ones.

    Args:
        data: File content, either decoded text or raw bytes.

    Returns:
        Mapping of unescaped keys to unescaped values.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            text = data.decode("iso-8859-1")
    else:
        text = data
    if text.startswith("\ufeff"):
        text = text[1:]

    table: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split(line)
        table[_unescape(key)] = _unescape(value)
    return table
