"""
Readers for the two PDF string token syntaxes.

Literal strings are parenthesized and support backslash escapes and balanced
nested parentheses; hex strings are hex digit pairs between angle brackets.
Both readers take the buffer and the index of the opening delimiter and
return the payload bytes together with the index to resume scanning at.
Malformed input never raises: escapes fall back to the escaped character,
unterminated strings run to the end of the buffer.
"""

import string
from typing import Iterator, NamedTuple

_BACKSLASH = 0x5C
_OPEN_PAREN = 0x28
_CLOSE_PAREN = 0x29
_LESS_THAN = 0x3C
_GREATER_THAN = 0x3E
_CR = 0x0D
_LF = 0x0A

_OCTAL_DIGITS = frozenset(b"01234567")
_HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))

_ESCAPES = {
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("b"): 0x08,
    ord("f"): 0x0C,
}


class StringToken(NamedTuple):
    payload: bytes
    next_index: int


def read_literal_string(buf: bytes, start: int) -> StringToken:
    """Read a literal string whose `(` sits at `buf[start]`."""
    i = start + 1
    depth = 1
    out = bytearray()

    while i < len(buf):
        ch = buf[i]

        if ch == _BACKSLASH:
            if i + 1 >= len(buf):
                break
            nxt = buf[i + 1]

            # line continuation
            if nxt == _CR:
                i += 3 if buf[i + 2 : i + 3] == b"\n" else 2
                continue
            if nxt == _LF:
                i += 2
                continue

            if nxt in _OCTAL_DIGITS:
                # one to three digits, \0053 is "\005" followed by "3"
                end = i + 2
                while end < min(i + 4, len(buf)) and buf[end] in _OCTAL_DIGITS:
                    end += 1
                out.append(int(buf[i + 1 : end], 8) & 0xFF)
                i = end
                continue

            # \( \) \\ and unknown escapes keep the character itself
            out.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue

        if ch == _OPEN_PAREN:
            depth += 1
        elif ch == _CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                i += 1
                break
        out.append(ch)
        i += 1

    return StringToken(bytes(out), i)


def read_hex_string(buf: bytes, start: int) -> StringToken:
    """Read a hex string whose `<` sits at `buf[start]`."""
    i = start + 1
    digits = bytearray()
    while i < len(buf):
        ch = buf[i]
        i += 1
        if ch == _GREATER_THAN:
            break
        if ch in _HEX_DIGITS:
            digits.append(ch)

    if len(digits) % 2:
        digits.append(ord("0"))
    return StringToken(bytes.fromhex(digits.decode("ascii")), i)


def iter_string_payloads(block: bytes) -> Iterator[bytes]:
    """
    Yield the payload of every string token in a text block, left to right.

    Operators, numbers, names and whitespace between strings are skipped.
    A hex string opens at a `<` that is not followed by another `<`, so in a
    `<<` pair only the second `<` starts one.
    """
    i = 0
    while i < len(block):
        ch = block[i]
        if ch == _OPEN_PAREN:
            payload, i = read_literal_string(block, i)
            yield payload
        elif ch == _LESS_THAN:
            if block[i + 1 : i + 2] == b"<":
                i += 1
                continue
            payload, i = read_hex_string(block, i)
            yield payload
        else:
            i += 1
