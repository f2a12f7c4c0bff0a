"""
ToUnicode CMap parsing.

Presentation tools commonly embed fonts with custom glyph codes and ship a
ToUnicode CMap for each of them, usually as plain text. This module scans the
whole raw file for `bfchar` and `bfrange` sections and merges every mapping it
finds into one document-wide `CodeMap`. Fonts are not told apart: when two
sections map the same code, the first one in the file wins.
"""

import logging
import re
from collections.abc import Mapping
from typing import Iterator

logger = logging.getLogger(__name__)

_BFCHAR_SECTION = re.compile(rb"beginbfchar(.*?)endbfchar", re.DOTALL)
_BFRANGE_SECTION = re.compile(rb"beginbfrange(.*?)endbfrange", re.DOTALL)

# <src> <dst>
_BFCHAR_ENTRY = re.compile(rb"<([0-9A-Fa-f]+)>\s*<([0-9A-Fa-f]+)>")
# <srcStart> <srcEnd> <dst>  or  <srcStart> <srcEnd> [<d0> <d1> ...]
_BFRANGE_ENTRY = re.compile(
    rb"<([0-9A-Fa-f]+)>\s*<([0-9A-Fa-f]+)>\s*(?:<([0-9A-Fa-f]+)>|\[([^\]]*)\])"
)
_HEX_OPERAND = re.compile(rb"<([0-9A-Fa-f]+)>")

# string payloads are looked up as 16-bit codes, larger codes never match
_MAX_CODE = 0xFFFF
_REPLACEMENT_CHARACTER = "\ufffd"


class CodeMap(Mapping):
    """
    Glyph code to Unicode text table shared by all decode calls of a document.

    Only `register` mutates the table and it keeps the first mapping of a code.
    """

    def __init__(self) -> None:
        self._codes: dict[int, str] = {}

    def register(self, code: int, text: str) -> bool:
        """Add a mapping unless the code is already mapped. Returns True if added."""
        if code in self._codes:
            return False
        self._codes[code] = text
        return True

    def __getitem__(self, code: int) -> str:
        return self._codes[code]

    def __iter__(self) -> Iterator[int]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeMap({len(self._codes)} codes)"


def decode_utf16be(data: bytes) -> str:
    """Decode big-endian UTF-16 without BOM; a dangling odd byte is dropped."""
    usable = len(data) - len(data) % 2
    return data[:usable].decode("utf-16-be", errors="replace")


def code_unit_to_text(value: int) -> str:
    """Text of a single 16-bit code unit. Unpaired surrogates become U+FFFD."""
    value &= 0xFFFF
    if 0xD800 <= value <= 0xDFFF:
        return _REPLACEMENT_CHARACTER
    return chr(value)


def _hex_to_bytes(digits: bytes) -> bytes:
    usable = len(digits) - len(digits) % 2
    return bytes.fromhex(digits[:usable].decode("ascii"))


def build_code_map(data: bytes) -> CodeMap:
    """
    Collect all bfchar and bfrange mappings of the raw file.

    bfchar sections are read before bfrange sections. Destinations shorter
    than one UTF-16 unit are ignored, as are range entries whose single
    destination is not exactly two bytes wide.
    """
    code_map = CodeMap()

    for section in _BFCHAR_SECTION.finditer(data):
        for src, dst in _BFCHAR_ENTRY.findall(section.group(1)):
            dst_bytes = _hex_to_bytes(dst)
            if len(dst_bytes) < 2:
                continue
            code_map.register(int(src, 16), decode_utf16be(dst_bytes))

    for section in _BFRANGE_SECTION.finditer(data):
        for entry in _BFRANGE_ENTRY.finditer(section.group(1)):
            src_start = int(entry.group(1), 16)
            src_end = int(entry.group(2), 16)
            if entry.group(3) is not None:
                _register_incrementing_range(
                    code_map, src_start, src_end, _hex_to_bytes(entry.group(3))
                )
            else:
                _register_array_range(
                    code_map,
                    src_start,
                    src_end,
                    _HEX_OPERAND.findall(entry.group(4)),
                )

    logger.debug("Built ToUnicode code map with %d codes", len(code_map))
    return code_map


def _register_incrementing_range(
    code_map: CodeMap, src_start: int, src_end: int, dst: bytes
) -> None:
    if len(dst) != 2:
        return
    dst_start = int.from_bytes(dst, "big")
    for code in range(src_start, min(src_end, _MAX_CODE) + 1):
        code_map.register(code, code_unit_to_text(dst_start + (code - src_start)))


def _register_array_range(
    code_map: CodeMap, src_start: int, src_end: int, destinations: list[bytes]
) -> None:
    for offset, dst in enumerate(destinations):
        code = src_start + offset
        if code > src_end:
            break
        dst_bytes = _hex_to_bytes(dst)
        if len(dst_bytes) < 2:
            continue
        code_map.register(code, decode_utf16be(dst_bytes))
