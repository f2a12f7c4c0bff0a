"""
Turn the raw bytes of a PDF string operand into text.

Which encoding a string uses depends on its font, and fonts are not resolved
here. Strategies are therefore tried in a fixed order:

1. A UTF-16BE byte order mark means the rest is UTF-16BE.
2. With a ToUnicode table available, the bytes are read as 2-byte glyph codes.
   Codes missing from the table still count when they look like plain UCS-2
   ASCII (`00 xx`). The result is only accepted when enough codes resolve.
3. Latin-1, which maps every byte to a character and never fails.

Single-byte custom encodings end up in the Latin-1 branch and may come out
garbled; no further detection is attempted.
"""

from slides2text.extractors.pdf.to_unicode import CodeMap, decode_utf16be
from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

_UTF16BE_BOM = b"\xfe\xff"


def decode_string_bytes(
    payload: bytes,
    code_map: CodeMap,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> str:
    if len(payload) >= 2 and payload.startswith(_UTF16BE_BOM):
        return decode_utf16be(payload[2:])

    if code_map and len(payload) >= 2:
        decoded = _decode_glyph_codes(payload, code_map, limits.min_code_map_hit_ratio)
        if decoded is not None:
            return decoded

    return payload.decode("latin-1")


def _decode_glyph_codes(
    payload: bytes, code_map: CodeMap, min_hit_ratio: float
) -> str | None:
    pairs = len(payload) // 2
    hits = 0
    parts = []
    for i in range(0, pairs * 2, 2):
        code = (payload[i] << 8) | payload[i + 1]
        mapped = code_map.get(code)
        if mapped is not None:
            parts.append(mapped)
            hits += 1
        elif payload[i] == 0x00 and 0x20 <= payload[i + 1] <= 0x7E:
            parts.append(chr(payload[i + 1]))
            hits += 1

    if hits == 0 or hits / max(1, pairs) < min_hit_ratio:
        return None
    return "".join(parts)
