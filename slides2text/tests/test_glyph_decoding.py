import logging
import unittest

from slides2text.extractors.pdf.glyph_decoding import decode_string_bytes
from slides2text.extractors.pdf.to_unicode import CodeMap
from slides2text.extractors.util.limits import ExtractionLimits

logger = logging.getLogger(__name__)

tc = unittest.TestCase()


def _code_map(mappings: dict[int, str]) -> CodeMap:
    code_map = CodeMap()
    for code, text in mappings.items():
        code_map.register(code, text)
    return code_map


def test_byte_order_mark_selects_utf16be() -> None:
    tc.assertEqual("Hi", decode_string_bytes(b"\xfe\xff\x00H\x00i", CodeMap()))


def test_byte_order_mark_drops_dangling_byte() -> None:
    tc.assertEqual("Hi", decode_string_bytes(b"\xfe\xff\x00H\x00i\x00", CodeMap()))


def test_byte_order_mark_wins_over_code_map() -> None:
    code_map = _code_map({0x0048: "X"})

    tc.assertEqual("Hi", decode_string_bytes(b"\xfe\xff\x00H\x00i", code_map))


def test_code_map_resolves_two_byte_codes() -> None:
    code_map = _code_map({0x0003: "A", 0x0004: "B", 0x0005: "C"})

    tc.assertEqual("ABC", decode_string_bytes(b"\x00\x03\x00\x04\x00\x05", code_map))


def test_code_map_falls_back_to_ucs2_ascii() -> None:
    code_map = _code_map({0x0003: "A"})

    tc.assertEqual("A Hi", decode_string_bytes(b"\x00\x03\x00 \x00H\x00i", code_map))


def test_code_map_skips_unresolved_codes() -> None:
    code_map = _code_map({0x0003: "A"})

    # one hit out of two codes
    tc.assertEqual("A", decode_string_bytes(b"\x00\x03\x00\x04", code_map))


def test_code_map_hit_ratio_threshold() -> None:
    code_map = _code_map({0x0102: "X"})

    accepted = b"\x01\x02" + b"\xff\xff" * 4
    tc.assertEqual("X", decode_string_bytes(accepted, code_map))

    rejected = b"\x01\x02" + b"\xff\xff" * 5
    tc.assertEqual(rejected.decode("latin-1"), decode_string_bytes(rejected, code_map))


def test_code_map_hit_ratio_is_configurable() -> None:
    code_map = _code_map({0x0102: "X"})
    payload = b"\x01\x02\xff\xff"

    tc.assertEqual("X", decode_string_bytes(payload, code_map))
    tc.assertEqual(
        "\x01\x02ÿÿ",
        decode_string_bytes(
            payload, code_map, limits=ExtractionLimits(min_code_map_hit_ratio=0.9)
        ),
    )


def test_single_byte_text_with_code_map_falls_through_to_latin1() -> None:
    code_map = _code_map({0x0003: "A"})

    tc.assertEqual("Hello world", decode_string_bytes(b"Hello world", code_map))


def test_latin1_without_code_map() -> None:
    tc.assertEqual("café", decode_string_bytes(b"caf\xe9", CodeMap()))
    tc.assertEqual("\x00\x03", decode_string_bytes(b"\x00\x03", CodeMap()))


def test_short_payloads_use_latin1() -> None:
    code_map = _code_map({0x0041: "Z"})

    tc.assertEqual("A", decode_string_bytes(b"A", code_map))
    tc.assertEqual("", decode_string_bytes(b"", code_map))
    tc.assertEqual("þ", decode_string_bytes(b"\xfe", code_map))
