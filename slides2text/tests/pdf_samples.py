"""Builders for small synthetic PDF files used across the tests."""

import zlib


def flate_stream(content: bytes) -> bytes:
    payload = zlib.compress(content)
    return (
        b"<< /Length %d /Filter /FlateDecode >>\nstream\n" % len(payload)
        + payload
        + b"\nendstream"
    )


def plain_stream(content: bytes, dictionary: bytes | None = None) -> bytes:
    if dictionary is None:
        dictionary = b"<< /Length %d >>" % len(content)
    return dictionary + b"\nstream\n" + content + b"\nendstream"


def to_unicode_cmap(bfchar: bytes = b"", bfrange: bytes = b"") -> bytes:
    body = b"/CIDInit /ProcSet findresource begin\n12 dict begin\nbegincmap\n"
    if bfchar:
        body += b"1 beginbfchar\n" + bfchar + b"\nendbfchar\n"
    if bfrange:
        body += b"1 beginbfrange\n" + bfrange + b"\nendbfrange\n"
    body += b"endcmap\nend\nend"
    return plain_stream(body)


def build_pdf(*objects: bytes) -> bytes:
    out = bytearray(b"%PDF-1.4\n")
    for number, body in enumerate(objects, start=1):
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    out += b"trailer\n<< /Size %d >>\n" % (len(objects) + 1)
    out += b"%%EOF\n"
    return bytes(out)
