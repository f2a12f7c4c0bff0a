from typing import Iterator

_BEGIN_TEXT = b"BT"
_END_TEXT = b"ET"


def iter_text_blocks(content: bytes) -> Iterator[bytes]:
    """
    Yield the bytes strictly between each `BT` and the next `ET`.

    Markers are found by substring search, not by operator tokenizing. A `BT`
    without a later `ET` ends the scan and is not yielded.
    """
    cursor = 0
    while cursor < len(content):
        begin = content.find(_BEGIN_TEXT, cursor)
        if begin == -1:
            return
        end = content.find(_END_TEXT, begin + len(_BEGIN_TEXT))
        if end == -1:
            return
        yield content[begin + len(_BEGIN_TEXT) : end]
        cursor = end + len(_END_TEXT)
