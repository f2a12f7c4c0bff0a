"""
Locate `stream ... endstream` regions in a raw PDF file.

The scan is purely textual: it neither reads the cross-reference table nor
trusts the `/Length` entry, so it keeps working on damaged or unusually
written files. The dictionary of each stream is recovered best-effort by
looking backwards for the nearest `<< ... >>` pair.
"""

import logging
from typing import Iterator

from slides2text.extractors.data_types import StreamRecord
from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

logger = logging.getLogger(__name__)

_STREAM = b"stream"
_ENDSTREAM = b"endstream"
_FLATE_FILTER = "/FlateDecode"


def iter_streams(
    data: bytes, *, limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS
) -> Iterator[StreamRecord]:
    """
    Yield every stream region of the raw file in file order.

    The cursor always resumes after the previous `endstream` keyword, so the
    yielded payload ranges never overlap. A `stream` keyword without a
    following `endstream` ends the scan.
    """
    pos = 0
    while True:
        stream_idx = data.find(_STREAM, pos)
        if stream_idx == -1:
            return
        end_idx = data.find(_ENDSTREAM, stream_idx)
        if end_idx == -1:
            return

        dictionary = _lookup_dictionary(
            data, stream_idx, limits.dictionary_lookback_bytes
        )

        payload_start = stream_idx + len(_STREAM)
        if data[payload_start : payload_start + 2] == b"\r\n":
            payload_start += 2
        elif data[payload_start : payload_start + 1] == b"\n":
            payload_start += 1

        payload_end = end_idx
        if end_idx >= 2 and data[end_idx - 2 : end_idx] == b"\r\n":
            payload_end -= 2
        elif end_idx >= 1 and data[end_idx - 1 : end_idx] == b"\n":
            payload_end -= 1
        # "stream\nendstream": the two newline strips overlap
        payload_end = max(payload_start, payload_end)

        yield StreamRecord(
            dictionary=dictionary,
            payload=data[payload_start:payload_end],
            is_flate=_FLATE_FILTER in dictionary,
            payload_start=payload_start,
            payload_end=payload_end,
        )
        pos = end_idx + len(_ENDSTREAM)


def _lookup_dictionary(data: bytes, stream_idx: int, lookback: int) -> str:
    window_start = max(0, stream_idx - lookback)
    dict_start = data.rfind(b"<<", window_start, stream_idx)
    if dict_start == -1:
        return ""
    dict_end = data.rfind(b">>", dict_start + 2, stream_idx)
    if dict_end == -1:
        return ""
    return data[dict_start : dict_end + 2].decode("latin-1")
