"""
Slide Text Extractor
====================

Salvages readable text from PDF files exported by presentation tools, working
directly on the raw bytes instead of a parsed PDF object model.

Approach
--------
    1. Build one ToUnicode code map from every CMap section in the file
    2. Scan the file for `stream ... endstream` regions
    3. Inflate the /FlateDecode ones, drop anything that fails to inflate
    4. Keep streams that look like text content (printable ratio, BT/ET)
    5. Decode the string operands of each BT ... ET block into one fragment
    6. Normalize fragments and keep those that read like words

Each stream is handled independently and a failing stream is skipped without
affecting the others. Only reading the input file can fail the whole run.

Extracted Content
-----------------
    - streams: SlideStream entries in scan order, each with its 1-based scan
      index, printable ratio and the ordered list of text fragments
    - metadata: stream counters, code map size and file information

Usage
-----
    >>> import io
    >>> from slides2text.extractors.pdf.slide_extractor import read_pdf
    >>>
    >>> with open("deck.pdf", "rb") as f:
    ...     for doc in read_pdf(io.BytesIO(f.read()), path="deck.pdf"):
    ...         for stream in doc.streams:
    ...             print(stream.scan_index, stream.fragments)
"""

import io
import logging
import re
from typing import Any, Generator, Optional

from slides2text.exceptions import ExtractionError, ExtractionFailedError
from slides2text.extractors.data_types import (
    SlideStream,
    SlideTextContent,
    SlideTextMetadata,
    StreamRecord,
)
from slides2text.extractors.pdf.content_filter import (
    looks_like_text_content,
    printable_ratio,
)
from slides2text.extractors.pdf.glyph_decoding import decode_string_bytes
from slides2text.extractors.pdf.inflate import inflate_stream
from slides2text.extractors.pdf.stream_locator import iter_streams
from slides2text.extractors.pdf.string_tokens import iter_string_payloads
from slides2text.extractors.pdf.text_blocks import iter_text_blocks
from slides2text.extractors.pdf.to_unicode import CodeMap, build_code_map
from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

logger = logging.getLogger(__name__)

# ECMAScript `\s`: excludes U+0085 and U+001C..U+001F, includes U+FEFF
_WHITESPACE_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_RUN = re.compile(f"[{_WHITESPACE_CHARS}]+")
# basic Latin and Latin-1 Supplement letters
_LETTER = re.compile(r"[A-Za-z\u00c0-\u00ff]")


def read_pdf(
    file_like: io.BytesIO,
    path: Optional[str] = None,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> Generator[SlideTextContent, Any, None]:
    """
    Extract the slide text of a PDF file.

    Args:
        file_like: BytesIO object containing the complete PDF file data.
            The stream position is reset to the beginning before reading.
        path: Optional filesystem path to the source file. If provided,
            populates file metadata (filename, extension, folder).
        limits: Heuristic thresholds, see `ExtractionLimits`.

    Yields:
        SlideTextContent: a single result holding the streams that carried
        text, in scan order.
    """
    try:
        file_like.seek(0)
        data = file_like.read()

        code_map = build_code_map(data)

        metadata = SlideTextMetadata(code_map_size=len(code_map))
        streams = []
        for scan_index, record in enumerate(
            iter_streams(data, limits=limits), start=1
        ):
            metadata.total_streams += 1
            if record.is_flate:
                metadata.flate_streams += 1
            stream = extract_stream(record, scan_index, code_map, limits=limits)
            if stream is not None:
                streams.append(stream)

        metadata.populate_from_path(path)

        logger.info(
            "Extracted PDF: %d streams, %d with text",
            metadata.total_streams,
            len(streams),
        )

        yield SlideTextContent(streams=streams, metadata=metadata)
    except ExtractionError:
        raise
    except Exception as exc:
        raise ExtractionFailedError("Failed to extract PDF file", cause=exc) from exc


def extract_stream(
    record: StreamRecord,
    scan_index: int,
    code_map: CodeMap,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> Optional[SlideStream]:
    """
    Run one stream through inflate, filter and text decoding.

    Returns None when the stream is skipped or contributes no fragment.
    """
    outcome = inflate_stream(record, limits=limits)
    if not outcome.ok:
        logger.debug("Skipping stream %d: %s", scan_index, outcome.reason)
        return None

    ratio = printable_ratio(outcome.data)
    if not looks_like_text_content(outcome.data, ratio, limits=limits):
        logger.debug(
            "Skipping stream %d: no text content (printable ratio %.3f)",
            scan_index,
            ratio,
        )
        return None

    fragments = extract_stream_fragments(outcome.data, code_map, limits=limits)
    if not fragments:
        logger.debug("Skipping stream %d: no readable fragments", scan_index)
        return None

    return SlideStream(
        scan_index=scan_index, printable_ratio=ratio, fragments=fragments
    )


def extract_stream_fragments(
    content: bytes,
    code_map: CodeMap,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> list[str]:
    """Decode every text block of an inflated content stream, keeping block order."""
    fragments = []
    for block in iter_text_blocks(content):
        text = "".join(
            decode_string_bytes(payload, code_map, limits=limits)
            for payload in iter_string_payloads(block)
        )
        fragment = normalize_fragment(text)
        if is_readable_fragment(fragment, limits=limits):
            fragments.append(fragment)
    return fragments


def normalize_fragment(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return _WHITESPACE_RUN.sub(" ", text).strip(_WHITESPACE_CHARS)


def fragment_length(fragment: str) -> int:
    """Length in UTF-16 code units; astral characters count twice."""
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in fragment)


def is_readable_fragment(
    fragment: str, *, limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS
) -> bool:
    return fragment_length(fragment) >= limits.min_fragment_length and bool(
        _LETTER.search(fragment)
    )
