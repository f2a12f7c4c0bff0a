from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

# TAB, LF, CR and printable ASCII
_PRINTABLE_BYTES = frozenset([0x09, 0x0A, 0x0D, *range(0x20, 0x7F)])


def printable_ratio(data: bytes) -> float:
    """Share of bytes that are TAB, LF, CR or printable ASCII; 0.0 for empty data."""
    if not data:
        return 0.0
    printable = sum(1 for byte in data if byte in _PRINTABLE_BYTES)
    return printable / len(data)


def looks_like_text_content(
    data: bytes,
    ratio: float | None = None,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> bool:
    """
    Cheap pre-filter for content streams that may paint text.

    Fonts, images and other binary streams fail the printable ratio; anything
    without both `BT` and `ET` cannot hold a text object.
    """
    if ratio is None:
        ratio = printable_ratio(data)
    if ratio < limits.min_printable_ratio:
        return False
    return b"BT" in data and b"ET" in data
