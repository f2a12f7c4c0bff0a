from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionLimits:
    """
    Heuristic thresholds for salvaging text from raw PDF content streams.

    The defaults are tuned for PDFs exported from presentation tools. Every
    threshold is a best-effort cut-off: falling below one only drops content
    from the result, it never raises.
    """

    # how far before a `stream` keyword the stream dictionary is searched
    dictionary_lookback_bytes: int = 4096
    # share of TAB/LF/CR/printable ASCII bytes a content stream needs
    min_printable_ratio: float = 0.75
    # share of 2-byte codes that must resolve through the ToUnicode table
    min_code_map_hit_ratio: float = 0.2
    min_fragment_length: int = 3
    max_inflated_bytes: int = 256 * 1024 * 1024  # 256 MiB


DEFAULT_EXTRACTION_LIMITS = ExtractionLimits()
