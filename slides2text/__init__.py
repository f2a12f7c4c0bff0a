"""
slides-to-text: Best-effort text salvage for PDF slide decks.

A Python library for recovering readable text from PDF files exported by
presentation tools. It works on the raw file bytes: content streams are
located and inflated heuristically and custom glyph codes are resolved through
the ToUnicode tables embedded in the file.
"""

import io
from pathlib import Path
from typing import Any, Generator

from slides2text.exceptions import ExtractionFileReadError
from slides2text.extractors.data_types import (
    ExtractionInterface,
    SlideStream,
    SlideTextContent,
)
from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

__version__ = "0.1.0.dev1"


def read_pdf(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> Generator[SlideTextContent, Any, None]:
    """Extract slide text from an in-memory PDF file."""
    from slides2text.extractors.pdf.slide_extractor import read_pdf as _read_pdf

    return _read_pdf(file_like, path, limits=limits)


def read_file(
    path: str | Path,
    *,
    limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS,
) -> Generator[SlideTextContent, Any, None]:
    """
    Read a PDF file and extract its slide text.

    Args:
        path: Path to the PDF file.
        limits: Heuristic thresholds, see `ExtractionLimits`.

    Yields:
        A single SlideTextContent with the streams that carried text.

    Raises:
        ExtractionFileReadError: If the file cannot be read. This is the only
            failure of a run; damaged streams are skipped silently.

    Example:
        >>> import slides2text
        >>> for result in slides2text.read_file("deck.pdf"):
        ...     print(result.get_full_text())
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ExtractionFileReadError(str(path), cause=exc) from exc
    yield from read_pdf(io.BytesIO(data), str(path), limits=limits)


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_file",
    "read_pdf",
    # Results and configuration
    "ExtractionInterface",
    "SlideStream",
    "SlideTextContent",
    "ExtractionLimits",
    "DEFAULT_EXTRACTION_LIMITS",
]
