"""
Plain text report of an extraction, one section per stream that carried text.

    # Extracted Text From Slides
    source=<input path>
    streams_with_text=<count>

    # Stream <scan index>
    printable_ratio=<ratio>
    - <fragment>
"""

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from slides2text.extractors.data_types import SlideStream, SlideTextContent

REPORT_TITLE = "# Extracted Text From Slides"


def _format_ratio(ratio: float) -> str:
    # half-up on the exact binary value, 0.8125 -> 0.813
    return str(Decimal(ratio).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP))


def _format_stream(stream: SlideStream) -> str:
    lines = [
        f"# Stream {stream.scan_index}",
        f"printable_ratio={_format_ratio(stream.printable_ratio)}",
    ]
    lines.extend(f"- {fragment}" for fragment in stream.fragments)
    return "\n".join(lines) + "\n"


def format_report(content: SlideTextContent, source: str) -> str:
    streams = sorted(content.streams, key=lambda stream: stream.scan_index)
    header = (
        f"{REPORT_TITLE}\n"
        f"source={source}\n"
        f"streams_with_text={len(streams)}\n"
        "\n"
    )
    return header + "\n".join(_format_stream(stream) for stream in streams)


def write_report(content: SlideTextContent, source: str, output_path: str | Path) -> None:
    """Render the report first, then write it as UTF-8."""
    report = format_report(content, source)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(report)
