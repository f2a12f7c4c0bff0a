import logging
import zlib
from dataclasses import dataclass

from slides2text.extractors.data_types import StreamRecord
from slides2text.extractors.util.limits import (
    DEFAULT_EXTRACTION_LIMITS,
    ExtractionLimits,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InflateOutcome:
    """Result of inflating one stream: either the data or the reason it was skipped."""

    data: bytes = b""
    skipped: bool = False
    reason: str = ""

    @property
    def ok(self) -> bool:
        return not self.skipped


def _skip(reason: str) -> InflateOutcome:
    return InflateOutcome(skipped=True, reason=reason)


def inflate_stream(
    record: StreamRecord, *, limits: ExtractionLimits = DEFAULT_EXTRACTION_LIMITS
) -> InflateOutcome:
    """
    Inflate the payload of a /FlateDecode stream.

    Never raises: corrupt or truncated data, a false /FlateDecode claim and
    payloads that would inflate beyond `limits.max_inflated_bytes` all come
    back as a skipped outcome.
    """
    if not record.is_flate:
        return _skip("not FlateDecode")

    inflater = zlib.decompressobj()
    try:
        data = inflater.decompress(record.payload, limits.max_inflated_bytes + 1)
    except zlib.error as exc:
        return _skip(f"inflate failed: {exc}")

    if len(data) > limits.max_inflated_bytes:
        return _skip(
            f"inflated size exceeds budget ({limits.max_inflated_bytes} bytes)"
        )
    if not inflater.eof:
        return _skip("inflate failed: incomplete or truncated stream")
    return InflateOutcome(data=data)
