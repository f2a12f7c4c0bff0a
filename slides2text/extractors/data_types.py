import typing
from abc import abstractmethod
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Protocol


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )

    def to_dict(self) -> dict:
        return asdict(self)


class ExtractionInterface(Protocol):
    @abstractmethod
    def iterator(self) -> typing.Iterator[str]:
        """
        Returns an iterator over the extracted text units.
        A slide-text extraction returns one unit per content stream that
        carried readable text, in the order the streams occur in the file.
        """
        ...

    @abstractmethod
    def get_full_text(self) -> str:
        """Full text of the document as one single block of text"""
        ...

    @abstractmethod
    def get_metadata(self) -> FileMetadataInterface:
        """Returns the metadata of the extracted file"""
        ...


##########
# streams
##########


@dataclass(frozen=True)
class StreamRecord:
    """One `stream ... endstream` region found in the raw file."""

    dictionary: str = ""
    payload: bytes = b""
    is_flate: bool = False
    # byte offsets of the payload within the raw file (end is exclusive)
    payload_start: int = 0
    payload_end: int = 0


@dataclass
class SlideStream:
    # 1-based position of the stream in scan order
    scan_index: int = 0
    printable_ratio: float = 0.0
    fragments: List[str] = field(default_factory=list)

    def text(self) -> str:
        return "\n".join(self.fragments)


#############
# slide text
#############


@dataclass
class SlideTextMetadata(FileMetadataInterface):
    total_streams: int = 0
    flate_streams: int = 0
    code_map_size: int = 0


@dataclass
class SlideTextContent(ExtractionInterface):
    streams: List[SlideStream] = field(default_factory=list)
    metadata: SlideTextMetadata = field(default_factory=SlideTextMetadata)

    def iterator(self) -> typing.Iterator[str]:
        for stream in self.streams:
            yield stream.text()

    def get_full_text(self) -> str:
        return "\n".join(self.iterator())

    def get_metadata(self) -> SlideTextMetadata:
        return self.metadata

    def to_json(self) -> dict:
        from slides2text.extractors.serialization import serialize_extraction

        return serialize_extraction(self)
