"""Data models for CUE sheet representation."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .cue_time import CueTime

CATALOG_PATTERN = re.compile(r"^[0-9]{13}$")


class _KeywordEnum(Enum):
    """Enum whose members are matched case-insensitively against CUE keywords."""

    @classmethod
    def from_string(cls, value: str) -> Any:
        """Look up a member by its keyword.

        Raises:
            ValueError: If the keyword is not a member
        """
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown {cls.__name__} value: {value}") from None


class TrackMode(_KeywordEnum):
    """Track data modes."""

    AUDIO = "AUDIO"
    CDG = "CDG"
    MODE1_2048 = "MODE1/2048"
    MODE1_2352 = "MODE1/2352"
    MODE2_2336 = "MODE2/2336"
    MODE2_2352 = "MODE2/2352"
    CDI_2336 = "CDI/2336"
    CDI_2352 = "CDI/2352"


class TrackFlag(_KeywordEnum):
    """Track sub-code flags."""

    PRE = "PRE"
    DCP = "DCP"
    FOUR_CHANNEL = "4CH"
    SCMS = "SCMS"


class FileFormat(_KeywordEnum):
    """Audio/data file formats accepted by FILE."""

    BINARY = "BINARY"
    MOTOROLA = "MOTOROLA"
    AIFF = "AIFF"
    WAVE = "WAVE"
    MP3 = "MP3"


@dataclass
class FileInfo:
    """Represents a FILE entry attached to a track."""

    filename: str
    format: FileFormat | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "format": self.format.value if self.format else None,
        }


@dataclass
class TrackIndex:
    """An INDEX entry: a numbered time offset within a track."""

    number: int
    time: CueTime

    def to_dict(self) -> dict[str, Any]:
        return {"number": self.number, "time": str(self.time)}


@dataclass
class Track:
    """Represents a single track in a CUE sheet."""

    number: int
    mode: TrackMode = TrackMode.AUDIO
    file: FileInfo | None = None
    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    composer: str | None = None
    arranger: str | None = None
    message: str | None = None
    isrc: str | None = None
    flags: list[TrackFlag] = field(default_factory=list)
    pregap: CueTime | None = None
    postgap: CueTime | None = None
    indexes: list[TrackIndex] = field(default_factory=list)
    remarks: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate track data."""
        if self.number < 1 or self.number > 99:
            raise ValueError(f"Track number must be 01-99, got {self.number}")

    def get_index(self, number: int) -> CueTime | None:
        """Get the time of the first INDEX with the given number.

        Returns:
            CueTime of the index, or None if not set
        """
        for index in self.indexes:
            if index.number == number:
                return index.time
        return None

    def get_start_time(self) -> CueTime | None:
        """Get the track start time (INDEX 01)."""
        return self.get_index(1)

    def get_pregap_start(self) -> CueTime | None:
        """Get the pregap start time (INDEX 00)."""
        return self.get_index(0)

    def sorted_indexes(self) -> list[TrackIndex]:
        """Indexes ordered by number; entries sharing a number keep source order."""
        return sorted(self.indexes, key=lambda index: index.number)

    def to_dict(self) -> dict[str, Any]:
        """Convert track to dictionary for serialization.

        Returns:
            Dictionary representation of track
        """
        return {
            "number": self.number,
            "mode": self.mode.value,
            "file": self.file.to_dict() if self.file else None,
            "title": self.title,
            "performer": self.performer,
            "songwriter": self.songwriter,
            "composer": self.composer,
            "arranger": self.arranger,
            "message": self.message,
            "isrc": self.isrc,
            "flags": [flag.value for flag in self.flags],
            "pregap": str(self.pregap) if self.pregap else None,
            "postgap": str(self.postgap) if self.postgap else None,
            "indexes": [index.to_dict() for index in self.indexes],
            "remarks": list(self.remarks),
        }


@dataclass
class DiscInfo:
    """Disc-level (global) fields of a CUE sheet."""

    catalog: str | None = None
    cdtextfile: str | None = None
    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    composer: str | None = None
    arranger: str | None = None
    message: str | None = None
    disc_id: str | None = None
    genre: str | None = None
    upc_ean: str | None = None
    remarks: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate catalog (UPC/EAN, 13 digits)."""
        if self.catalog is not None and not CATALOG_PATTERN.match(self.catalog):
            raise ValueError(f"CATALOG must be exactly 13 digits, got: {self.catalog}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "catalog": self.catalog,
            "cdtextfile": self.cdtextfile,
            "title": self.title,
            "performer": self.performer,
            "songwriter": self.songwriter,
            "composer": self.composer,
            "arranger": self.arranger,
            "message": self.message,
            "disc_id": self.disc_id,
            "genre": self.genre,
            "upc_ean": self.upc_ean,
            "remarks": list(self.remarks),
        }


@dataclass
class CueSheet:
    """Represents a complete CUE sheet."""

    disc: DiscInfo = field(default_factory=DiscInfo)
    tracks: list[Track] = field(default_factory=list)

    def get_track(self, number: int) -> Track | None:
        """Get the first track with the given number."""
        for track in self.tracks:
            if track.number == number:
                return track
        return None

    def get_track_count(self) -> int:
        """Get total number of tracks."""
        return len(self.tracks)

    def get_referenced_files(self) -> list[str]:
        """Distinct track filenames in document order."""
        filenames: list[str] = []
        for track in self.tracks:
            if track.file and track.file.filename not in filenames:
                filenames.append(track.file.filename)
        return filenames

    def to_dict(self) -> dict[str, Any]:
        """Convert CUE sheet to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "disc": self.disc.to_dict(),
            "tracks": [track.to_dict() for track in self.tracks],
        }


@dataclass(frozen=True)
class Diagnostic:
    """A line-scoped parse error or warning."""

    line: int
    message: str
    raw_line: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "message": self.message, "raw_line": self.raw_line}


@dataclass
class ParseResult:
    """Outcome of parsing CUE content.

    ``cue_sheet`` is only set when no errors were recorded; warnings never
    block a result.
    """

    cue_sheet: CueSheet | None = None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "cue_sheet": self.cue_sheet.to_dict() if self.cue_sheet else None,
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
