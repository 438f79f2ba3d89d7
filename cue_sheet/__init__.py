"""CUE sheet module for parsing, validating and serializing CUE sheets."""

__version__ = "1.0.0"

# Time exports
from .cue_time import (
    CueTime,
    HMSTime,
    add_hms_time,
    add_msf_time,
    compare_hms_time,
    compare_msf_time,
    format_hms_time,
    format_msf_time,
    frames_to_msf,
    hms_to_seconds,
    msf_to_frames,
    msf_to_seconds,
    parse_hms_time,
    parse_msf_time,
    seconds_to_hms,
    seconds_to_msf,
    subtract_hms_time,
    subtract_msf_time,
)

# Exception exports
from .exceptions import CueError, CueParsingError, InvalidCommandError, InvalidTimeFormatError, TimeArithmeticError

# Model exports
from .models import (
    CueSheet,
    Diagnostic,
    DiscInfo,
    FileFormat,
    FileInfo,
    ParseResult,
    Track,
    TrackFlag,
    TrackIndex,
    TrackMode,
)

# Parser exports
from .parser import CueCommand, CueParser, parse_cue_sheet

# Serializer exports
from .serializer import create_minimal_cue_sheet, format_cue_sheet, serialize_cue_sheet, serialize_timeline

__all__ = [
    # Parser
    "CueCommand",
    # Exceptions
    "CueError",
    # Parser
    "CueParser",
    # Exceptions
    "CueParsingError",
    # Models
    "CueSheet",
    # Time
    "CueTime",
    # Models
    "Diagnostic",
    "DiscInfo",
    "FileFormat",
    "FileInfo",
    # Time
    "HMSTime",
    # Exceptions
    "InvalidCommandError",
    "InvalidTimeFormatError",
    # Models
    "ParseResult",
    # Exceptions
    "TimeArithmeticError",
    # Models
    "Track",
    "TrackFlag",
    "TrackIndex",
    "TrackMode",
    # Time
    "add_hms_time",
    "add_msf_time",
    "compare_hms_time",
    "compare_msf_time",
    # Serializer
    "create_minimal_cue_sheet",
    # Time
    "format_hms_time",
    # Serializer
    "format_cue_sheet",
    # Time
    "format_msf_time",
    "frames_to_msf",
    "hms_to_seconds",
    "msf_to_frames",
    "msf_to_seconds",
    # Parser
    "parse_cue_sheet",
    # Time
    "parse_hms_time",
    "parse_msf_time",
    "seconds_to_hms",
    "seconds_to_msf",
    # Serializer
    "serialize_cue_sheet",
    "serialize_timeline",
    # Time
    "subtract_hms_time",
    "subtract_msf_time",
]
