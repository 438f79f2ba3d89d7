"""CUE sheet parser for reading and interpreting CUE files.

Example usage:
    >>> from cue_sheet.parser import CueParser
    >>> parser = CueParser()

    # Parse from file
    >>> result = parser.parse_file('mix.cue')
    >>> if result.cue_sheet:
    ...     print(f"Album: {result.cue_sheet.disc.title}")

    # Parse from string
    >>> cue_content = '''
    ... TITLE "Example Album"
    ...   TRACK 01 AUDIO
    ...     TITLE "First Track"
    ...     FILE "audio.mp3" MP3
    ...     INDEX 01 00:00:00
    ... '''
    >>> result = parser.parse(cue_content)
    >>> for diagnostic in result.errors + result.warnings:
    ...     print(diagnostic)
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import chardet

from .cue_time import CueTime
from .exceptions import CueError, CueParsingError, InvalidCommandError
from .models import (
    CATALOG_PATTERN,
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

ISRC_PATTERN = re.compile(r"^[A-Z0-9]{12}$")
_NUMBER_PATTERN = re.compile(r"^\d+$", re.ASCII)
_PATH_SEPARATORS = re.compile(r"[/\\]")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
# Closing quote is the first quote that is not doubled
_QUOTED_FILENAME = re.compile(r'^"((?:[^"]|"")*)"(.*)$')


class CueCommand(Enum):
    """Every command keyword the parser understands."""

    REM = "REM"
    CATALOG = "CATALOG"
    CDTEXTFILE = "CDTEXTFILE"
    FILE = "FILE"
    TRACK = "TRACK"
    INDEX = "INDEX"
    PREGAP = "PREGAP"
    POSTGAP = "POSTGAP"
    FLAGS = "FLAGS"
    ISRC = "ISRC"
    TITLE = "TITLE"
    PERFORMER = "PERFORMER"
    SONGWRITER = "SONGWRITER"
    COMPOSER = "COMPOSER"
    ARRANGER = "ARRANGER"
    MESSAGE = "MESSAGE"
    DISC_ID = "DISC_ID"
    GENRE = "GENRE"
    UPC_EAN = "UPC_EAN"

    @classmethod
    def from_keyword(cls, keyword: str) -> "CueCommand | None":
        """Resolve a keyword case-insensitively, or None when unknown."""
        try:
            return cls(keyword.upper())
        except ValueError:
            return None


def tokenize_line(line: str) -> tuple[str, str]:
    """Split a line into its command keyword and trimmed argument string.

    Blank lines yield ``("", "")``.
    """
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def unquote(value: str) -> str:
    """Strip surrounding double quotes and collapse doubled inner quotes.

    Unquoted values are returned trimmed but otherwise verbatim.
    """
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].replace('""', '"')
    return value


def _parse_number(token: str, label: str, low: int, high: int) -> int:
    if not _NUMBER_PATTERN.match(token) or not low <= int(token) <= high:
        raise InvalidCommandError(f"Invalid {label} number: {token}. Must be between {low} and {high}.")
    return int(token)


@dataclass
class ParseContext:
    """Mutable state for a single parse call."""

    disc: DiscInfo = field(default_factory=DiscInfo)
    tracks: list[Track] = field(default_factory=list)
    open_track: Track | None = None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    line_number: int = 0
    raw_line: str = ""

    def warn(self, message: str) -> None:
        """Record a warning against the line being processed."""
        self.warnings.append(Diagnostic(line=self.line_number, message=message, raw_line=self.raw_line))

    def error(self, message: str) -> None:
        """Record an error against the line being processed."""
        self.errors.append(Diagnostic(line=self.line_number, message=message, raw_line=self.raw_line))

    def commit_track(self) -> None:
        """Move the open track, if any, onto the committed track list."""
        if self.open_track is not None:
            self.tracks.append(self.open_track)
            self.open_track = None

    def require_track(self, command: CueCommand) -> Track:
        if self.open_track is None:
            raise InvalidCommandError(f"{command.value} command must be inside a TRACK")
        return self.open_track


class CueParser:
    """Parser for CUE sheet content.

    All per-parse state lives in a :class:`ParseContext` created by each call,
    so a single parser may be shared between threads.
    """

    # Maximum CUE file size (10MB) - CUE files are text and should never be this large
    MAX_FILE_SIZE = 10 * 1024 * 1024

    def __init__(self, logger: logging.Logger | None = None, max_file_size: int | None = None) -> None:
        """Initialize the CUE parser.

        Args:
            logger: Optional logger instance for debug output
            max_file_size: Optional override of the file size limit used by parse_file
        """
        self.logger = logger or logging.getLogger(__name__)
        self.max_file_size = max_file_size if max_file_size is not None else self.MAX_FILE_SIZE

    def parse_file(self, file_path: str | Path, encoding: str | None = None) -> ParseResult:
        """Parse a CUE file from disk.

        Args:
            file_path: Path to the CUE file
            encoding: Optional encoding override, auto-detected if None

        Returns:
            ParseResult for the file content

        Raises:
            CueParsingError: If the file is missing, too large or cannot be decoded
        """
        path = Path(file_path)
        if not path.exists():
            raise CueParsingError(f"CUE file not found: {file_path}")

        file_size = path.stat().st_size
        if file_size > self.max_file_size:
            self.logger.warning(f"CUE file rejected - too large: {file_size} bytes")
            raise CueParsingError(f"CUE file too large: {file_size} bytes (max {self.max_file_size} bytes)")

        self.logger.debug(f"Parsing CUE file: {file_path} ({file_size} bytes)")

        try:
            raw_data = path.read_bytes()
            if encoding is None:
                detected = chardet.detect(raw_data)
                encoding = detected["encoding"] or "utf-8"
            content = raw_data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise CueParsingError(f"Encoding error: {e}") from e
        except OSError as e:
            raise CueParsingError(f"Failed to read file: {e}") from e

        return self.parse(content)

    def parse(self, content: str) -> ParseResult:
        """Parse CUE sheet content.

        Args:
            content: CUE sheet content as string

        Returns:
            ParseResult carrying the CueSheet when no errors were found
        """
        ctx = ParseContext()

        for line_num, line in enumerate(_LINE_BREAK.split(content.removeprefix("\ufeff")), 1):
            ctx.line_number = line_num
            ctx.raw_line = line
            try:
                self._parse_line(line, ctx)
            except (CueError, ValueError) as e:
                ctx.error(str(e))

        # Finalize any pending track
        ctx.commit_track()

        result = ParseResult(errors=ctx.errors, warnings=ctx.warnings)
        if ctx.errors:
            self.logger.info(f"CUE sheet rejected: {len(ctx.errors)} errors, {len(ctx.warnings)} warnings")
        else:
            result.cue_sheet = CueSheet(disc=ctx.disc, tracks=ctx.tracks)
            self.logger.info(
                f"Successfully parsed CUE sheet: {len(ctx.tracks)} tracks, {len(ctx.warnings)} warnings"
            )

        return result

    def _parse_line(self, line: str, ctx: ParseContext) -> None:
        """Parse a single line of CUE content."""
        keyword, args = tokenize_line(line)

        # Skip empty lines
        if not keyword:
            return

        command = CueCommand.from_keyword(keyword)
        if command is None:
            ctx.warn(f"Unknown command: {keyword}")
            return

        handler = getattr(self, f"_handle_{command.name.lower()}")
        handler(args, ctx)

    def _handle_rem(self, args: str, ctx: ParseContext) -> None:
        """Handle REM command."""
        if ctx.open_track is not None:
            ctx.open_track.remarks.append(args)
        else:
            ctx.disc.remarks.append(args)

    def _handle_catalog(self, args: str, ctx: ParseContext) -> None:
        """Handle CATALOG command."""
        if not CATALOG_PATTERN.match(args):
            raise InvalidCommandError(f"CATALOG must be exactly 13 digits, got: {args}")
        ctx.disc.catalog = args

    def _handle_cdtextfile(self, args: str, ctx: ParseContext) -> None:
        ctx.disc.cdtextfile = unquote(args)

    def _handle_file(self, args: str, ctx: ParseContext) -> None:
        """Handle FILE command."""
        file_info = self._parse_file_args(args)

        if ctx.open_track is None:
            # Global FILE associations are discarded; each TRACK carries its own FILE
            ctx.warn("Global FILE commands are not recommended. Each TRACK should have its own FILE.")
            return

        ctx.open_track.file = file_info

    def _parse_file_args(self, args: str) -> FileInfo:
        if not args:
            raise InvalidCommandError("FILE command requires a filename")

        if args.startswith('"'):
            match = _QUOTED_FILENAME.match(args)
            if not match:
                raise InvalidCommandError("Unterminated quoted filename")
            filename = match.group(1).replace('""', '"')
            remaining = match.group(2).strip()
        else:
            parts = args.split(maxsplit=1)
            filename = parts[0]
            remaining = parts[1].strip() if len(parts) > 1 else ""

        name = _PATH_SEPARATORS.split(filename)[-1]
        if not name:
            raise InvalidCommandError(f"FILE command has no filename: {filename}")

        file_format = None
        if remaining:
            try:
                file_format = FileFormat.from_string(remaining)
            except ValueError:
                raise InvalidCommandError(f"Invalid file format: {remaining}") from None

        return FileInfo(filename=name, format=file_format)

    def _handle_track(self, args: str, ctx: ParseContext) -> None:
        """Handle TRACK command."""
        # Save the previous track before validating the new one
        ctx.commit_track()

        parts = args.split()
        if len(parts) < 2:
            raise InvalidCommandError("TRACK command requires track number and mode")

        track_num = _parse_number(parts[0], "track", 1, 99)
        try:
            mode = TrackMode.from_string(parts[1])
        except ValueError:
            raise InvalidCommandError(f"Invalid track mode: {parts[1]}") from None

        if any(track.number == track_num for track in ctx.tracks):
            ctx.warn(f"Duplicate track number: {track_num:02d}")

        ctx.open_track = Track(number=track_num, mode=mode)

    def _handle_index(self, args: str, ctx: ParseContext) -> None:
        """Handle INDEX command."""
        track = ctx.require_track(CueCommand.INDEX)

        parts = args.split()
        if len(parts) < 2:
            raise InvalidCommandError("INDEX command requires index number and time")

        index_num = _parse_number(parts[0], "index", 0, 99)
        cue_time = CueTime.from_string(parts[1])

        if track.get_index(index_num) is not None:
            ctx.warn(f"Duplicate INDEX {index_num:02d} in track {track.number:02d}")

        track.indexes.append(TrackIndex(number=index_num, time=cue_time))

    def _handle_pregap(self, args: str, ctx: ParseContext) -> None:
        track = ctx.require_track(CueCommand.PREGAP)
        track.pregap = CueTime.from_string(args)

    def _handle_postgap(self, args: str, ctx: ParseContext) -> None:
        track = ctx.require_track(CueCommand.POSTGAP)
        track.postgap = CueTime.from_string(args)

    def _handle_flags(self, args: str, ctx: ParseContext) -> None:
        """Handle FLAGS command."""
        track = ctx.require_track(CueCommand.FLAGS)

        tokens = args.split()
        if not tokens:
            raise InvalidCommandError("FLAGS command requires at least one flag")

        flags = []
        for token in tokens:
            try:
                flags.append(TrackFlag.from_string(token))
            except ValueError:
                raise InvalidCommandError(f"Invalid flag: {token}") from None

        track.flags = flags

    def _handle_isrc(self, args: str, ctx: ParseContext) -> None:
        """Handle ISRC command."""
        track = ctx.require_track(CueCommand.ISRC)

        # ISRC format: CCOOOYYSSSSS (country, owner, year, designation)
        if not ISRC_PATTERN.match(args):
            ctx.warn(f"ISRC format may be invalid: {args}. Expected 12 uppercase letters or digits")

        track.isrc = args

    def _set_text(self, attribute: str, args: str, ctx: ParseContext) -> None:
        target = ctx.open_track if ctx.open_track is not None else ctx.disc
        setattr(target, attribute, unquote(args))

    def _handle_title(self, args: str, ctx: ParseContext) -> None:
        self._set_text("title", args, ctx)

    def _handle_performer(self, args: str, ctx: ParseContext) -> None:
        self._set_text("performer", args, ctx)

    def _handle_songwriter(self, args: str, ctx: ParseContext) -> None:
        self._set_text("songwriter", args, ctx)

    def _handle_composer(self, args: str, ctx: ParseContext) -> None:
        self._set_text("composer", args, ctx)

    def _handle_arranger(self, args: str, ctx: ParseContext) -> None:
        self._set_text("arranger", args, ctx)

    def _handle_message(self, args: str, ctx: ParseContext) -> None:
        self._set_text("message", args, ctx)

    def _handle_disc_id(self, args: str, ctx: ParseContext) -> None:
        ctx.disc.disc_id = unquote(args)

    def _handle_genre(self, args: str, ctx: ParseContext) -> None:
        ctx.disc.genre = unquote(args)

    def _handle_upc_ean(self, args: str, ctx: ParseContext) -> None:
        ctx.disc.upc_ean = unquote(args)


def parse_cue_sheet(content: str) -> ParseResult:
    """Parse CUE content with a fresh parser."""
    return CueParser().parse(content)
